"""Operation catalog for the SuperSearch enrichment resource.

Each operation is described once: its label, description, action text and
the model its fields validate against. ``parse_parameters`` turns a raw
field mapping into that model.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import pydantic

from .core.enums import Operation
from .core.exceptions import ValidationError
from .models import (
    AddToResourceParams,
    AIEnrichmentParams,
    CreateEnrichmentParams,
    GetEnrichmentParams,
    HistoryParams,
    RunEnrichmentParams,
)
from .models.base import FormModel


@dataclass(frozen=True)
class OperationDefinition:
    operation: Operation
    name: str
    description: str
    action: str
    params_model: type[FormModel]


_OPERATIONS: dict[Operation, OperationDefinition] = {
    definition.operation: definition
    for definition in (
        OperationDefinition(
            Operation.CREATE,
            "Create SuperSearch Enrichment",
            "Create a new SuperSearch enrichment with search criteria and enrichment settings",
            "Create a SuperSearch enrichment",
            CreateEnrichmentParams,
        ),
        OperationDefinition(
            Operation.GET,
            "Get SuperSearch Enrichment",
            "Get SuperSearch enrichment details and status by resource ID",
            "Get a SuperSearch enrichment",
            GetEnrichmentParams,
        ),
        OperationDefinition(
            Operation.RUN,
            "Run SuperSearch Enrichment",
            "Execute enrichment for specific leads or all unenriched leads",
            "Run a SuperSearch enrichment",
            RunEnrichmentParams,
        ),
        OperationDefinition(
            Operation.ADD_TO_RESOURCE,
            "Add SuperSearch Enrichment to Resource",
            "Add enrichment results to a campaign or lead list",
            "Add SuperSearch enrichment to resource",
            AddToResourceParams,
        ),
        OperationDefinition(
            Operation.RUN_AI_ENRICHMENT,
            "Create AI Personalization",
            "Run AI-powered personalization on existing leads with custom prompts",
            "Create AI personalization",
            AIEnrichmentParams,
        ),
        OperationDefinition(
            Operation.GET_HISTORY,
            "Get Enrichment History",
            "Get enrichment history and audit trail for a resource",
            "Get enrichment history",
            HistoryParams,
        ),
    )
}

DEFAULT_OPERATION = Operation.CREATE


def resolve_operation(operation: Operation | str) -> Operation:
    """Convert an operation name to ``Operation``.

    Raises:
        ValidationError: If the name is unknown
    """
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation)
    except ValueError:
        known = ", ".join(op.value for op in Operation)
        raise ValidationError(f"Unknown operation '{operation}'. Expected one of: {known}") from None


def get_operation_definition(operation: Operation | str) -> OperationDefinition:
    return _OPERATIONS[resolve_operation(operation)]


def list_operations() -> list[OperationDefinition]:
    return list(_OPERATIONS.values())


def parse_parameters(
    operation: Operation | str,
    fields: Mapping[str, Any] | FormModel,
    *,
    item_index: int | None = None,
) -> FormModel:
    """Validate ``fields`` against the operation's parameter model.

    Already-built models of the right type pass through unchanged.

    Raises:
        ValidationError: If a field is missing or invalid
    """
    model = get_operation_definition(operation).params_model
    if isinstance(fields, model):
        return fields
    if isinstance(fields, FormModel):
        raise ValidationError(
            f"Expected {model.__name__} for '{resolve_operation(operation).value}', "
            f"got {type(fields).__name__}",
            item_index=item_index,
        )
    try:
        return model.model_validate(dict(fields))
    except pydantic.ValidationError as e:
        raise ValidationError(_format_errors(e), item_index=item_index) from e


def _format_errors(error: pydantic.ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ())) or "parameters"
        parts.append(f"{location}: {detail.get('msg', 'invalid value')}")
    return "Invalid parameters: " + "; ".join(parts)
