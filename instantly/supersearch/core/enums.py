"""Core enumerations for the SuperSearch enrichment operations.

Architecture:
    These enums provide type safety for the small set of fixed values the
    Instantly API accepts. String enums serialize directly into request
    bodies; ``ResourceType`` is an int enum because the API encodes
    campaigns and lists as numbers.

Key Types:
    - Operation: Available enrichment operations
    - ResourceType: Campaign vs lead list
    - EnrichmentType: Individual enrichment kinds
    - ModelVersion: AI models for personalization
    - LocatorMode: How a resource ID was supplied
"""

from enum import Enum, IntEnum


class Operation(str, Enum):
    """Operations exposed for the SuperSearch enrichment resource."""

    CREATE = "create"
    GET = "get"
    RUN = "run"
    ADD_TO_RESOURCE = "addToResource"
    RUN_AI_ENRICHMENT = "runAiEnrichment"
    GET_HISTORY = "getHistory"


class ResourceType(IntEnum):
    """Resource kinds leads can be enriched into."""

    CAMPAIGN = 1
    LIST = 2


class EnrichmentType(str, Enum):
    """Enrichment kinds, valued with the API's payload keys."""

    WORK_EMAIL_ENRICHMENT = "work_email_enrichment"
    FULLY_ENRICHED_PROFILE = "fully_enriched_profile"
    EMAIL_VERIFICATION = "email_verification"
    JOB_LISTING = "joblisting"
    TECHNOLOGIES = "technologies"
    NEWS = "news"
    FUNDING = "funding"


class ModelVersion(str, Enum):
    """AI models accepted by the personalization endpoint."""

    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    GPT_4_TURBO = "gpt-4-turbo"
    CLAUDE_3_5_SONNET = "claude-3-5-sonnet-20241022"
    CLAUDE_3_5_HAIKU = "claude-3-5-haiku-20241022"
    CLAUDE_3_OPUS = "claude-3-opus-20240229"


class LocatorMode(str, Enum):
    """How a resource locator value was chosen."""

    LIST = "list"
    ID = "id"
