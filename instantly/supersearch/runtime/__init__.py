"""Runtime layer: HTTP transport, request runner and pagination."""
