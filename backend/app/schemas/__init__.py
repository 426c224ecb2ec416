"""Wire contracts (pydantic request/response schemas, camelCase JSON)."""
