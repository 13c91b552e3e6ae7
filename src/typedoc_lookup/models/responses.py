"""API response models for MCP tool return types."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response for tool failures."""

    error: str
