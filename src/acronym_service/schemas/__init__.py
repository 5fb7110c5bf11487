"""Pydantic schemas for API request/response validation."""

from .functions import (
    FunctionCall,
    FunctionCallRequest,
    FunctionCallResponse,
    FunctionListResponse,
    ParseRequest,
    ParseResponse,
)
from .health import HealthResponse

__all__ = [
    # Health
    "HealthResponse",
    # Parser functions
    "FunctionCall",
    "FunctionCallRequest",
    "FunctionCallResponse",
    "FunctionListResponse",
    "ParseRequest",
    "ParseResponse",
]
