"""Health check response schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response.

    Status is "degraded" when the acronym document cannot be fetched; lookups
    still answer in that state, they just find nothing.
    """

    status: Literal["ok", "degraded"] = Field(
        ...,
        description="Service health status",
        examples=["ok"],
    )
    version: str = Field(
        ...,
        description="API version",
        examples=["0.1.0"],
    )
    source: Literal["available", "unavailable"] = Field(
        ...,
        description="Whether the acronym document could be fetched",
        examples=["available"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "ok",
                    "version": "0.1.0",
                    "source": "available",
                }
            ]
        }
    }
