"""Parser function request and response schemas.

Arguments are sent exactly as they appear between the pipes of a parser
function call. The service does not expand wikitext, so each argument is used
verbatim as its own expansion.
"""

from typing import Any

from pydantic import BaseModel, Field


class FunctionCallRequest(BaseModel):
    """Arguments for a single parser function call.

    Examples:
        >>> FunctionCallRequest(args=["btw"])
        >>> FunctionCallRequest(args=["chat", "btw", "tone", "unknown"])
    """

    args: list[str] = Field(
        ...,
        max_length=4,
        description="Positional arguments (at most 4)",
        examples=[["btw"], ["chat", "btw", "tone", "unknown"]],
    )


class FunctionCall(FunctionCallRequest):
    """A named parser function call inside a parse batch."""

    function: str = Field(
        ...,
        min_length=1,
        description="Parser function name",
        examples=["acronym", "acronymexists"],
    )


class FunctionCallResponse(BaseModel):
    """Output of a parser function call."""

    function: str = Field(..., description="Parser function name")
    result: str = Field(..., description="Function output text", examples=["by the way"])


class ParseRequest(BaseModel):
    """Calls made while rendering one page; they share one acronym store."""

    calls: list[FunctionCall] = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Parser function calls, in page order",
    )


class ParseResponse(BaseModel):
    """Outputs of a parse batch, in call order."""

    results: list[FunctionCallResponse] = Field(default_factory=list)
    stats: dict[str, Any] = Field(
        default_factory=dict,
        description="Counts describing the acronym data loaded for this parse",
        examples=[{"initialized": True, "categories": 2, "acronyms": 40, "properties": 12}],
    )


class FunctionListResponse(BaseModel):
    """Registered parser functions and the effective lookup defaults."""

    functions: list[str] = Field(..., examples=[["acronym", "acronymexists"]])
    default_category: str = Field(..., examples=["all"])
    source_page: str = Field(..., examples=["Acronyms.json"])
