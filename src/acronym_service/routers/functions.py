"""Parser function API endpoints.

Endpoints:
- GET /api/v1/functions: List registered parser functions
- POST /api/v1/functions/{name}: Call one parser function
- POST /api/v1/parse: Call several parser functions within one parse

Endpoints are plain (sync) functions: the source fetch is blocking, so
FastAPI runs them in its thread pool.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from acronym_service.acronyms import AcronymExtension, FunctionNotRegisteredError
from acronym_service.config import settings
from acronym_service.dependencies import get_extension
from acronym_service.logging_config import get_logger
from acronym_service.schemas.functions import (
    FunctionCallRequest,
    FunctionCallResponse,
    FunctionListResponse,
    ParseRequest,
    ParseResponse,
)

router = APIRouter(prefix=settings.api_v1_prefix, tags=["functions"])
logger = get_logger(__name__)


def _not_registered(error: FunctionNotRegisteredError) -> HTTPException:
    logger.info("functions.endpoint.not_registered", function=error.name)
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Parser function '{error.name}' is not available",
    )


@router.get(
    "/functions",
    response_model=FunctionListResponse,
    status_code=status.HTTP_200_OK,
    summary="List parser functions",
)
def list_functions(
    extension: AcronymExtension = Depends(get_extension),
) -> FunctionListResponse:
    """List the registered parser functions and the lookup defaults."""
    return FunctionListResponse(
        functions=extension.enabled_functions,
        default_category=extension.config.category,
        source_page=extension.config.source_page,
    )


@router.post(
    "/functions/{name}",
    response_model=FunctionCallResponse,
    status_code=status.HTTP_200_OK,
    summary="Call a parser function",
    description="""
Call `acronym` or `acronymexists` with up to four positional arguments.

- **acronym**: `[category,] acronym, property, not-found text`
- **acronymexists**: `[category,] acronym, found text, not-found text`

Leave the second argument empty to look the first one up in the default
category. Each request is its own parse, so the acronym document is fetched
fresh.
    """,
)
def call_function(
    name: str,
    request: FunctionCallRequest,
    extension: AcronymExtension = Depends(get_extension),
) -> FunctionCallResponse:
    """Call a single parser function in a fresh session.

    Raises:
        HTTPException 404: If the function is unknown or disabled
    """
    session = extension.new_session()
    with structlog.contextvars.bound_contextvars(
        function=name, source_page=extension.config.source_page
    ):
        try:
            result = session.call(name, request.args)
        except FunctionNotRegisteredError as e:
            raise _not_registered(e) from e

    return FunctionCallResponse(function=name, result=result)


@router.post(
    "/parse",
    response_model=ParseResponse,
    status_code=status.HTTP_200_OK,
    summary="Call parser functions for one page",
    description=(
        "Runs a batch of parser function calls as a single parse: all calls "
        "share one acronym store, so the acronym document is fetched at most "
        "once per request."
    ),
)
def parse(
    request: ParseRequest,
    extension: AcronymExtension = Depends(get_extension),
) -> ParseResponse:
    """Run a batch of calls in one session.

    Raises:
        HTTPException 404: If any call names an unknown or disabled function
    """
    session = extension.new_session()
    results: list[FunctionCallResponse] = []

    with structlog.contextvars.bound_contextvars(
        source_page=extension.config.source_page, calls=len(request.calls)
    ):
        for call in request.calls:
            try:
                result = session.call(call.function, call.args)
            except FunctionNotRegisteredError as e:
                raise _not_registered(e) from e
            results.append(FunctionCallResponse(function=call.function, result=result))

        logger.debug("functions.parse.completed", **session.store.stats)
    return ParseResponse(results=results, stats=session.store.stats)
