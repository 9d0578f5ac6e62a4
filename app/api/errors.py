import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from app.core.exceptions import SearchError
from app.core.outcome import EngineInvalidQuery, SearchFailure, UnexpectedFailure
from app.models.error import ErrorResponse

logger = logging.getLogger(__name__)

def failure_response(failure: SearchFailure) -> JSONResponse:
    if isinstance(failure, EngineInvalidQuery):
        logger.error("OpenSearch query failed: %s", failure.diagnostic)
    else:
        cause = failure.cause
        if isinstance(cause, SearchError):
            logger.error("Search failed with %s: %s details=%s", cause.code, cause.message, cause.details)
        logger.error(
            "An unexpected error occurred during search.",
            exc_info=(type(cause), cause, cause.__traceback__)
        )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message=failure.message).model_dump()
    )

async def unexpected_error_handler(request: Request, exc: Exception):
    return failure_response(UnexpectedFailure(cause=exc))
