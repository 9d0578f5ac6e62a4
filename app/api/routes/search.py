from fastapi import APIRouter, Request
from app.api.errors import failure_response
from app.core.outcome import EngineInvalidQuery, UnexpectedFailure
from app.models.error import ErrorResponse
from app.models.search_query import SearchRequest
from app.models.search_response import PaginatedSearchResponse

router = APIRouter()

@router.post(
    "",
    response_model=PaginatedSearchResponse,
    response_model_exclude_unset=True,
    responses={500: {"model": ErrorResponse}},
)
async def search(request: Request, body: SearchRequest):
    service = request.app.state.search_service

    outcome = await service.search(body)

    if isinstance(outcome, (EngineInvalidQuery, UnexpectedFailure)):
        return failure_response(outcome)

    return outcome
