from app.core.gateway import EngineResult
from app.models.document import TenderDocument
from app.models.search_response import PaginatedSearchResponse
from search.pagination import NormalizedParams, total_pages


def assemble(params: NormalizedParams, result: EngineResult) -> PaginatedSearchResponse:
    """
    Package an engine result into the paginated response.
    The engine already applied offset and size, so documents are taken as they come.
    """
    return PaginatedSearchResponse(
        page=params.page,
        page_size=params.size,
        total_results=result.total_hits,
        total_pages=total_pages(result.total_hits, params.size),
        results=[TenderDocument.model_validate(doc) for doc in result.documents],
    )
