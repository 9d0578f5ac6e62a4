import logging
from time import perf_counter

from app.core.assembler import assemble
from app.core.exceptions import GatewayTransportError
from app.core.gateway import SearchGateway
from app.core.outcome import EngineInvalidQuery, SearchOutcome, UnexpectedFailure
from app.models.search_query import SearchRequest
from search.pagination import normalize
from search.query import build_query

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, gateway: SearchGateway, index: str):
        self.gateway = gateway
        self.index = index

    async def search(self, request: SearchRequest) -> SearchOutcome:
        logger.info(
            "Search request received. Query: '%s', Page: %s, Size: %s",
            request.query, request.page, request.page_size
        )

        start_time = perf_counter()

        params = normalize(request.page, request.page_size)
        spec = build_query(request.query)

        try:
            result = await self.gateway.execute(self.index, spec, params.offset, params.size)
        except GatewayTransportError as e:
            return UnexpectedFailure(cause=e)

        if not result.valid:
            return EngineInvalidQuery(diagnostic=result.diagnostic)

        response = assemble(params, result)

        took_ms = round((perf_counter() - start_time) * 1000, 2)
        logger.info(
            "Search successful. Found %s results. Returning page %s of %s. took_ms=%s",
            response.total_results, response.page, response.total_pages, took_ms
        )

        return response

    def health_check(self):
        return {
            "status": "ok",
            "index": self.index,
        }
