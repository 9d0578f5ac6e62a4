import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

import httpx

from app.core.exceptions import GatewayTransportError
from search.query import QuerySpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineResult:
    valid: bool
    diagnostic: str
    total_hits: int = 0
    documents: List[Dict[str, Any]] = field(default_factory=list)


def _extract_total(hits: Dict[str, Any]) -> int:
    total = hits.get("total", 0)
    # OpenSearch reports {"value": n, "relation": "eq"}, older clusters a bare number
    if isinstance(total, dict):
        total = total.get("value", 0)
    if isinstance(total, bool) or not isinstance(total, int):
        raise TypeError(f"hits.total is not an integer: {total!r}")
    return max(total, 0)


def _error_diagnostic(response: httpx.Response) -> str:
    """
    Best effort at the engine's own explanation of why it rejected the call.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text or f"status={response.status_code}"

    error = body.get("error") if isinstance(body, dict) else None

    if isinstance(error, dict):
        root_causes = error.get("root_cause") or []
        cause = root_causes[0] if root_causes and isinstance(root_causes[0], dict) else error
        error_type = cause.get("type")
        reason = cause.get("reason")
        if error_type and reason:
            return f"{error_type}: {reason}"
        if reason:
            return str(reason)

    if isinstance(error, str):
        return error

    return response.text or f"status={response.status_code}"


class SearchGateway:
    """
    Runs one search against the index. One round trip, no retries.

    The httpx client is owned by the caller (pooling, auth, TLS and timeouts are its
    concern). A rejected query comes back as an invalid EngineResult; anything that
    prevents reading an answer at all raises GatewayTransportError.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def execute(self, index: str, spec: QuerySpec, offset: int, size: int) -> EngineResult:
        path = f"/{index}/_search"
        body = {
            "from": offset,
            "size": size,
            "query": spec.to_dsl(),
            "track_total_hits": True,
        }

        try:
            response = await self.client.post(path, json=body)
        except httpx.HTTPError as e:
            raise GatewayTransportError(details={"path": path, "error": type(e).__name__}) from e

        if not response.is_success:
            diagnostic = _error_diagnostic(response)
            logger.debug("Index rejected search on %s (status=%s): %s", path, response.status_code, diagnostic)
            return EngineResult(valid=False, diagnostic=diagnostic)

        try:
            payload = response.json()
            hits = payload["hits"]
            total_hits = _extract_total(hits)
            documents = [hit.get("_source") or {} for hit in hits.get("hits", [])]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise GatewayTransportError(
                "The search index returned an unreadable response",
                details={"path": path, "status_code": response.status_code},
            ) from e

        diagnostic = f"Successful ({response.status_code}) call on POST: {path}"
        return EngineResult(valid=True, diagnostic=diagnostic, total_hits=total_hits, documents=documents)
