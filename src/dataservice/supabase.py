"""Supabase (PostgREST) fact service over httpx."""

from typing import Any, Optional

import httpx
import structlog

from board.errors import ServiceError
from board.models import Fact, FactId
from dataservice.base import FactService
from shared_types import VoteKind

logger = structlog.get_logger(source="supabase")


class SupabaseFactService(FactService):
    """Async client for the ``facts`` table of a Supabase project.

    No retries: a failed call raises ServiceError and the user re-triggers
    the action.
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        table: str = "facts",
        timeout: Optional[float] = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if not url:
            raise ValueError("Supabase URL is required")
        self.endpoint = f"{url.rstrip('/')}/rest/v1/{table}"
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "User-Agent": "TIL/1.0",
            },
        )

    @property
    def name(self) -> str:
        return "supabase"

    async def select(self, category: Optional[str] = None) -> list[Fact]:
        params = {"select": "*", "order": f"{VoteKind.INTERESTING.value}.desc"}
        if category:
            params["category"] = f"eq.{category}"
        rows = await self._request("GET", params=params)
        logger.debug("select", category=category, count=len(rows))
        return [_to_fact(r) for r in rows]

    async def insert(self, text: str, source: str, category: str) -> Fact:
        rows = await self._request(
            "POST",
            json=[{"text": text, "source": source, "category": category}],
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise ServiceError("Insert returned no rows")
        return _to_fact(rows[0])

    async def update(self, fact_id: FactId, field: VoteKind, value: int) -> Fact:
        rows = await self._request(
            "PATCH",
            params={"id": f"eq.{fact_id}"},
            json={field.value: value},
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise ServiceError(f"No fact with id {fact_id}")
        return _to_fact(rows[0])

    async def _request(self, method: str, **kwargs) -> list[dict[str, Any]]:
        try:
            response = await self.client.request(method, self.endpoint, **kwargs)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("http_error", method=method, status=e.response.status_code)
            raise ServiceError(f"HTTP {e.response.status_code} from data service") from e
        except httpx.RequestError as e:
            logger.warning("request_error", method=method, error=str(e))
            raise ServiceError(f"Data service unreachable: {e}") from e
        except ValueError as e:
            raise ServiceError("Malformed response from data service") from e

        if not isinstance(data, list):
            raise ServiceError("Unexpected response shape from data service")
        return data

    async def close(self) -> None:
        await self.client.aclose()


def _to_fact(row: dict[str, Any]) -> Fact:
    try:
        return Fact.from_record(row)
    except (KeyError, TypeError, ValueError) as e:
        raise ServiceError(f"Malformed fact record: {e}") from e
