# solrexpr/client.py
"""Async client for a Solr core's select handler."""

import logging
import os
from collections.abc import AsyncIterator
from dataclasses import replace
from typing import Any

import httpx

from solrexpr.models import SolrQuery, SolrResponse
from solrexpr.query.expressions import Expression

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8983/solr"
DEFAULT_CORE = "collection1"


class SolrClient:
    """Send SolrQuery objects to a running Solr core."""

    def __init__(
        self,
        base_url: str | None = None,
        core: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("SOLR_URL") or DEFAULT_URL).rstrip("/")
        self.core = core or os.getenv("SOLR_CORE") or DEFAULT_CORE
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return self.core

    @property
    def select_url(self) -> str:
        return f"{self.base_url}/{self.core}/select"

    async def select(self, query: SolrQuery | Expression | str, **params: Any) -> SolrResponse:
        """Execute a single select request."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with client:'")

        query = as_query(query, **params)
        logger.debug("Query string: %s", query.query_string)

        response = await self._client.get(self.select_url, params=query.to_params())
        logger.debug("Requesting: %s", response.request.url)
        response.raise_for_status()
        logger.debug("Response status: %s", response.status_code)

        result = SolrResponse.from_json(response.json())
        logger.debug("Results count: %s of %s", len(result.docs), result.num_found)
        return result

    async def stream(
        self,
        query: SolrQuery | Expression | str,
        page_size: int = 100,
        max_results: int | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """Yield documents, paging through the result set with start/rows."""
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0, got: {page_size}")

        query = as_query(query)
        start = query.start
        count = 0

        while max_results is None or count < max_results:
            rows = page_size if max_results is None else min(page_size, max_results - count)
            result = await self.select(query.page(start, rows))
            for doc in result.docs:
                yield doc
                count += 1
            start += len(result.docs)
            if not result.docs or start >= result.num_found:
                break

    async def __aenter__(self) -> "SolrClient":
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None


def as_query(query: SolrQuery | Expression | str, **params: Any) -> SolrQuery:
    """Coerce an expression or raw query string into a SolrQuery."""
    if isinstance(query, SolrQuery):
        return replace(query, **params) if params else query
    return SolrQuery(q=query, **params)
