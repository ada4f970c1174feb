from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from solrexpr.client import SolrClient

Handler = Callable[[httpx.Request], httpx.Response]


def solr_json(docs: list[dict[str, Any]], num_found: int | None = None, start: int = 0) -> dict:
    return {
        "responseHeader": {"status": 0, "QTime": 3},
        "response": {
            "numFound": len(docs) if num_found is None else num_found,
            "start": start,
            "docs": docs,
        },
    }


def paged_handler(docs: list[dict[str, Any]], requests: list[httpx.Request]) -> Handler:
    """Serve docs honoring start/rows, recording every request."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        start = int(request.url.params.get("start", "0"))
        rows = int(request.url.params.get("rows", "10"))
        page = docs[start : start + rows]
        return httpx.Response(200, json=solr_json(page, num_found=len(docs), start=start))

    return handler


@pytest.fixture
def make_client() -> Callable[..., SolrClient]:
    def factory(handler: Handler, core: str = "books") -> SolrClient:
        return SolrClient(
            base_url="http://solr.test/solr",
            core=core,
            transport=httpx.MockTransport(handler),
        )

    return factory
