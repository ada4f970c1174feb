# solrexpr/search.py
"""Look up documents by a long list of field values.

Solr rejects boolean queries with more than ``maxBooleanClauses`` clauses
(1024 by default), so a value list is split into several ``field:(a OR b ...)``
filters that are requested one after another on the same base query.
"""

import logging
from collections.abc import AsyncIterator, Callable, Iterable
from dataclasses import replace
from itertools import batched
from typing import Any

from solrexpr.client import SolrClient, as_query
from solrexpr.models import SolrQuery
from solrexpr.query.builder import eq, or_
from solrexpr.query.expressions import Expression, Field

logger = logging.getLogger(__name__)

MAX_CLAUSES = 1024


def batched_filters(
    field: str,
    values: Iterable[Any],
    batch_size: int = MAX_CLAUSES,
    to_string: Callable[[Any], str] = str,
) -> list[Field]:
    """Split values into field:(v1 OR v2 ...) filters of at most batch_size clauses.

    Example:
        >>> [str(f) for f in batched_filters("id", ["a", "b", "c"], batch_size=2)]
        ['id:((a OR b))', 'id:((c))']
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be > 0, got: {batch_size}")

    filters = [eq(field, or_(chunk, to_string=to_string)) for chunk in batched(values, batch_size)]
    if not filters:
        raise ValueError("At least one value is required.")
    return filters


async def search_in(
    client: SolrClient,
    field: str,
    values: Iterable[Any],
    query: SolrQuery | Expression | str = "*:*",
    batch_size: int = MAX_CLAUSES,
    max_results: int | None = None,
    key: str = "id",
) -> AsyncIterator[dict[str, Any]]:
    """Yield documents whose field matches any of values.

    Each batch is sent as an extra fq on top of query's own filters. Documents
    already yielded by an earlier batch (same key) are skipped.
    """
    if max_results is not None and max_results <= 0:
        raise ValueError(f"max_results must be > 0, got: {max_results}")

    base = as_query(query)
    filters = batched_filters(field, values, batch_size)
    logger.info("Searching %s in %s batches", field, len(filters))

    seen: set[Any] = set()
    count = 0

    for number, fq in enumerate(filters, start=1):
        logger.debug("Batch %s/%s", number, len(filters))
        batch = replace(base, filters=(*base.filters, fq))
        remaining = None if max_results is None else max_results - count

        async for doc in client.stream(batch, max_results=remaining):
            value = doc.get(key)
            if value is not None:
                if value in seen:
                    continue
                seen.add(value)
            yield doc
            count += 1

        if max_results is not None and count >= max_results:
            break

    logger.info("Search complete: %s documents", count)
