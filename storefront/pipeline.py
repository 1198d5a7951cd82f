"""Catalog query pipeline: category mapping, filtering and sorting.

``run`` is a plain function of its inputs. The caller re-invokes it whenever
the product list or any query field changes; nothing is cached here.
"""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Iterable, List, Union

from .categories import map_category
from .filters import active_filters
from .models import DisplayProduct, ProductRecord, QueryParameters
from .sorting import SortKey, sort_products

logger = logging.getLogger(__name__)

RawRecord = Union[ProductRecord, dict]


def to_display(record: RawRecord) -> DisplayProduct:
    product = ProductRecord.from_raw(record)
    data = product.model_dump()
    data["category"] = map_category(product.raw_type)
    return DisplayProduct(**data)


def sort_label(key: SortKey | str) -> str:
    return SortKey(key).label


def run(records: Iterable[RawRecord], params: QueryParameters) -> List[DisplayProduct]:
    t0 = perf_counter()
    items = [to_display(record) for record in records]
    total = len(items)

    for name, predicate in active_filters(params):
        if not items:
            break
        items = [item for item in items if predicate(item)]
        logger.debug("filter=%s remaining=%s", name, len(items))

    items = sort_products(items, params.sort_key)
    logger.debug(
        "pipeline: total=%s matched=%s sort=%s took=%.2fms",
        total,
        len(items),
        params.sort_key.value,
        (perf_counter() - t0) * 1000,
    )
    return items
