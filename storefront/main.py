"""FastAPI application wiring the catalog pipeline."""
from __future__ import annotations

import logging
from dataclasses import asdict
from time import perf_counter
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query

from .cache import get_cache
from .categories import ALL_CATEGORIES, SELECTABLE_CATEGORIES
from .config import LOG_FORMAT, settings
from .gold import GoldTicker, Period, gold_ticker
from .models import CatalogResponse, DisplayProduct, QueryParameters, SortOption
from .pipeline import run, sort_label, to_display
from .products import get_product, get_products
from .sizes import closest_bracelet, closest_ring
from .sorting import SortKey

LOG_LEVEL = logging.getLevelName(settings.log_level.upper())

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, force=True)
for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(name).setLevel(LOG_LEVEL)

logger = logging.getLogger(__name__)
logger.info("Logging configured at %s", settings.log_level.upper())

app = FastAPI(title="Jewelry Storefront Catalog")


@app.on_event("startup")
async def startup_event() -> None:
    cache = get_cache()
    logger.info("Catalog API %s, cache backend %s", settings.api_base_url, cache.name)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "cache": get_cache().name}


@app.get("/products", response_model=CatalogResponse)
def list_products(
    q: str = Query("", description="Search text matched against name and category"),
    category: str = Query(ALL_CATEGORIES),
    min_price: Optional[str] = Query(None),
    max_price: Optional[str] = Query(None),
    sort: SortKey = Query(SortKey.RECOMMENDED),
    refresh: bool = Query(False, description="Drop the cached product list and refetch"),
) -> CatalogResponse:
    params = QueryParameters(
        search_text=q,
        active_category=category,
        min_price=min_price,
        max_price=max_price,
        sort_key=sort,
    )
    t0 = perf_counter()
    records, source = get_products(refresh=refresh)
    results = run(records, params)
    took_ms = (perf_counter() - t0) * 1000
    logger.info(
        "products q=%r category=%s min=%r max=%r sort=%s source=%s hits=%s took=%.2fms",
        q,
        category,
        min_price,
        max_price,
        sort.value,
        source,
        len(results),
        took_ms,
    )
    return CatalogResponse(
        query=params,
        count=len(results),
        sort_label=sort_label(sort),
        source=source,
        results=results,
        took_ms=took_ms,
    )


@app.get("/products/{product_id}", response_model=DisplayProduct)
def product_detail(product_id: str) -> DisplayProduct:
    product = get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return to_display(product)


@app.get("/categories")
async def categories() -> List[str]:
    return SELECTABLE_CATEGORIES


@app.get("/sorts", response_model=List[SortOption])
async def sorts() -> List[SortOption]:
    return [SortOption(key=key, label=key.label) for key in SortKey]


@app.get("/sizes/ring")
async def ring_size(diameter: float = Query(..., description="Inner diameter in mm")) -> dict:
    try:
        return asdict(closest_ring(diameter))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/sizes/bracelet")
async def bracelet_size(circumference: float = Query(..., description="Wrist circumference in cm")) -> dict:
    try:
        return asdict(closest_bracelet(circumference))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@app.get("/gold", response_model=GoldTicker)
async def gold(period: Period = Query(Period.DAY)) -> GoldTicker:
    return gold_ticker(period)
