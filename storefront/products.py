"""Product source backed by the catalog REST API with a static fallback."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from pydantic import ValidationError

from .cache import get_cache
from .config import settings
from .models import ProductRecord, coerce_number

logger = logging.getLogger(__name__)

CACHE_KEY = "products"
UNNAMED_PRODUCT = "Unnamed Product"


class ProductSourceError(RuntimeError):
    """Raised when the upstream product list cannot be fetched or decoded."""


def prepare_product(raw: dict) -> dict:
    vendor = raw.get("vendor") if isinstance(raw.get("vendor"), dict) else {}
    available = raw.get("available")
    return {
        "id": raw.get("id"),
        "name": raw.get("name") or UNNAMED_PRODUCT,
        "price": coerce_number(raw.get("price")),
        "type": raw.get("type"),
        "image": raw.get("image"),
        "description": raw.get("description") or "",
        "rating": coerce_number(raw.get("rating")),
        "available": True if available is None else available,
        "vendor_id": raw.get("vendor_id") or vendor.get("id"),
    }


def _parse_products(payload: Any) -> List[ProductRecord]:
    if not isinstance(payload, list):
        raise ProductSourceError(f"Expected a JSON array of products, got {type(payload).__name__}")
    products: List[ProductRecord] = []
    for position, item in enumerate(payload):
        if not isinstance(item, dict):
            logger.warning("Skipping product #%s: expected an object, got %s", position, type(item).__name__)
            continue
        try:
            products.append(ProductRecord.model_validate(prepare_product(item)))
        except ValidationError as exc:
            logger.warning("Skipping product #%s (id=%r): %s", position, item.get("id"), exc)
    return products


def fetch_products() -> List[ProductRecord]:
    url = f"{settings.api_base_url.rstrip('/')}/products"
    request = Request(url, headers={"Accept": "application/json"})
    try:
        with urlopen(request, timeout=settings.request_timeout_seconds) as response:
            body = response.read()
    except HTTPError as exc:
        raise ProductSourceError(f"HTTP {exc.code} from {url}") from exc
    except (OSError, URLError) as exc:
        raise ProductSourceError(f"Failed to fetch {url}: {exc}") from exc
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise ProductSourceError(f"Invalid JSON from {url}") from exc
    products = _parse_products(payload)
    logger.info("Fetched %s products from %s", len(products), url)
    return products


def load_fallback_products(path: Union[str, Path, None] = None) -> List[ProductRecord]:
    file_path = Path(path or settings.fallback_catalog_path)
    if not file_path.exists():
        logger.warning("Fallback catalog %s is missing", file_path)
        return []
    with file_path.open("r", encoding="utf-8") as fh:
        return _parse_products(json.load(fh))


def _dump(products: List[ProductRecord]) -> List[dict]:
    return [product.model_dump(by_alias=True) for product in products]


def get_products(refresh: bool = False) -> Tuple[List[ProductRecord], str]:
    """Return ``(records, source)`` where source is cache, upstream or fallback.

    ``refresh`` drops the cached list first so the upstream is asked again,
    the same way the storefront refetches when the listing regains focus.
    """
    cache = get_cache()
    if refresh:
        cache.invalidate(CACHE_KEY)
    cached = cache.load(CACHE_KEY)
    if cached is not None:
        return [ProductRecord.from_raw(item) for item in cached], "cache"
    try:
        products = fetch_products()
    except ProductSourceError as exc:
        logger.warning("Upstream products unavailable (%s); using fallback catalog", exc)
        return load_fallback_products(), "fallback"
    cache.store(CACHE_KEY, _dump(products), settings.cache_ttl_seconds)
    logger.debug("cache_store key=%s ttl=%s", CACHE_KEY, settings.cache_ttl_seconds)
    return products, "upstream"


def get_product(product_id: Union[int, str]) -> Optional[ProductRecord]:
    products, _ = get_products()
    wanted = str(product_id)
    for product in products:
        if str(product.id) == wanted:
            return product
    return None
