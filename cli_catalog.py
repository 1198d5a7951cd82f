"""Terminal client that reuses the in-process catalog pipeline."""
from __future__ import annotations

import argparse
import logging
from typing import Iterable, List, Tuple

from storefront.categories import ALL_CATEGORIES, SELECTABLE_CATEGORIES
from storefront.config import LOG_FORMAT, settings
from storefront.models import DisplayProduct, ProductRecord, QueryParameters
from storefront.pipeline import run, sort_label
from storefront.products import get_products, load_fallback_products
from storefront.sorting import SortKey

MAX_RESULTS = 100
CURRENCY = "EUR"
GREEN = "\033[92m"
RESET = "\033[0m"


def load_records(fallback_only: bool, refresh: bool = False) -> Tuple[List[ProductRecord], str]:
    if fallback_only:
        return load_fallback_products(), "fallback"
    return get_products(refresh=refresh)


def pretty_print_results(params: QueryParameters, results: List[DisplayProduct], source: str) -> None:
    plural = "s" if len(results) != 1 else ""
    print(
        f"{GREEN}{len(results)} item{plural}{RESET} | Sort: {sort_label(params.sort_key)} | source: {source}"
    )
    for idx, item in enumerate(results[:MAX_RESULTS], start=1):
        print(f"  {idx:02d}. {item.name} | {item.category.value} | {item.price:.2f} {CURRENCY}")


def interactive_shell(base: QueryParameters, records: List[ProductRecord], source: str) -> None:
    print("Interactive catalog search. Type 'exit' to quit.")
    while True:
        try:
            text = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if text.lower() in {"exit", "quit"}:
            return
        params = base.model_copy(update={"search_text": text})
        pretty_print_results(params, run(records, params), source)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="CLI client for the jewelry catalog")
    parser.add_argument("query", nargs="?", help="Search text. If omitted with no filters, starts REPL mode.")
    parser.add_argument("--category", default=ALL_CATEGORIES, choices=SELECTABLE_CATEGORIES)
    parser.add_argument("--min", dest="min_price", help="Minimum price (0 or blank means no bound)")
    parser.add_argument("--max", dest="max_price", help="Maximum price (0 or blank means no bound)")
    parser.add_argument(
        "--sort",
        default=SortKey.RECOMMENDED.value,
        choices=[key.value for key in SortKey],
    )
    parser.add_argument("--fallback-only", action="store_true", help="Skip the upstream API")
    parser.add_argument("--refresh", action="store_true", help="Ignore the cached product list")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(level=logging.getLevelName(settings.log_level.upper()), format=LOG_FORMAT)

    params = QueryParameters(
        search_text=args.query or "",
        active_category=args.category,
        min_price=args.min_price,
        max_price=args.max_price,
        sort_key=SortKey(args.sort),
    )
    records, source = load_records(args.fallback_only, refresh=args.refresh)
    has_filters = args.category != ALL_CATEGORIES or args.min_price or args.max_price
    if args.query or has_filters:
        pretty_print_results(params, run(records, params), source)
        return 0
    interactive_shell(params, records, source)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
