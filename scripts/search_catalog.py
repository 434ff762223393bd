"""
CLI script to run a global search from the command line.

Usage:
    python scripts/search_catalog.py "addition"
    python scripts/search_catalog.py "" --type quiz --level "Level I"
    python scripts/search_catalog.py grammar --sort title --order asc
    python scripts/search_catalog.py math --catalog path/to/catalog.json --no-samples
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from school_search.core import Config, ConfigurationError, CatalogError, SearchError, get_config  # noqa: E402
from school_search.core.config_loader import reload_config  # noqa: E402
from school_search.search import SearchEngine, SearchQuery  # noqa: E402
from school_search.sources import load_catalog, sample_collections  # noqa: E402
from school_search.search.records import SourceCollections  # noqa: E402


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search content, curriculum, files, lesson plans and quizzes"
    )

    parser.add_argument("text", nargs="?", default="", help="Query text (may be empty)")

    parser.add_argument("--type", dest="types", action="append", default=[],
                        help="Restrict to a source type (repeatable)")
    parser.add_argument("--level", dest="levels", action="append", default=[],
                        help="Level display name, e.g. 'Level I' (repeatable)")
    parser.add_argument("--subject", dest="subjects", action="append", default=[],
                        help="Subject display name, e.g. 'Mathematics' (repeatable)")
    parser.add_argument("--system", dest="systems", action="append", default=[],
                        help="anglophone or francophone (repeatable)")
    parser.add_argument("--author", dest="authors", action="append", default=[],
                        help="Exact author name (repeatable)")
    parser.add_argument("--from", dest="date_from", help="Earliest date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="date_to", help="Latest date (YYYY-MM-DD)")

    parser.add_argument("--sort", default=None, choices=["relevance", "date", "title", "author"],
                        help="Sort key (default from config)")
    parser.add_argument("--order", default=None, choices=["asc", "desc"],
                        help="Sort order (default from config)")

    parser.add_argument("--catalog", type=str, help="Catalog JSON file (default from config)")
    parser.add_argument("--no-samples", action="store_true",
                        help="Do not add the built-in lesson plans and quizzes")
    parser.add_argument("--config", type=str, help="Path to custom config.json file")
    parser.add_argument("--limit", type=int, default=20, help="Maximum rows printed")

    return parser.parse_args(argv)


def _load_config(config_path: str = None) -> Config:
    if config_path:
        return reload_config(Path(config_path))
    try:
        return get_config()
    except ConfigurationError:
        return Config.default()


def main(argv=None) -> int:
    """Main entry point for the search CLI."""
    args = parse_args(argv)

    try:
        config = _load_config(args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        return 1

    catalog_path = Path(args.catalog) if args.catalog else config.paths.catalog_path

    try:
        if args.catalog or catalog_path.exists():
            sources = load_catalog(catalog_path)
        else:
            sources = SourceCollections()
    except CatalogError as e:
        print(f"Catalog error: {e.message}")
        return 1

    if config.search.include_samples and not args.no_samples:
        sources = sources.merged_with(sample_collections())

    try:
        query = SearchQuery.build(
            text=args.text,
            types=args.types,
            levels=args.levels,
            subjects=args.subjects,
            systems=args.systems,
            authors=args.authors,
            sort_by=args.sort or config.search.default_sort_by,
            sort_order=args.order or config.search.default_sort_order,
            date_from=args.date_from,
            date_to=args.date_to
        )
    except SearchError as e:
        print(f"Invalid query: {e.message}")
        return 2

    if query.is_blank:
        print("Enter query text or a type, level, subject or system filter.")
        return 0

    engine = SearchEngine.from_config(config)
    results, stats = engine.search_with_stats(query, sources)

    print(f"{stats.summary} ({stats.execution_time_ms:.1f} ms, {stats.scanned_records} records scanned)")

    for rank, result in enumerate(results[:args.limit], start=1):
        matched = f" [{', '.join(result.matched_fields)}]" if result.matched_fields else ""
        print(f"{rank:3d}. {result.relevance_score:3d}  {result.source_type.value:<12} {result.title}{matched}")

    if len(results) > args.limit:
        print(f"... {len(results) - args.limit} more")

    return 0


if __name__ == "__main__":
    sys.exit(main())
