"""
JSON catalog loader for the search sources.

A catalog is one JSON object holding the collaborator stores' records
under libraryContent, schemesOfWork, weeklyPlans, files, lessonPlans
and quizzes. Any key may be missing.
"""

import json
from pathlib import Path
from typing import Union

from ..core import get_config, get_logger, CatalogError
from ..search.records import SourceCollections
from .samples import sample_collections

logger = get_logger(__name__)


def load_catalog(path: Union[str, Path]) -> SourceCollections:
    """
    Load source collections from a catalog file.

    Args:
        path: Path to the catalog JSON file.

    Returns:
        SourceCollections built from the file.

    Raises:
        CatalogError: If the file is missing, not valid JSON, or not an object.
    """
    path = Path(path)

    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}", path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in catalog: {e}", path=str(path))

    if not isinstance(data, dict):
        raise CatalogError(
            "Catalog must be a JSON object",
            path=str(path),
            details={"type": type(data).__name__}
        )

    collections = SourceCollections.from_dict(data)

    logger.info(f"Loaded catalog {path.name}: {collections.total} records")
    logger.debug(f"Catalog counts: {collections.counts()}")

    return collections


def load_sources(catalog_path: Union[str, Path] = None, include_samples: bool = None) -> SourceCollections:
    """
    Assemble the collections the search page works on.

    Reads the configured catalog when it exists and appends the built-in
    sample lesson plans and quizzes when enabled.

    Args:
        catalog_path: Catalog file; defaults to config.paths.catalog_path.
        include_samples: Whether to add samples; defaults to config.search.include_samples.

    Returns:
        Merged SourceCollections.

    Raises:
        CatalogError: If an explicitly given catalog cannot be read.
    """
    config = get_config()

    if include_samples is None:
        include_samples = config.search.include_samples

    if catalog_path is not None:
        collections = load_catalog(catalog_path)
    elif config.paths.catalog_path.exists():
        collections = load_catalog(config.paths.catalog_path)
    else:
        logger.warning(f"No catalog at {config.paths.catalog_path}, starting empty")
        collections = SourceCollections()

    if include_samples:
        collections = collections.merged_with(sample_collections())

    return collections
