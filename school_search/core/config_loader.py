"""
Configuration loader for the school content search.

Loads settings from config.json and provides typed access via dataclasses.
Supports singleton pattern for global access and runtime reload capability.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError


@dataclass
class PathsConfig:
    """Configuration for file system paths."""
    catalog_path: Path
    logs_directory: Path


@dataclass
class AssetsConfig:
    """Configuration for UI assets paths."""
    css_path: Path


@dataclass
class SearchConfig:
    """Configuration for search defaults and result presentation."""
    default_sort_by: str
    default_sort_order: str
    description_length: int
    log_filter_stages: bool
    include_samples: bool


@dataclass
class GUIConfig:
    """Configuration for Streamlit web interface."""
    page_title: str
    results_per_page: int
    show_matched_fields: bool


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""
    level: str
    format: str
    max_file_size_mb: int
    backup_count: int


@dataclass
class Config:
    """
    Main configuration container holding all config sections.

    Provides singleton access via get_config() function.
    """
    paths: PathsConfig
    assets: AssetsConfig
    search: SearchConfig
    gui: GUIConfig
    logging: LoggingConfig
    project_root: Path = field(default_factory=Path)

    @classmethod
    def from_file(cls, config_path: Path) -> "Config":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config.json file.

        Returns:
            Populated Config instance.

        Raises:
            ConfigurationError: If file is missing or invalid.
        """
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)}
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                {"path": str(config_path)}
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a JSON object",
                {"path": str(config_path)}
            )

        project_root = config_path.parent.parent

        return cls._parse_config(data, project_root)

    @classmethod
    def default(cls, project_root: Path = None) -> "Config":
        """Build a Config with every section at its default value."""
        return cls._parse_config({}, project_root or Path.cwd())

    @classmethod
    def _parse_config(cls, data: dict, project_root: Path) -> "Config":
        """Parse raw config dict into typed Config object."""
        paths_data = data.get("paths", {})
        paths = PathsConfig(
            catalog_path=cls._resolve_path(paths_data.get("catalog_path", "data/catalog.json"), project_root),
            logs_directory=cls._resolve_path(paths_data.get("logs_directory", "output/logs"), project_root)
        )

        assets_data = data.get("assets", {})
        assets = AssetsConfig(
            css_path=cls._resolve_path(assets_data.get("css_path", "assets/style.css"), project_root)
        )

        search_data = data.get("search", {})
        search = SearchConfig(
            default_sort_by=search_data.get("default_sort_by", "relevance"),
            default_sort_order=search_data.get("default_sort_order", "desc"),
            description_length=search_data.get("description_length", 200),
            log_filter_stages=search_data.get("log_filter_stages", True),
            include_samples=search_data.get("include_samples", True)
        )

        if search.default_sort_by not in ("relevance", "date", "title", "author"):
            raise ConfigurationError(
                f"Unknown default_sort_by: {search.default_sort_by}",
                {"value": search.default_sort_by}
            )

        if search.default_sort_order not in ("asc", "desc"):
            raise ConfigurationError(
                f"Unknown default_sort_order: {search.default_sort_order}",
                {"value": search.default_sort_order}
            )

        gui_data = data.get("gui", {})
        gui = GUIConfig(
            page_title=gui_data.get("page_title", "Global Search"),
            results_per_page=gui_data.get("results_per_page", 20),
            show_matched_fields=gui_data.get("show_matched_fields", True)
        )

        log_data = data.get("logging", {})
        logging_cfg = LoggingConfig(
            level=log_data.get("level", "INFO"),
            format=log_data.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            max_file_size_mb=log_data.get("max_file_size_mb", 10),
            backup_count=log_data.get("backup_count", 5)
        )

        return cls(
            paths=paths,
            assets=assets,
            search=search,
            gui=gui,
            logging=logging_cfg,
            project_root=project_root
        )

    @staticmethod
    def _resolve_path(path_str: str, project_root: Path) -> Path:
        """Resolve a path string, making relative paths absolute."""
        path = Path(path_str)
        if path.is_absolute():
            return path
        return project_root / path


CONFIG_ENV_VAR = "SCHOOL_SEARCH_CONFIG"

_config_instance: Optional[Config] = None


def get_config(config_path: Path = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        config_path: Optional path to config file. If not provided,
                    searches upward from current directory.

    Returns:
        The global Config instance.

    Raises:
        ConfigurationError: If config cannot be loaded.
    """
    global _config_instance

    if _config_instance is None or config_path is not None:
        if config_path is None:
            config_path = _find_config_file()
        _config_instance = Config.from_file(Path(config_path))

    return _config_instance


def _find_config_file() -> Path:
    """
    Locate the config file.

    SCHOOL_SEARCH_CONFIG wins when set; otherwise search upward from the
    current directory for config/config.json.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)

    current = Path.cwd()

    for _ in range(10):
        config_path = current / "config" / "config.json"
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            break
        current = parent

    raise ConfigurationError(
        "Could not find config/config.json in current directory or parents"
    )


def reload_config(config_path: Path = None) -> Config:
    """
    Force reload of configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Fresh Config instance.
    """
    global _config_instance
    _config_instance = None
    return get_config(config_path)


if __name__ == "__main__":
    try:
        config = get_config()
        print(f"Project root: {config.project_root}")
        print(f"Catalog path: {config.paths.catalog_path}")
        print(f"Default sort: {config.search.default_sort_by} {config.search.default_sort_order}")
    except ConfigurationError as e:
        print(f"Config error: {e.message}")
