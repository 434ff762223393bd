"""
CLI script to launch the global search web page.

Usage:
    python scripts/run_app.py                          # Default port 8501
    python scripts/run_app.py --port 8502              # Custom port
    python scripts/run_app.py --config path/to/config.json
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from school_search.core import ConfigurationError  # noqa: E402
from school_search.core.config_loader import CONFIG_ENV_VAR, reload_config  # noqa: E402


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Launch the school content search web page"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=8501,
        help="Port to run the application on (default: 8501)"
    )

    parser.add_argument(
        "--host",
        type=str,
        default="localhost",
        help="Host to bind to (default: localhost)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Don't open browser automatically"
    )

    return parser.parse_args()


def main():
    """Validate configuration, then hand over to Streamlit."""
    args = parse_args()

    project_root = Path(__file__).parent.parent
    app_path = project_root / "school_search" / "gui" / "app.py"

    env = dict(os.environ)
    if args.config:
        env[CONFIG_ENV_VAR] = str(Path(args.config).resolve())

    try:
        config = reload_config(Path(args.config) if args.config else None)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}")
        sys.exit(1)

    print("=" * 60)
    print("School Content Search - Web Interface")
    print("=" * 60)
    print(f"Catalog:   {config.paths.catalog_path}")
    if not config.paths.catalog_path.exists():
        print("           (missing, only built-in samples will be searchable)")
    print(f"Serving:   http://{args.host}:{args.port}")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(app_path),
        "--server.port", str(args.port),
        "--server.address", args.host,
    ]

    if args.no_browser:
        cmd.extend(["--server.headless", "true"])

    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
