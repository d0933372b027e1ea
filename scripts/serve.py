#!/usr/bin/env python3
"""Serve the catalog API.

Usage:
    python scripts/serve.py [--data-dir DIR] [--host HOST] [--port PORT]

Settings not given on the command line come from VODCAT_* environment
variables (see vodcat.config).
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

import uvicorn  # noqa: E402

from vodcat.api.app import create_app  # noqa: E402
from vodcat.config import Settings, configure_logging  # noqa: E402


def main() -> int:
    """Parse arguments and run uvicorn."""
    parser = argparse.ArgumentParser(description="Serve the vodcat API")
    parser.add_argument("--data-dir", type=Path, help="Catalog root directory")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--log-level", help="Logging level (default from VODCAT_LOG_LEVEL)")
    args = parser.parse_args()

    settings = Settings.from_env()
    if args.log_level:
        settings = replace(settings, log_level=args.log_level.upper())
    configure_logging(settings.log_level)

    if args.data_dir is not None and not args.data_dir.is_dir():
        print(f"FAIL: Data directory not found: {args.data_dir}")
        return 1

    app = create_app(data_dir=args.data_dir, settings=settings)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
