#!/usr/bin/env python3
"""Seed a demo catalog.

Usage:
    python scripts/seed_demo.py [TARGET_DIR]

Writes a few entries into each known collection under TARGET_DIR
(default: demo_catalog/), including a hidden entry, a sidecar file and a
malformed file, so the listing and lookup rules can be tried by hand:

    python scripts/serve.py --data-dir demo_catalog
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from vodcat.catalog.collections import KNOWN_COLLECTIONS  # noqa: E402

DEFAULT_TARGET = PROJECT_ROOT / "demo_catalog"

DEMO_ENTRIES = {
    "first": {
        "title": "First stream",
        "description": "Setting things up",
        "created_at": "2024-01-05T18:00:00Z",
        "duration": "2h14m3s",
    },
    "second": {
        "title": "Second stream",
        "created_at": "2024-02-11T19:30:00+01:00",
        "duration": 5423.5,
    },
    "secret": {
        "title": "Unlisted",
        "created_at": "2024-03-01T12:00:00Z",
        "duration": "45m",
        "hidden": True,
    },
}


def write_collection(directory: Path) -> int:
    """Write the demo entries into one collection directory."""
    directory.mkdir(parents=True, exist_ok=True)
    for entry_id, payload in DEMO_ENTRIES.items():
        (directory / f"{entry_id}.json").write_text(json.dumps(payload, indent=2) + "\n")
    (directory / "first.meta.json").write_text(json.dumps({"note": "sidecar"}) + "\n")
    (directory / "broken.json").write_text("{not json\n")
    return len(DEMO_ENTRIES)


def main() -> int:
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_TARGET
    for kind in KNOWN_COLLECTIONS:
        count = write_collection(target / kind)
        print(f"OK: {kind}: {count} entries")
    print(f"Demo catalog written to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
