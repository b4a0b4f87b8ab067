"""
Export the MongoDB vocabulary collection to a JSON file.

Usage:
    python -m scripts.data.export_vocabulary [--output data/vocabulary.json]
"""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path

from core import lexicon_io, lexicon_repo


def main():
    parser = argparse.ArgumentParser(description="Export vocabulary entries to JSON")
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file (default: vocabulary-YYYY-MM-DD.json)"
    )
    args = parser.parse_args()

    output = args.output or Path(lexicon_io.export_filename(datetime.now(timezone.utc)))
    entries = lexicon_repo.get_all_entries()

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(lexicon_io.export_entries_json(entries), encoding="utf-8")
    print(f"✓ Exported {len(entries)} entries to {output}")


if __name__ == "__main__":
    main()
