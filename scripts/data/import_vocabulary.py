"""
Import vocabulary entries into the MongoDB collection.

Accepts a JSON export (current or legacy browser format) or a CSV file.
Entries are merged by id unless --replace is given.

Usage:
    python -m scripts.data.import_vocabulary data/vocabulary.json [--replace] [--dry-run]
"""

from __future__ import annotations

import argparse
from pathlib import Path

from core import lexicon_io, lexicon_repo


def load_entries(path: Path) -> list:
    """Load entries from a .json or .csv file."""
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() == ".csv":
        return lexicon_io.load_entries_csv(path)
    return lexicon_io.parse_entries_json(path.read_text(encoding="utf-8"))


def import_vocabulary(path: Path, replace: bool = False, dry_run: bool = False) -> None:
    """
    Import entries from a file.

    Args:
        path: JSON or CSV file
        replace: If True, replace the whole collection
        dry_run: If True, parse and report without writing
    """
    entries = load_entries(path)
    print(f"Loaded {len(entries)} entries from {path}")

    by_status: dict[str, int] = {}
    for entry in entries:
        by_status[entry.status.value] = by_status.get(entry.status.value, 0) + 1
    for status, count in sorted(by_status.items()):
        print(f"  {status}: {count}")

    if dry_run:
        print("\n⚠ DRY RUN MODE - No changes were made to MongoDB")
        return

    if replace:
        written = lexicon_repo.replace_all(entries)
        print(f"\n✓ Replaced collection with {written} entries")
        return

    for entry in entries:
        lexicon_repo.save_entry(entry)
    print(f"\n✓ Merged {len(entries)} entries into {lexicon_repo.get_db_name()}.{lexicon_repo.COLLECTION_NAME}")


def main():
    parser = argparse.ArgumentParser(description="Import vocabulary entries to MongoDB")
    parser.add_argument("path", type=Path, help="JSON or CSV file to import")
    parser.add_argument(
        "--replace",
        action="store_true",
        help="Replace the whole collection instead of merging by id"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Don't actually write to MongoDB"
    )

    args = parser.parse_args()

    try:
        import_vocabulary(args.path, replace=args.replace, dry_run=args.dry_run)
    except lexicon_io.ImportFormatError as exc:
        parser.exit(1, f"✗ Import failed: {exc}\n")


if __name__ == "__main__":
    main()
