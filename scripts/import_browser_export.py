"""
Import a browser localStorage export into MongoDB and the progress database.

This script:
1. Reads a JSON file with the lm_cards, lm_rules and lm_profile keys
2. Validates every record (review counters, timestamps, status)
3. Upserts cards and rules into MongoDB by id
4. Saves the learner profile and daily stats to the progress database

Usage:
    python -m scripts.import_browser_export export.json [--user-id ID] [--dry-run]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from srs_trainer import content_repo, persistence
from srs_trainer.browser_export import parse_browser_export
from srs_trainer.logging_config import configure_logging

# Load environment
load_dotenv()


def import_export(path: Path, user_id: str | None = None, dry_run: bool = False) -> None:
    print(f"Reading {path}")
    data = json.loads(path.read_text(encoding="utf-8"))

    try:
        export = parse_browser_export(data)
    except ValidationError as e:
        print(f"✗ Export contains invalid records:\n{e}")
        raise SystemExit(1)

    print(f"  Cards:   {len(export.cards)}")
    print(f"  Rules:   {len(export.rules)}")
    print(f"  Profile: {'yes' if export.profile else 'no'}")

    if dry_run:
        print("\n⚠ DRY RUN MODE - No changes were made")
        return

    saved = content_repo.save_items([*export.cards, *export.rules])
    print(f"✓ Saved {saved} items to MongoDB")

    if export.profile is not None:
        persistence.init_db()
        persistence.save_profile(export.profile, user_id)
        print(f"✓ Saved profile for {user_id or persistence.get_default_user_id()}")


def main():
    parser = argparse.ArgumentParser(
        description="Import a browser localStorage export (cards, rules, profile)"
    )
    parser.add_argument("path", type=Path, help="Path to the exported JSON file")
    parser.add_argument("--user-id", help="Profile owner (default: DEFAULT_USER_ID)")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate only, don't write to the databases"
    )

    args = parser.parse_args()
    configure_logging()

    import_export(args.path, user_id=args.user_id, dry_run=args.dry_run)


if __name__ == "__main__":
    main()
