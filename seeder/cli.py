# seeder/cli.py

import argparse
import sys
from typing import List, Optional

from seeder.db import DB_NAME, MONGO_URI, SAMPLE_DATA_DIR, get_database
from seeder.loader import format_database, load_collections, log
from seeder.registry import DEFAULT_ITEMS


def parse_items(value: Optional[str]) -> List[str]:
    """'users, posts,' -> ['users', 'posts']; None, '' or ',' -> the default list."""
    items = [v.strip() for v in (value or "").split(",") if v.strip()]
    return items or list(DEFAULT_ITEMS)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="load-sample-data",
        description="Load sample data fixtures into MongoDB collections",
    )
    parser.add_argument(
        "-i", "--items",
        help="Comma-separated list of collections to load sample data into",
    )
    parser.add_argument(
        "-f", "--format", action="store_true",
        help="Formats all the collections present in the database before the insertion of objects. "
             "[WARNING] Use carefully.",
    )
    parser.add_argument("--data-dir", default=SAMPLE_DATA_DIR, help="Directory holding <name>.json fixtures")
    parser.add_argument("--mongo-uri", default=MONGO_URI)
    parser.add_argument("--db", default=DB_NAME)
    parser.add_argument("--batch", type=int, default=1000, help="Insert batch size")
    parser.add_argument("--strict", action="store_true", help="Exit with status 1 when loading fails")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    items = parse_items(args.items)

    db = None
    status = 0
    try:
        db = get_database(args.mongo_uri, args.db)
        if args.format:
            format_database(db)
        load_collections(db, items, args.data_dir, batch_size=args.batch)
        log("\nCollections added successfully")
    except Exception as e:
        log(f"Error adding collections: {e}", err=True)
        status = 1 if args.strict else 0
    finally:
        if db is not None:
            db.client.close()
    return status


if __name__ == "__main__":
    sys.exit(main())
