"""
CLI entrypoint for running the seed script.

Usage:
    python -m metrics_seed.seed
    python -m metrics_seed.seed --uri mongodb://localhost:27017 --database metrics
"""

import sys
import argparse

from pymongo.errors import PyMongoError

from metrics_seed.core.db import get_db
from metrics_seed.seed.seed_data import run_seed


def main(argv=None):
    """Main entrypoint for seed script."""
    parser = argparse.ArgumentParser(description="Seed metadata and duplication collections")
    parser.add_argument(
        "--uri",
        help="MongoDB connection string (default: from settings)"
    )
    parser.add_argument(
        "--database",
        help="Target database name (default: MONGO_DATABASE)"
    )

    args = parser.parse_args(argv)

    try:
        with get_db(args.uri, args.database) as db:
            run_seed(db)
    except PyMongoError as e:
        print(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
