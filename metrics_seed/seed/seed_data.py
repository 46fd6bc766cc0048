"""
Fixture data and insert functions for the metrics pipeline collections.

- 1 metadata record for the checkout workload
- 2 duplication views (operational, business)

Inserts are unconditional: every run adds another copy of each record.
"""

from typing import List

from bson import ObjectId
from pymongo.database import Database

from metrics_seed.core.config import settings
from metrics_seed.models.schemas import MetadataRecord, DuplicationViewRecord


METADATA = MetadataRecord(
    pod="checkout-6c8f9",
    service="checkout-service",
    team="ecommerce",
    tier="critical",
)

DUPLICATION_VIEWS = [
    DuplicationViewRecord(view="operational", labels=["service", "endpoint", "error_type"]),
    DuplicationViewRecord(view="business", labels=["service", "tier"]),
]


def seed_metadata(db: Database) -> ObjectId:
    """
    Insert the metadata record.

    Args:
        db: Target database

    Returns:
        Inserted document id
    """
    collection = db[settings.METADATA_COLLECTION]
    result = collection.insert_one(METADATA.model_dump())
    return result.inserted_id


def seed_duplication_views(db: Database) -> List[ObjectId]:
    """
    Insert the duplication view records, labels kept in declared order.

    Args:
        db: Target database

    Returns:
        Inserted document ids
    """
    collection = db[settings.DUPLICATION_COLLECTION]
    result = collection.insert_many([view.model_dump() for view in DUPLICATION_VIEWS])
    return result.inserted_ids


def run_seed(db: Database) -> None:
    """
    Main seed function. Driver errors propagate to the caller.

    Args:
        db: Target database
    """
    print("Starting seed process...")

    print("Seeding metadata...")
    seed_metadata(db)
    print(f"Created 1 record in '{settings.METADATA_COLLECTION}'")

    print("Seeding duplication views...")
    ids = seed_duplication_views(db)
    print(f"Created {len(ids)} records in '{settings.DUPLICATION_COLLECTION}'")

    print("Seed process completed successfully!")
