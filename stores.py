"""
MongoDB-backed stores for facilities, reviews and the access tag catalog.

Every function takes the pymongo Database to operate on. pymongo errors
are not caught here; callers decide how to surface them.
"""

import logging
import re
from datetime import datetime, timezone
from typing import List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database

from catalog import ACCESS_TAGS
from schemas import FacilitySummary

logger = logging.getLogger(__name__)

FACILITIES = "facilities"
REVIEWS = "reviews"
ACCESS_TAGS_COLLECTION = "access_tags"


# Reviews

def create_review(db: Database, review: dict) -> str:
    """Append a review document. Reviews are never updated afterwards."""
    res = db[REVIEWS].insert_one(dict(review))
    logger.info(f"Created review {res.inserted_id} for facility {review.get('facilityId')}")
    return str(res.inserted_id)


def find_reviews_by_facility(db: Database, facility_id: str, newest_first: bool = False) -> List[dict]:
    direction = DESCENDING if newest_first else ASCENDING
    cursor = db[REVIEWS].find({"facilityId": facility_id}).sort(
        [("createdAt", direction), ("_id", direction)]
    )
    return list(cursor)


def find_reviews_by_user(db: Database, user_id: str) -> List[dict]:
    return list(db[REVIEWS].find({"userId": user_id}).sort([("createdAt", DESCENDING)]))


# Facilities

def get_facility(db: Database, facility_id: str) -> Optional[dict]:
    return db[FACILITIES].find_one({"_id": facility_id})


def create_facility_if_missing(db: Database, facility_id: str, fields: dict) -> bool:
    """
    Insert a facility with an empty summary unless it already exists.

    Args:
        db: Database handle
        facility_id: Facility identifier (the places-search id)
        fields: Descriptive fields such as name, address, location

    Returns:
        True if the facility was created, False if it was already there
        (in which case nothing about it changes).
    """
    doc = {
        **fields,
        **FacilitySummary().to_document(),
        "revision": 0,
        "createdAt": datetime.now(timezone.utc).isoformat(),
    }
    doc.setdefault("placeId", facility_id)
    res = db[FACILITIES].update_one({"_id": facility_id}, {"$setOnInsert": doc}, upsert=True)
    created = res.upserted_id is not None
    if created:
        logger.info(f"Created facility {facility_id}")
    return created


def update_facility_summary(
    db: Database,
    facility_id: str,
    summary: FacilitySummary,
    expected_revision: int,
) -> bool:
    """
    Overwrite the derived summary fields of a facility.

    The write only applies while the facility is still at expected_revision,
    and bumps the revision when it does. Name, address, location and other
    descriptive fields are left alone.

    Returns:
        True if the summary was written, False if another writer got there first.
    """
    if expected_revision:
        revision_filter = expected_revision
    else:
        # Facilities created before revisions existed have no field at all
        revision_filter = {"$in": [0, None]}
    res = db[FACILITIES].update_one(
        {"_id": facility_id, "revision": revision_filter},
        {"$set": summary.to_document(), "$inc": {"revision": 1}},
    )
    return res.matched_count == 1


def search_facilities(db: Database, query: str = "") -> List[dict]:
    """Facilities whose name starts with query, case-insensitive."""
    criteria = {}
    if query:
        criteria = {"name": {"$regex": "^" + re.escape(query), "$options": "i"}}
    return list(db[FACILITIES].find(criteria).sort([("name", ASCENDING)]))


# Access tag catalog

def list_access_tags(db: Database, category: Optional[str] = None) -> List[dict]:
    criteria = {"category": category} if category else {}
    return list(db[ACCESS_TAGS_COLLECTION].find(criteria).sort([("name", ASCENDING)]))


def get_access_tag(db: Database, name: str) -> Optional[dict]:
    return db[ACCESS_TAGS_COLLECTION].find_one({"name": name})


def add_access_tag(db: Database, tag: dict) -> str:
    res = db[ACCESS_TAGS_COLLECTION].insert_one(dict(tag))
    logger.info(f"Added access tag {tag.get('name')!r}")
    return str(res.inserted_id)


def seed_access_tags(db: Database) -> int:
    """Load the built-in catalog. Tags already present (by name) are kept as is."""
    added = 0
    for tag in ACCESS_TAGS:
        res = db[ACCESS_TAGS_COLLECTION].update_one(
            {"name": tag["name"]}, {"$setOnInsert": dict(tag)}, upsert=True
        )
        if res.upserted_id is not None:
            added += 1
    logger.info(f"Seeded access tags: {added} added, {len(ACCESS_TAGS) - added} already present")
    return added
