"""
Review submission and facility recalculation.

Both paths recompute the facility summary from scratch with
aggregator.compute_facility_summary and write it back behind a revision
check, so two reviews landing at the same time cannot leave the facility
with a stale summary.
"""

import logging
from datetime import datetime, timezone
from typing import Union

from pymongo.database import Database

import settings
import stores
from aggregator import compute_facility_summary, validate_access_tags, validate_ratings
from errors import ConcurrentUpdateError, FacilityNotFoundError
from schemas import Review

logger = logging.getLogger(__name__)


def _review_document(facility_id: str, review: Union[Review, dict]) -> dict:
    if isinstance(review, Review):
        doc = review.model_dump(by_alias=True, exclude_none=True)
    else:
        doc = dict(review)
    doc.pop("_id", None)
    doc.pop("id", None)
    doc["facilityId"] = facility_id
    validate_access_tags(doc)
    doc["accessTags"] = list(doc.get("accessTags") or [])
    doc["createdAt"] = datetime.now(timezone.utc).isoformat()
    return doc


def _facility_fields(review_doc: dict) -> dict:
    return {
        "name": review_doc.get("facilityName") or "",
        "address": review_doc.get("facilityAddress") or "",
        "location": review_doc.get("facilityLocation") or {"latitude": 0, "longitude": 0},
    }


def recalculate_facility_metrics(db: Database, facility_id: str, max_retries: int = None) -> dict:
    """
    Rebuild a facility's summary from all of its reviews and store it.

    Args:
        db: Database handle
        facility_id: Facility to recalculate
        max_retries: Attempts before giving up on a contended facility
            (default: settings.SUMMARY_MAX_RETRIES)

    Returns:
        The facility document after the write.

    Raises:
        FacilityNotFoundError: No such facility
        ConcurrentUpdateError: Every attempt lost to another writer
    """
    if max_retries is None:
        max_retries = settings.SUMMARY_MAX_RETRIES

    for attempt in range(1, max_retries + 1):
        facility = stores.get_facility(db, facility_id)
        if facility is None:
            raise FacilityNotFoundError(facility_id)

        revision = facility.get("revision") or 0
        reviews = stores.find_reviews_by_facility(db, facility_id)
        summary = compute_facility_summary(reviews)

        if stores.update_facility_summary(db, facility_id, summary, revision):
            logger.info(
                f"Updated facility {facility_id}: {summary.review_count} reviews, "
                f"ratings {summary.physical_rating}/{summary.sensory_rating}/{summary.cognitive_rating}"
            )
            return stores.get_facility(db, facility_id)

        logger.warning(
            f"Facility {facility_id} changed during recalculation "
            f"(attempt {attempt}/{max_retries}), retrying"
        )

    logger.error(f"Giving up on facility {facility_id} after {max_retries} attempts")
    raise ConcurrentUpdateError(facility_id, max_retries)


def submit_review(db: Database, facility_id: str, review: Union[Review, dict]) -> dict:
    """
    Store a new review and refresh the facility's summary.

    The facility is created from the review's facilityName, facilityAddress
    and facilityLocation if it does not exist yet.

    Raises:
        InvalidRatingError: A rating is outside 0-5; nothing is stored
        InvalidTagsError: accessTags is not a list of strings; nothing is stored
        ConcurrentUpdateError: The summary could not be written
    """
    doc = _review_document(facility_id, review)
    validate_ratings(doc)

    stores.create_facility_if_missing(db, facility_id, _facility_fields(doc))
    review_id = stores.create_review(db, doc)

    try:
        return recalculate_facility_metrics(db, facility_id)
    except ConcurrentUpdateError:
        # The review is stored; the next recalculation will include it
        logger.error(f"Review {review_id} stored but facility {facility_id} summary is stale")
        raise
