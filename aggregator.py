"""
Facility metrics aggregation.

Turns the complete set of reviews for one facility into the summary stored
on the facility record: average physical, sensory and cognitive ratings,
the review count, the most cited access tags, and every tag cited.

The summary is always rebuilt from the full review set, never patched
incrementally, so repeating a recalculation is harmless.
"""

import logging
import math
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from operator import itemgetter
from typing import Any, Iterable, List, Mapping, Sequence, Union

from pydantic import BaseModel

import settings
from errors import InvalidRatingError, InvalidTagsError
from schemas import FacilitySummary

logger = logging.getLogger(__name__)

RATING_FIELDS = ("physicalRating", "sensoryRating", "cognitiveRating")
MAX_RATING = 5

ReviewRecord = Union[Mapping[str, Any], BaseModel]

# Every float at or beyond 2**53 is a whole number
_NO_FRACTION = 2.0 ** 53


def round1(value: float) -> float:
    """Round to one decimal place, halves away from zero (4.25 -> 4.3)."""
    value = float(value)
    if not math.isfinite(value) or abs(value) >= _NO_FRACTION:
        return value
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def rating_value(value) -> float:
    """Numeric value of a stored rating. Missing or unusable ratings count as 0."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def mean(values: Sequence[float]) -> float:
    total = sum(values)
    if math.isfinite(total):
        return total / len(values)
    # Sum overflowed; scale each term first
    return sum(value / len(values) for value in values)


def _as_document(review: ReviewRecord) -> Mapping[str, Any]:
    if isinstance(review, BaseModel):
        return review.model_dump(by_alias=True)
    return review


def _tags(review: Mapping[str, Any]) -> Iterable[str]:
    return review.get("accessTags") or ()


def rank_tags(counts: Counter, limit: int) -> List[str]:
    # sorted() is stable, so equal counts keep first-seen order
    ranked = sorted(counts.items(), key=itemgetter(1), reverse=True)
    return [tag for tag, _ in ranked[:limit]]


def compute_facility_summary(
    reviews: Sequence[ReviewRecord],
    common_tag_limit: int = None,
) -> FacilitySummary:
    """
    Compute a facility's summary from all of its reviews.

    Args:
        reviews: Every review for a single facility, in the order they were
            written. Each is a review document (camelCase keys) or a
            schemas.Review model. Filtering by facility is the caller's job.
        common_tag_limit: How many tags to report as common
            (default and maximum: settings.COMMON_TAG_LIMIT).

    Returns:
        FacilitySummary. Ratings are the mean over all reviews, with absent
        ratings counted as 0, rounded to one decimal place.

    The inputs are never mutated and are not validated here; see
    validate_ratings for the check applied before a review is stored.
    """
    if common_tag_limit is None:
        common_tag_limit = settings.COMMON_TAG_LIMIT
    if not 0 <= common_tag_limit <= settings.COMMON_TAG_LIMIT:
        raise ValueError(f"common_tag_limit must be between 0 and {settings.COMMON_TAG_LIMIT}")

    documents = [_as_document(review) for review in reviews]
    if not documents:
        return FacilitySummary()

    count = len(documents)
    averages = {}
    for field in RATING_FIELDS:
        ratings = [rating_value(doc.get(field)) for doc in documents]
        averages[field] = round1(mean(ratings))

    tag_counts = Counter()
    for doc in documents:
        for tag in _tags(doc):
            tag_counts[tag] += 1

    summary = FacilitySummary(
        physicalRating=averages["physicalRating"],
        sensoryRating=averages["sensoryRating"],
        cognitiveRating=averages["cognitiveRating"],
        reviewCount=count,
        commonAccessTags=rank_tags(tag_counts, common_tag_limit),
        accessTags=list(tag_counts),
    )
    logger.debug(
        f"Aggregated {count} reviews: {len(tag_counts)} distinct tags, "
        f"common={summary.common_access_tags}"
    )
    return summary


def validate_ratings(review: ReviewRecord) -> None:
    """
    Reject a review whose ratings are out of range.

    Absent ratings are allowed. Anything else must be a real number in
    [0, 5]; out-of-range values are never clamped.

    Raises:
        InvalidRatingError: naming the first offending field.
    """
    doc = _as_document(review)
    for field in ("rating",) + RATING_FIELDS:
        value = doc.get(field)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidRatingError(field, value)
        if isinstance(value, float) and math.isnan(value):
            raise InvalidRatingError(field, value)
        if not 0 <= value <= MAX_RATING:
            raise InvalidRatingError(field, value)


def validate_access_tags(review: ReviewRecord) -> None:
    """
    Reject accessTags that are not a list of strings.

    Raises:
        InvalidTagsError: accessTags is not a list of strings
    """
    tags = _as_document(review).get("accessTags")
    if tags is None:
        return
    if not isinstance(tags, (list, tuple)) or not all(isinstance(tag, str) for tag in tags):
        raise InvalidTagsError(tags)
