"""
Tests for review submission and facility recalculation against the
in-memory database from conftest.
"""

import pytest

import services
import stores
from errors import ConcurrentUpdateError, FacilityNotFoundError, InvalidRatingError, InvalidTagsError
from schemas import Review


def test_submit_review_creates_facility_and_summary(db):
    review = Review(
        userId="user-1",
        facilityName="Central Library",
        facilityAddress="1 Main St",
        facilityLocation={"latitude": 43.6, "longitude": -79.4},
        physicalRating=4,
        sensoryRating=3,
        cognitiveRating=5,
        accessTags=["Elevator", "Ramp"],
    )

    facility = services.submit_review(db, "place-1", review)

    assert facility["_id"] == "place-1"
    assert facility["placeId"] == "place-1"
    assert facility["name"] == "Central Library"
    assert facility["location"] == {"latitude": 43.6, "longitude": -79.4}
    assert facility["physicalRating"] == 4.0
    assert facility["reviewCount"] == 1
    assert facility["commonAccessTags"] == ["Elevator", "Ramp"]
    assert facility["revision"] == 1


def test_submit_review_stamps_review(db):
    services.submit_review(db, "place-1", {"physicalRating": 2, "facilityId": "elsewhere"})

    [stored] = stores.find_reviews_by_facility(db, "place-1")
    assert stored["facilityId"] == "place-1"
    assert stored["accessTags"] == []
    assert stored["createdAt"]


def test_second_review_recomputes_from_all_reviews(db):
    services.submit_review(db, "place-1", {"physicalRating": 5, "accessTags": ["Ramp", "Quiet"]})
    facility = services.submit_review(db, "place-1", {"physicalRating": 2, "accessTags": ["Ramp"]})

    assert facility["reviewCount"] == 2
    assert facility["physicalRating"] == 3.5
    assert facility["commonAccessTags"] == ["Ramp", "Quiet"]
    assert facility["revision"] == 2


def test_existing_facility_details_are_kept(db):
    stores.create_facility_if_missing(db, "place-1", {"name": "Town Hall", "address": "2 King St"})

    facility = services.submit_review(db, "place-1", {"facilityName": "Other name", "sensoryRating": 1})

    assert facility["name"] == "Town Hall"
    assert facility["address"] == "2 King St"
    assert facility["sensoryRating"] == 1.0


def test_invalid_rating_stores_nothing(db):
    with pytest.raises(InvalidRatingError):
        services.submit_review(db, "place-1", {"physicalRating": 7})

    assert stores.get_facility(db, "place-1") is None
    assert stores.find_reviews_by_facility(db, "place-1") == []


def test_recalculate_unknown_facility(db):
    with pytest.raises(FacilityNotFoundError):
        services.recalculate_facility_metrics(db, "missing")


def test_recalculate_repairs_stale_summary(db):
    stores.create_facility_if_missing(db, "place-1", {"name": "Gym"})
    stores.create_review(db, {"facilityId": "place-1", "cognitiveRating": 4, "createdAt": "2024-01-01T00:00:00"})
    stores.create_review(db, {"facilityId": "place-1", "cognitiveRating": 3, "createdAt": "2024-01-02T00:00:00"})

    facility = services.recalculate_facility_metrics(db, "place-1")
    again = services.recalculate_facility_metrics(db, "place-1")

    assert facility["cognitiveRating"] == 3.5
    assert facility["reviewCount"] == 2
    assert {k: again[k] for k in ("cognitiveRating", "reviewCount")} == {"cognitiveRating": 3.5, "reviewCount": 2}


def test_recalculate_handles_facility_without_revision(db):
    db["facilities"].insert_one({"_id": "legacy", "name": "Old Facility"})
    stores.create_review(db, {"facilityId": "legacy", "physicalRating": 3, "createdAt": "2024-01-01T00:00:00"})

    facility = services.recalculate_facility_metrics(db, "legacy")

    assert facility["physicalRating"] == 3.0
    assert facility["revision"] == 1


def test_recalculate_retries_after_concurrent_write(db, monkeypatch):
    services.submit_review(db, "place-1", {"physicalRating": 4})
    original_find = stores.find_reviews_by_facility
    calls = []

    def racing_find(database, facility_id, newest_first=False):
        calls.append(facility_id)
        if len(calls) == 1:
            # Another writer lands a review and a summary in between
            stores.create_review(database, {"facilityId": facility_id, "physicalRating": 2, "createdAt": "9999"})
            database["facilities"].update_one({"_id": facility_id}, {"$inc": {"revision": 1}})
        return original_find(database, facility_id, newest_first)

    monkeypatch.setattr(stores, "find_reviews_by_facility", racing_find)

    facility = services.recalculate_facility_metrics(db, "place-1")

    assert len(calls) == 2
    assert facility["reviewCount"] == 2
    assert facility["physicalRating"] == 3.0


def test_recalculate_gives_up_when_always_contended(db, monkeypatch):
    services.submit_review(db, "place-1", {"physicalRating": 4})
    monkeypatch.setattr(stores, "update_facility_summary", lambda *args: False)

    with pytest.raises(ConcurrentUpdateError) as exc_info:
        services.recalculate_facility_metrics(db, "place-1", max_retries=3)

    assert exc_info.value.attempts == 3


def test_submit_review_keeps_review_when_summary_write_fails(db, monkeypatch):
    monkeypatch.setattr(stores, "update_facility_summary", lambda *args: False)

    with pytest.raises(ConcurrentUpdateError):
        services.submit_review(db, "place-1", {"physicalRating": 4})

    assert len(stores.find_reviews_by_facility(db, "place-1")) == 1


def test_string_access_tags_are_rejected(db):
    with pytest.raises(InvalidTagsError):
        services.submit_review(db, "place-1", {"physicalRating": 3, "accessTags": "Ramp"})

    assert stores.get_facility(db, "place-1") is None
    assert stores.find_reviews_by_facility(db, "place-1") == []


def test_recalculate_survives_non_finite_stored_ratings(db):
    stores.create_facility_if_missing(db, "place-1", {"name": "Arena"})
    stores.create_review(db, {"facilityId": "place-1", "physicalRating": float("inf"), "createdAt": "2024-01-01T00:00:00"})
    stores.create_review(db, {"facilityId": "place-1", "physicalRating": 3, "createdAt": "2024-01-02T00:00:00"})

    facility = services.recalculate_facility_metrics(db, "place-1")

    assert facility["physicalRating"] == 1.5
    assert facility["reviewCount"] == 2
