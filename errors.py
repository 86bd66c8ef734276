"""
Exceptions raised by the aggregation and review-submission layers.

Routes in main.py translate these into HTTP errors.
"""


class AccessAssistError(Exception):
    """Base class for all application errors."""


class InvalidInputError(AccessAssistError):
    pass


class InvalidRatingError(InvalidInputError):
    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a number between 0 and 5, got {value!r}")


class FacilityNotFoundError(AccessAssistError):
    def __init__(self, facility_id: str):
        self.facility_id = facility_id
        super().__init__(f"Facility not found: {facility_id}")


class ConcurrentUpdateError(AccessAssistError):
    """The facility summary write kept losing to concurrent writers."""

    def __init__(self, facility_id: str, attempts: int):
        self.facility_id = facility_id
        self.attempts = attempts
        super().__init__(
            f"Could not update summary for facility {facility_id} after {attempts} attempts"
        )


class InvalidTagsError(InvalidInputError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"accessTags must be a list of tag names, got {value!r}")
