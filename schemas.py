"""
Database Schemas for the Access Assist API

Each Pydantic model describes the shape of a MongoDB document.
Attributes are snake_case; the stored documents use the camelCase
field names given as aliases.
- Facility -> "facilities"
- Review -> "reviews"
- AccessTag -> "access_tags"
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

TagCategory = Literal["physical", "sensory", "cognitive"]


class Location(BaseModel):
    latitude: float = Field(0.0, ge=-90, le=90)
    longitude: float = Field(0.0, ge=-180, le=180)


class FacilitySummary(BaseModel):
    """Derived fields written onto a facility after every review."""

    model_config = ConfigDict(populate_by_name=True)

    physical_rating: float = Field(0, alias="physicalRating", description="Average physical rating")
    sensory_rating: float = Field(0, alias="sensoryRating", description="Average sensory rating")
    cognitive_rating: float = Field(0, alias="cognitiveRating", description="Average cognitive rating")
    review_count: int = Field(0, ge=0, alias="reviewCount", description="Number of reviews")
    common_access_tags: List[str] = Field(
        default_factory=list, alias="commonAccessTags", description="Most cited tags"
    )
    access_tags: List[str] = Field(
        default_factory=list, alias="accessTags", description="Every tag cited at least once"
    )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class Facility(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field("", description="Facility name")
    address: str = Field("", description="Street address")
    location: Location = Field(default_factory=Location)
    place_id: Optional[str] = Field(None, alias="placeId", description="Places-search identifier")
    photo: Optional[str] = Field(None, description="Photo URL")


class Review(BaseModel):
    """A review as submitted. facilityId and createdAt are set by the server."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId", description="Author identifier")
    facility_name: Optional[str] = Field(None, alias="facilityName")
    facility_address: Optional[str] = Field(None, alias="facilityAddress")
    facility_location: Optional[Location] = Field(None, alias="facilityLocation")
    rating: Optional[float] = Field(None, ge=0, le=5, description="Overall rating")
    comment: str = Field("", description="Free-form review text")
    physical_rating: Optional[float] = Field(None, ge=0, le=5, alias="physicalRating")
    sensory_rating: Optional[float] = Field(None, ge=0, le=5, alias="sensoryRating")
    cognitive_rating: Optional[float] = Field(None, ge=0, le=5, alias="cognitiveRating")
    access_tags: List[str] = Field(default_factory=list, alias="accessTags")
    is_anonymous: bool = Field(False, alias="isAnonymous")


class AccessTag(BaseModel):
    name: str = Field(..., min_length=1, description="Tag name, e.g. Elevator")
    description: str = Field("", description="What the feature is")
    icon: str = Field("", description="Icon identifier")
    category: Optional[TagCategory] = Field(None, description="physical, sensory or cognitive")
