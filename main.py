import logging
import sys
from typing import List, Optional

from fastapi import FastAPI, Depends, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from pymongo.database import Database

import settings
import stores
from catalog import get_tag_category
from database import get_db
from errors import ConcurrentUpdateError, FacilityNotFoundError, InvalidInputError
from schemas import AccessTag, Facility, Review, TagCategory
from services import recalculate_facility_metrics, submit_review

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = settings.LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


setup_logging()

# App setup
app = FastAPI(title="Access Assist API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Response models
class FacilityOut(BaseModel):
    id: str
    name: str = ""
    address: str = ""
    location: dict = Field(default_factory=dict)
    placeId: Optional[str] = None
    photo: Optional[str] = None
    physicalRating: float = 0
    sensoryRating: float = 0
    cognitiveRating: float = 0
    reviewCount: int = 0
    commonAccessTags: List[str] = Field(default_factory=list)
    accessTags: List[str] = Field(default_factory=list)
    createdAt: Optional[str] = None


class ReviewOut(BaseModel):
    id: str
    facilityId: str
    userId: Optional[str] = None
    rating: Optional[float] = None
    comment: str = ""
    physicalRating: Optional[float] = None
    sensoryRating: Optional[float] = None
    cognitiveRating: Optional[float] = None
    accessTags: List[str] = Field(default_factory=list)
    isAnonymous: bool = False
    createdAt: Optional[str] = None


class AccessTagOut(AccessTag):
    id: str


# Utilities

def serialize_facility(doc) -> dict:
    return {
        "id": str(doc["_id"]),
        "name": doc.get("name", ""),
        "address": doc.get("address", ""),
        "location": doc.get("location") or {},
        "placeId": doc.get("placeId"),
        "photo": doc.get("photo"),
        "physicalRating": float(doc.get("physicalRating", 0)),
        "sensoryRating": float(doc.get("sensoryRating", 0)),
        "cognitiveRating": float(doc.get("cognitiveRating", 0)),
        "reviewCount": int(doc.get("reviewCount", 0)),
        "commonAccessTags": list(doc.get("commonAccessTags") or []),
        "accessTags": list(doc.get("accessTags") or []),
        "createdAt": doc.get("createdAt"),
    }


def serialize_review(doc) -> dict:
    out = {
        "id": str(doc["_id"]),
        "facilityId": doc.get("facilityId"),
        "userId": doc.get("userId"),
        "rating": doc.get("rating"),
        "comment": doc.get("comment", ""),
        "physicalRating": doc.get("physicalRating"),
        "sensoryRating": doc.get("sensoryRating"),
        "cognitiveRating": doc.get("cognitiveRating"),
        "accessTags": list(doc.get("accessTags") or []),
        "isAnonymous": bool(doc.get("isAnonymous", False)),
        "createdAt": doc.get("createdAt"),
    }
    if out["isAnonymous"]:
        out["userId"] = None
    return out


def serialize_tag(doc) -> dict:
    return {
        "id": str(doc["_id"]),
        "name": doc.get("name"),
        "description": doc.get("description", ""),
        "icon": doc.get("icon", ""),
        "category": doc.get("category"),
    }


# Routes
@app.get("/")
def root():
    return {"message": "Access Assist API"}


@app.get("/test")
def test_database(db: Database = Depends(get_db)):
    try:
        collections = db.list_collection_names()
        return {"backend": "ok", "database": "ok", "collections": collections}
    except Exception as e:
        return {"backend": "ok", "database": f"error: {str(e)[:80]}"}


# Facilities
@app.get("/facilities", response_model=List[FacilityOut])
def list_facilities(q: str = "", db: Database = Depends(get_db)):
    return [serialize_facility(f) for f in stores.search_facilities(db, q.strip())]


@app.get("/facilities/{facility_id}", response_model=FacilityOut)
def get_facility(facility_id: str, db: Database = Depends(get_db)):
    facility = stores.get_facility(db, facility_id)
    if not facility:
        raise HTTPException(404, "Facility not found")
    return serialize_facility(facility)


@app.put("/facilities/{facility_id}", response_model=FacilityOut)
def create_facility(facility_id: str, payload: Facility, db: Database = Depends(get_db)):
    stores.create_facility_if_missing(db, facility_id, payload.model_dump(by_alias=True, exclude_none=True))
    return serialize_facility(stores.get_facility(db, facility_id))


@app.post("/facilities/{facility_id}/recalculate", response_model=FacilityOut)
def recalculate_facility(facility_id: str, db: Database = Depends(get_db)):
    try:
        facility = recalculate_facility_metrics(db, facility_id)
    except FacilityNotFoundError:
        raise HTTPException(404, "Facility not found")
    except ConcurrentUpdateError as e:
        raise HTTPException(409, detail=str(e))
    return serialize_facility(facility)


# Reviews
@app.get("/facilities/{facility_id}/reviews", response_model=List[ReviewOut])
def list_reviews(facility_id: str, db: Database = Depends(get_db)):
    reviews = stores.find_reviews_by_facility(db, facility_id, newest_first=True)
    return [serialize_review(r) for r in reviews]


@app.post("/facilities/{facility_id}/reviews", response_model=FacilityOut)
def add_review(facility_id: str, payload: Review, db: Database = Depends(get_db)):
    try:
        facility = submit_review(db, facility_id, payload)
    except InvalidInputError as e:
        raise HTTPException(400, detail=str(e))
    except ConcurrentUpdateError:
        raise HTTPException(409, detail="Could not submit review, try again")
    return serialize_facility(facility)


@app.get("/users/{user_id}/reviews", response_model=List[ReviewOut])
def user_reviews(user_id: str, db: Database = Depends(get_db)):
    return [serialize_review(r) for r in stores.find_reviews_by_user(db, user_id)]


# Access tags
@app.get("/access-tags", response_model=List[AccessTagOut])
def list_access_tags(category: Optional[TagCategory] = Query(None), db: Database = Depends(get_db)):
    return [serialize_tag(t) for t in stores.list_access_tags(db, category)]


@app.post("/access-tags", response_model=AccessTagOut)
def add_access_tag(payload: AccessTag, db: Database = Depends(get_db)):
    if stores.get_access_tag(db, payload.name):
        raise HTTPException(400, detail="Access tag already exists")
    tag = payload.model_dump()
    if tag["category"] is None:
        tag["category"] = get_tag_category(payload.name)
    stores.add_access_tag(db, tag)
    return serialize_tag(stores.get_access_tag(db, payload.name))


# Seed endpoint
@app.post("/seed")
def seed(db: Database = Depends(get_db)):
    added = stores.seed_access_tags(db)
    return {"access_tags_added": added}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
