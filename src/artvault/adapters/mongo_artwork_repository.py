"""MongoDB-backed artwork repository."""

from dataclasses import dataclass
from datetime import datetime

from bson import ObjectId
from pymongo import DESCENDING, TEXT, ReturnDocument
from pymongo.collection import Collection

from artvault.domain.artwork import Artwork, ArtworkSort, RatingEntry
from artvault.services.artwork import ArtworkRepository

_FIELD_NAMES = {
    "title": "title",
    "description": "description",
    "image_url": "imageUrl",
}


@dataclass
class MongoArtworkRepository(ArtworkRepository):
    """MongoDB implementation for artwork persistence."""

    collection: Collection

    def list_artwork(
        self, creator_id: str | None, sort: ArtworkSort, limit: int
    ) -> list[Artwork]:
        """Return artwork in gallery order."""
        query = {"creatorId": creator_id} if creator_id else {}
        if sort is ArtworkSort.TOP_RATED:
            order = [("averageRating", DESCENDING), ("createdAt", DESCENDING)]
        else:
            order = [("createdAt", DESCENDING)]
        cursor = self.collection.find(query).sort(order).limit(limit)
        return [_parse_artwork(doc) for doc in cursor]

    def get_artwork(self, artwork_id: str) -> Artwork | None:
        """Return the artwork by id, if present."""
        if not ObjectId.is_valid(artwork_id):
            return None
        doc = self.collection.find_one({"_id": ObjectId(artwork_id)})
        return _parse_artwork(doc) if doc else None

    def create_artwork(
        self,
        creator_id: str,
        title: str,
        description: str,
        image_url: str,
        created_at: datetime,
    ) -> Artwork:
        """Insert a new artwork document and return it."""
        doc = {
            "title": title,
            "description": description,
            "imageUrl": image_url,
            "creatorId": creator_id,
            "ratings": [],
            "averageRating": 0.0,
            "totalRatings": 0,
            "createdAt": created_at,
            "updatedAt": created_at,
        }
        result = self.collection.insert_one(doc)
        if result.inserted_id is None:
            raise RuntimeError("Failed to create artwork")
        doc["_id"] = result.inserted_id
        return _parse_artwork(doc)

    def update_artwork(
        self, artwork_id: str, fields: dict[str, str], updated_at: datetime
    ) -> Artwork | None:
        """Set the given fields and return the updated artwork."""
        if not ObjectId.is_valid(artwork_id):
            return None
        changes: dict[str, object] = {
            _FIELD_NAMES[name]: value for name, value in fields.items()
        }
        changes["updatedAt"] = updated_at
        doc = self.collection.find_one_and_update(
            {"_id": ObjectId(artwork_id)},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return _parse_artwork(doc) if doc else None

    def delete_artwork(self, artwork_id: str) -> bool:
        """Delete an artwork document."""
        if not ObjectId.is_valid(artwork_id):
            return False
        result = self.collection.delete_one({"_id": ObjectId(artwork_id)})
        return result.deleted_count > 0

    def add_rating(
        self, artwork_id: str, entry: RatingEntry, rated_at: datetime
    ) -> Artwork | None:
        """Append a rating and recompute aggregates in one atomic update.

        The filter excludes documents the session already rated, so a
        duplicate matches nothing and leaves the document untouched.
        """
        if not ObjectId.is_valid(artwork_id):
            return None
        doc = self.collection.find_one_and_update(
            {
                "_id": ObjectId(artwork_id),
                "ratings.sessionId": {"$ne": entry.session_id},
            },
            _rating_pipeline(entry, rated_at),
            return_document=ReturnDocument.AFTER,
        )
        return _parse_artwork(doc) if doc else None

    def ensure_indexes(self) -> None:
        """Create gallery indexes."""
        self.collection.create_index([("createdAt", DESCENDING)])
        self.collection.create_index([("averageRating", DESCENDING)])
        self.collection.create_index("creatorId")
        self.collection.create_index("ratings.sessionId")
        self.collection.create_index([("title", TEXT), ("description", TEXT)])


def _rating_pipeline(entry: RatingEntry, rated_at: datetime) -> list[dict[str, object]]:
    """Update pipeline that appends the entry then refreshes the aggregates."""
    appended = {"$literal": [{"sessionId": entry.session_id, "rating": entry.rating}]}
    # floor(sum * 10 / n + 0.5) / 10 rounds half-up to one decimal.
    scaled_mean = {
        "$divide": [
            {"$multiply": [{"$sum": "$ratings.rating"}, 10]},
            {"$size": "$ratings"},
        ]
    }
    return [
        {
            "$set": {
                "ratings": {
                    "$concatArrays": [{"$ifNull": ["$ratings", []]}, appended]
                }
            }
        },
        {
            "$set": {
                "totalRatings": {"$size": "$ratings"},
                "averageRating": {
                    "$divide": [{"$floor": {"$add": [scaled_mean, 0.5]}}, 10]
                },
                "updatedAt": rated_at,
            }
        },
    ]


def _parse_artwork(doc: dict[str, object]) -> Artwork:
    """Parse an artwork document into a domain model."""
    ratings = tuple(
        RatingEntry(session_id=str(item["sessionId"]), rating=int(item["rating"]))
        for item in doc.get("ratings") or []
    )
    created_at = doc["createdAt"]
    return Artwork(
        id=str(doc["_id"]),
        title=str(doc.get("title", "")),
        description=str(doc.get("description", "")),
        image_url=str(doc.get("imageUrl", "")),
        creator_id=str(doc.get("creatorId", "")),
        ratings=ratings,
        average_rating=float(doc.get("averageRating", 0.0)),
        total_ratings=int(doc.get("totalRatings", len(ratings))),
        created_at=created_at,
        updated_at=doc.get("updatedAt") or created_at,
    )
