"""
models/property.py
------------------
Domain model for rental property listings.
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Mapping, Optional

# Columns a caller must supply to create a property, in insert order.
REQUIRED_FIELDS: tuple[str, ...] = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


@dataclass
class Property:
    """
    Represents a property listed for rent.

    Attributes:
        owner_id: ID of the owning user.
        title: Listing headline.
        description: Free-text description.
        thumbnail_photo_url: Small photo shown in search results.
        cover_photo_url: Large photo shown on the listing page.
        cost_per_night: Nightly price in cents.
        street, city, province, post_code, country: Address fields.
        parking_spaces: Number of parking spots.
        number_of_bathrooms: Number of bathrooms.
        number_of_bedrooms: Number of bedrooms.
        active: Whether the listing is visible (database default TRUE).
        id: Database primary key (None for new records).
        average_rating: Mean review rating; only set by aggregate queries,
            None when the property has no reviews.
    """
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    active: bool = True
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Property":
        """Build a Property from a result row, ignoring columns it does not know."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in row.items() if k in known}
        rating = values.get("average_rating")
        if isinstance(rating, Decimal):
            values["average_rating"] = float(rating)
        return cls(**values)

    def insert_values(self) -> tuple:
        """Values for the INSERT statement, in REQUIRED_FIELDS order."""
        return tuple(getattr(self, name) for name in REQUIRED_FIELDS)

    def __str__(self) -> str:
        price = self.cost_per_night / 100
        return f"{self.title} ({self.city}) - ${price:.2f}/night"
