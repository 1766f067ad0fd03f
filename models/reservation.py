"""
models/reservation.py
---------------------
Domain model for a guest's reservation, joined with the reserved property.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from models.property import Property


@dataclass
class Reservation:
    """
    Represents one stay by a guest at a property.

    Attributes:
        id: Database primary key.
        property_id: ID of the reserved property.
        guest_id: ID of the guest user.
        start_date: First night of the stay.
        end_date: Checkout date.
        property: The reserved property, including its average rating.
    """
    id: int
    property_id: int
    guest_id: int
    start_date: date
    end_date: date
    property: Optional[Property] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Reservation":
        """
        Build a Reservation from a reservation/property join row.

        The row carries the property columns unprefixed and the
        reservation's own id as ``reservation_id``.
        """
        return cls(
            id=row["reservation_id"],
            property_id=row["id"],
            guest_id=row["guest_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            property=Property.from_row(row),
        )

    def nights(self) -> int:
        """Length of the stay in nights."""
        return (self.end_date - self.start_date).days

    def __str__(self) -> str:
        title = self.property.title if self.property else f"property #{self.property_id}"
        return f"{title}: {self.start_date} → {self.end_date}"
