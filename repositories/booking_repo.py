"""
repositories/booking_repo.py
-----------------------------
Single entry point to the LightBnB data-access layer.

Route handlers talk to PropertyBookingRepository instead of the
per-table repositories. All of them share the executor passed in here.
"""

from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from models.property import Property
from models.reservation import Reservation
from models.search import PropertySearchOptions
from models.user import User
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository


class PropertyBookingRepository:
    """
    Facade over the user, reservation and property repositories.

    Error policy (same for every method):
        - no matching row: None, or an empty list for listings;
        - invalid input: InvalidSearchOptionError / InvalidPropertyError;
        - database failure: QueryExecutionError.
    """

    def __init__(self, executor=None):
        self.users = UserRepository(executor)
        self.executor = self.users.executor
        self.reservations = ReservationRepository(self.executor)
        self.properties = PropertyRepository(self.executor)

    # ── Users ─────────────────────────────────────────────

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.get_by_email(email)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get_by_id(user_id)

    def create_user(self, user: Union[User, Mapping[str, Any]]) -> User:
        return self.users.add(user)

    # ── Reservations ──────────────────────────────────────

    def list_reservations_for_guest(
        self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Reservation]:
        return self.reservations.get_past_for_guest(guest_id, limit)

    # ── Properties ────────────────────────────────────────

    def list_properties(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        return self.properties.search(options, limit)

    def get_property_by_id(self, property_id: int) -> Optional[Property]:
        return self.properties.get_by_id(property_id)

    def create_property(self, prop: Union[Property, Mapping[str, Any]]) -> Property:
        return self.properties.add(prop)
