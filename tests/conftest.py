"""
Test configuration and fixtures for the LightBnB data-access layer.
Provides an in-memory executor that records SQL and replays canned rows.
"""

from collections import deque
from datetime import date

import pytest

from db.connection import QueryResult
from repositories.booking_repo import PropertyBookingRepository
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository


class FakeExecutor:
    """Stands in for PooledExecutor: records calls, returns queued rows."""

    def __init__(self):
        self.calls: list[tuple[str, list]] = []
        self._results: deque = deque()
        self.error: Exception | None = None

    def queue(self, *rows: dict) -> None:
        """Queue the rows returned by the next execute() call."""
        self._results.append([dict(r) for r in rows])

    def execute(self, sql, params=()):
        self.calls.append((sql, list(params)))
        if self.error is not None:
            raise self.error
        rows = self._results.popleft() if self._results else []
        return QueryResult(rows=rows, rowcount=len(rows))

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_params(self) -> list:
        return self.calls[-1][1]


def normalize_sql(sql: str) -> str:
    """Collapse whitespace so assertions do not depend on indentation."""
    return " ".join(sql.split())


def make_user_row(**overrides) -> dict:
    row = {
        "id": 1,
        "name": "Devin Sanders",
        "email": "tristanjacobs@gmail.com",
        "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
    }
    row.update(overrides)
    return row


def make_property_row(**overrides) -> dict:
    row = {
        "id": 1,
        "owner_id": 1,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/thumb.jpeg",
        "cover_photo_url": "https://images.pexels.com/photos/2086676/cover.jpeg",
        "cost_per_night": 93061,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "active": True,
        "average_rating": None,
    }
    row.update(overrides)
    return row


def make_reservation_row(**overrides) -> dict:
    row = make_property_row(average_rating=4.0)
    row.update({
        "reservation_id": 7,
        "guest_id": 3,
        "start_date": date(2018, 9, 11),
        "end_date": date(2018, 9, 26),
    })
    row.update(overrides)
    return row


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def user_repository(executor) -> UserRepository:
    return UserRepository(executor)


@pytest.fixture
def property_repository(executor) -> PropertyRepository:
    return PropertyRepository(executor)


@pytest.fixture
def reservation_repository(executor) -> ReservationRepository:
    return ReservationRepository(executor)


@pytest.fixture
def booking_repository(executor) -> PropertyBookingRepository:
    return PropertyBookingRepository(executor)
