"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
Reservations are read-only here; every row comes back joined with its property.
"""

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import PooledExecutor
from models.reservation import Reservation
from utils.exceptions import QueryExecutionError
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for read operations on the reservations table."""

    def __init__(self, executor=None):
        self.executor = executor or PooledExecutor()

    def get_past_for_guest(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Reservation]:
        """
        Fetch a guest's completed reservations.

        Only stays that ended before today are returned, oldest first.
        The inner join on property_reviews drops properties without reviews,
        so `average_rating` is always set. It averages every review of the
        property, not only the one left for this reservation.

        Args:
            guest_id: ID of the guest user.
            limit: Maximum number of reservations to return.

        Returns:
            List of Reservation objects ordered by start_date ascending.
        """
        sql = """
            SELECT reservations.id AS reservation_id,
                   reservations.guest_id,
                   reservations.start_date,
                   reservations.end_date,
                   properties.*,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
              AND reservations.end_date < now()::date
            GROUP BY properties.id, reservations.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        try:
            result = self.executor.execute(sql, (guest_id, limit))
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch reservations for guest {guest_id}: {e}")
            raise QueryExecutionError("get past reservations", e) from e
        return [Reservation.from_row(r) for r in result.rows]
