"""
repositories/property_repo.py
------------------------------
Data access layer for property listings.
All SQL queries related to the `properties` table live here.
"""

from typing import Any, Mapping, Optional, Union

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import PooledExecutor
from models.property import REQUIRED_FIELDS, Property
from models.search import PropertySearchOptions
from utils.exceptions import InvalidPropertyError, QueryExecutionError
from utils.logger import get_logger

logger = get_logger(__name__)

_SELECT_WITH_RATING = """
    SELECT properties.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
"""


class PropertyRepository:
    """Repository for create and read operations on the properties table."""

    def __init__(self, executor=None):
        self.executor = executor or PooledExecutor()

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Union[Property, Mapping[str, Any]]) -> Property:
        """
        Insert a new property.

        Args:
            prop: A Property, or a mapping holding every field in REQUIRED_FIELDS.

        Returns:
            The stored Property with its generated `id`.

        Raises:
            InvalidPropertyError: If a required field is missing.
            QueryExecutionError: If the insert fails.
        """
        if not isinstance(prop, Property):
            missing = [name for name in REQUIRED_FIELDS if prop.get(name) is None]
            if missing:
                raise InvalidPropertyError(missing)
            prop = Property(**{name: prop[name] for name in REQUIRED_FIELDS})

        columns = ", ".join(REQUIRED_FIELDS)
        placeholders = ", ".join(["%s"] * len(REQUIRED_FIELDS))
        sql = f"""
            INSERT INTO properties ({columns})
            VALUES ({placeholders})
            RETURNING *;
        """
        try:
            result = self.executor.execute(sql, prop.insert_values())
        except psycopg2.Error as e:
            logger.error(f"Failed to add property '{prop.title}': {e}")
            raise QueryExecutionError("add property", e) from e
        created = Property.from_row(result.rows[0])
        logger.info(f"Added property #{created.id} for owner {created.owner_id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, property_id: int) -> Optional[Property]:
        """
        Fetch a single property with its average rating.

        Returns:
            A Property or None if not found.
        """
        sql = _SELECT_WITH_RATING + """
            WHERE properties.id = %s
            GROUP BY properties.id;
        """
        try:
            result = self.executor.execute(sql, (property_id,))
        except psycopg2.Error as e:
            logger.error(f"Failed to fetch property #{property_id}: {e}")
            raise QueryExecutionError("get property by id", e) from e
        return Property.from_row(result.rows[0]) if result.rows else None

    def search(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> list[Property]:
        """
        List properties matching every given filter, cheapest first.

        Args:
            options: PropertySearchOptions or a raw mapping of the same keys.
                Missing filters are not applied.
            limit: Maximum number of properties to return.

        Returns:
            List of Property objects with `average_rating` (None when unreviewed).

        Raises:
            InvalidSearchOptionError: If a numeric option is not a number.
            QueryExecutionError: If the query fails.
        """
        if not isinstance(options, PropertySearchOptions):
            options = PropertySearchOptions.from_mapping(options)
        sql, params = self._build_search(options, limit)
        try:
            result = self.executor.execute(sql, params)
        except psycopg2.Error as e:
            logger.error(f"Failed to search properties with {options}: {e}")
            raise QueryExecutionError("search properties", e) from e
        return [Property.from_row(r) for r in result.rows]

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _build_search(options: PropertySearchOptions, limit: int) -> tuple[str, list]:
        """
        Assemble the search statement and its positional parameters.

        Row filters go in WHERE, the rating filter goes in HAVING since it
        applies to the aggregate. Parameters follow placeholder order.
        """
        conditions: list[tuple[str, Any]] = []
        if options.city is not None:
            conditions.append(("properties.city LIKE %s", f"%{options.city}%"))
        if options.owner_id is not None:
            conditions.append(("properties.owner_id = %s", options.owner_id))
        if options.minimum_price_per_night is not None:
            conditions.append(("properties.cost_per_night > %s", options.minimum_price_per_night))
        if options.maximum_price_per_night is not None:
            conditions.append(("properties.cost_per_night < %s", options.maximum_price_per_night))

        sql = _SELECT_WITH_RATING
        params: list = [value for _, value in conditions]
        if conditions:
            sql += "    WHERE " + " AND ".join(clause for clause, _ in conditions) + "\n"
        sql += "    GROUP BY properties.id\n"
        if options.minimum_rating is not None:
            sql += "    HAVING avg(property_reviews.rating) >= %s\n"
            params.append(options.minimum_rating)
        sql += "    ORDER BY properties.cost_per_night\n    LIMIT %s;"
        params.append(limit)
        return sql, params
