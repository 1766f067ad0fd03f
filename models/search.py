"""
models/search.py
----------------
Filters accepted by the property search.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from utils.exceptions import InvalidSearchOptionError


def _whole_number(value: Any) -> int:
    """int() that refuses to truncate fractional floats."""
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{value} is not a whole number")
    return int(value)


def _coerce(name: str, value: Any, cast: Callable[[Any], Any]):
    """Cast a raw option value, treating None and blank strings as absent."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise InvalidSearchOptionError(name, value)
    try:
        result = cast(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidSearchOptionError(name, value) from e
    # NaN and infinity parse as floats but never compare usefully in SQL.
    if isinstance(result, float) and not math.isfinite(result):
        raise InvalidSearchOptionError(name, value)
    return result


@dataclass(frozen=True)
class PropertySearchOptions:
    """
    Optional filters for listing properties. Unset fields are not applied.

    Attributes:
        city: Substring the city must contain (case-sensitive).
        owner_id: Only properties owned by this user.
        minimum_price_per_night: Exclusive lower bound on cost_per_night.
        maximum_price_per_night: Exclusive upper bound on cost_per_night.
        minimum_rating: Inclusive lower bound on the average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    minimum_rating: Optional[float] = None

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "PropertySearchOptions":
        """
        Build options from loosely typed input such as query-string values.

        Raises:
            InvalidSearchOptionError: If a numeric option is not a finite number,
                or owner_id is not a whole number.
        """
        if not options:
            return cls()
        return cls(
            city=_coerce("city", options.get("city"), str),
            owner_id=_coerce("owner_id", options.get("owner_id"), _whole_number),
            minimum_price_per_night=_coerce(
                "minimum_price_per_night", options.get("minimum_price_per_night"), float
            ),
            maximum_price_per_night=_coerce(
                "maximum_price_per_night", options.get("maximum_price_per_night"), float
            ),
            minimum_rating=_coerce("minimum_rating", options.get("minimum_rating"), float),
        )

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.city,
                self.owner_id,
                self.minimum_price_per_night,
                self.maximum_price_per_night,
                self.minimum_rating,
            )
        )
