"""Value types shared by the supplier clients and the aggregator."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class SearchRequest:
    """A validated search; built by ``SearchRequestSerializer``."""

    origin: str
    destination: str
    departure_date: date
    return_date: date
    passenger_count: int


@dataclass(frozen=True)
class NormalizedOffer:
    """One flight quote, independent of the supplier that produced it.

    ``fare`` is a ``Decimal`` so computed prices keep exact cents. Both
    timestamps are timezone-aware and expressed in UTC.
    """

    airline: str
    supplier: str
    fare: Decimal
    departure_airport_code: str
    destination_airport_code: str
    departure_date: datetime
    arrival_date: datetime

    def __post_init__(self):
        if self.fare < 0:
            raise ValueError(f"Fare must be non-negative, got {self.fare}")
