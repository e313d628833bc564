"""Concurrent fan-out over every registered supplier, merged into one ranked list."""
from __future__ import annotations

import enum
import logging
from concurrent.futures import ThreadPoolExecutor
from operator import attrgetter
from typing import Sequence

from flights.domain import NormalizedOffer, SearchRequest
from flights.suppliers import SupplierClient, SupplierError, SupplierErrorKind, get_supplier_clients

logger = logging.getLogger(__name__)


class AggregateErrorKind(str, enum.Enum):
    ALL_SUPPLIERS_FAILED = "all_suppliers_failed"


class AggregateError(Exception):
    """Raised when no supplier produced a usable response."""

    def __init__(self, message, *, first_cause, kind=AggregateErrorKind.ALL_SUPPLIERS_FAILED):
        super().__init__(message)
        self.kind = kind
        self.first_cause = first_cause


class Aggregator:
    def __init__(self, suppliers: Sequence[SupplierClient], *, max_workers: int | None = None):
        self.suppliers = tuple(suppliers)
        self.max_workers = max_workers

    def search(self, request: SearchRequest) -> list[NormalizedOffer]:
        """Query every supplier concurrently and return offers sorted by fare.

        Failed suppliers are dropped as long as one supplier succeeds. Ties on
        fare keep supplier registration order, whatever order the calls finish in.

        Raises:
            AggregateError: every supplier failed; ``first_cause`` is the
                failure of the earliest registered supplier.
        """
        if not self.suppliers:
            return []

        workers = self.max_workers or len(self.suppliers)
        # Leaving the executor block waits for every call; nothing is cancelled.
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="supplier") as executor:
            futures = [executor.submit(supplier.search, request) for supplier in self.suppliers]

        batches: list[list[NormalizedOffer]] = []
        failures: list[SupplierError] = []
        for supplier, future in zip(self.suppliers, futures):
            try:
                batches.append(list(future.result()))
            except SupplierError as exc:
                failures.append(exc)
            except Exception as exc:
                logger.exception("Unexpected error from supplier %s", supplier.name)
                failures.append(
                    SupplierError(
                        f"Unexpected error from supplier {supplier.name}",
                        kind=SupplierErrorKind.BAD_RESPONSE,
                        supplier=supplier.name,
                        cause=exc,
                    )
                )

        if len(failures) == len(self.suppliers):
            first_cause = failures[0]
            logger.error(
                "All %s suppliers failed",
                len(self.suppliers),
                extra={"suppliers": [failure.supplier for failure in failures]},
            )
            raise AggregateError(
                "Failed to fetch flight search details from all suppliers",
                first_cause=first_cause,
            ) from first_cause

        for failure in failures:
            logger.warning(
                "Dropping supplier %s from results: %s",
                failure.supplier,
                failure,
                extra={"supplier": failure.supplier, "kind": failure.kind.value},
            )

        offers = [offer for batch in batches for offer in batch]
        logger.info(
            "Aggregated %s offers from %s of %s suppliers",
            len(offers),
            len(batches),
            len(self.suppliers),
        )
        # sorted() is stable, so equal fares stay in registration order.
        return sorted(offers, key=attrgetter("fare"))


def get_aggregator() -> Aggregator:
    """Return an aggregator over the configured suppliers."""
    return Aggregator(get_supplier_clients())
