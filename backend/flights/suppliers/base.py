from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod

import requests
from django.conf import settings

from flights.domain import NormalizedOffer, SearchRequest

logger = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT = 10


class SupplierErrorKind(str, enum.Enum):
    BAD_RESPONSE = "bad_response"
    TRANSPORT_FAILURE = "transport_failure"


class SupplierError(Exception):
    """A single supplier could not produce offers for a search."""

    def __init__(self, message, *, kind, supplier, status=None, cause=None):
        super().__init__(message)
        self.kind = kind
        self.supplier = supplier
        self.status = status
        self.cause = cause


class SupplierClient(ABC):
    """Translates a search into one supplier's wire format and back.

    Subclasses provide the query parameters and the per-record translation;
    the request/response handling in ``search`` is shared.
    """

    name = "base"

    def __init__(self, base_url: str, *, timeout: float | None = None, session=None):
        self.base_url = base_url
        if timeout is None:
            timeout = getattr(settings, "SUPPLIER_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)
        self.timeout = timeout
        self.session = session or requests

    @abstractmethod
    def build_query(self, request: SearchRequest) -> dict:
        """Return the supplier-specific query parameters."""

    @abstractmethod
    def to_offer(self, record: dict) -> NormalizedOffer:
        """Convert one raw supplier record into a normalized offer."""

    def search(self, request: SearchRequest) -> list[NormalizedOffer]:
        query = self.build_query(request)
        status_code, records = self._request_records(query)
        try:
            return [self.to_offer(record) for record in records]
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning(
                "%s returned a malformed record",
                self.name,
                extra={"supplier": self.name, "error": str(exc)},
            )
            raise SupplierError(
                f"Supplier {self.name} returned a malformed record.",
                kind=SupplierErrorKind.BAD_RESPONSE,
                supplier=self.name,
                status=status_code,
                cause=exc,
            ) from exc

    def _request_records(self, query: dict) -> tuple[int, list]:
        try:
            url = requests.Request("GET", self.base_url, params=query).prepare().url
            logger.info("Calling %s API with URL: %s", self.name, url)
            response = self.session.get(self.base_url, params=query, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.exception("Exception when calling %s API", self.name)
            raise SupplierError(
                f"Error calling supplier {self.name} API",
                kind=SupplierErrorKind.TRANSPORT_FAILURE,
                supplier=self.name,
                cause=exc,
            ) from exc

        status_code = response.status_code
        if not 200 <= status_code < 300:
            logger.warning(
                "Failed response from %s API: HTTP %s",
                self.name,
                status_code,
                extra={"supplier": self.name, "status_code": status_code},
            )
            raise SupplierError(
                f"Failed to fetch flights from supplier {self.name}: HTTP {status_code}",
                kind=SupplierErrorKind.BAD_RESPONSE,
                supplier=self.name,
                status=status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("%s response was not valid JSON", self.name)
            raise SupplierError(
                f"Supplier {self.name} response was not valid JSON.",
                kind=SupplierErrorKind.BAD_RESPONSE,
                supplier=self.name,
                status=status_code,
                cause=exc,
            ) from exc

        if not isinstance(payload, list):
            logger.warning(
                "%s response was not a list of flights",
                self.name,
                extra={"supplier": self.name, "payload_type": type(payload).__name__},
            )
            raise SupplierError(
                f"Supplier {self.name} response was not a list of flights.",
                kind=SupplierErrorKind.BAD_RESPONSE,
                supplier=self.name,
                status=status_code,
            )

        return status_code, payload
