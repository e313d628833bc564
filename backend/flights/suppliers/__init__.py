from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from flights.suppliers.base import SupplierClient, SupplierError, SupplierErrorKind
from flights.suppliers.crazyair import CrazyAirSupplier
from flights.suppliers.toughjet import ToughJetSupplier

__all__ = [
    "CrazyAirSupplier",
    "SupplierClient",
    "SupplierError",
    "SupplierErrorKind",
    "ToughJetSupplier",
    "get_supplier_clients",
]

DEFAULT_SUPPLIERS = ["crazyair", "toughjet"]

SUPPLIER_CLASSES = {
    "crazyair": CrazyAirSupplier,
    "toughjet": ToughJetSupplier,
}

ALIASES = {
    "crazy-air": "crazyair",
    "crazy_air": "crazyair",
    "tough-jet": "toughjet",
    "tough_jet": "toughjet",
}


def get_supplier_clients() -> list[SupplierClient]:
    """Return the configured supplier clients in registration order."""

    raw_names = getattr(settings, "FLIGHT_SUPPLIERS", DEFAULT_SUPPLIERS)
    api_urls = getattr(settings, "SUPPLIER_API_URLS", None) or {}

    clients = []
    seen = set()
    for raw_name in raw_names:
        supplier_name = str(raw_name).strip().lower()
        supplier_name = ALIASES.get(supplier_name, supplier_name)

        supplier_class = SUPPLIER_CLASSES.get(supplier_name)
        if supplier_class is None:
            raise ImproperlyConfigured(f"Unknown flight supplier: {raw_name}")
        if supplier_name in seen:
            raise ImproperlyConfigured(f"Flight supplier registered twice: {supplier_name}")

        base_url = api_urls.get(supplier_name)
        if not base_url:
            raise ImproperlyConfigured(f"No API URL configured for flight supplier: {supplier_name}")

        seen.add(supplier_name)
        clients.append(supplier_class(base_url))

    return clients
