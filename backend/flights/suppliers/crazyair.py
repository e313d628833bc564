from flights.domain import NormalizedOffer, SearchRequest
from flights.services.normalize import parse_timestamp, to_decimal
from flights.suppliers.base import SupplierClient


class CrazyAirSupplier(SupplierClient):
    """CrazyAir quotes a final price per flight; it is passed through as-is."""

    name = "CrazyAir"

    def build_query(self, request: SearchRequest) -> dict:
        return {
            "origin": request.origin,
            "destination": request.destination,
            "departureDate": request.departure_date.isoformat(),
            "returnDate": request.return_date.isoformat(),
            "passengerCount": request.passenger_count,
        }

    def to_offer(self, record: dict) -> NormalizedOffer:
        return NormalizedOffer(
            airline=record["airline"],
            supplier=self.name,
            fare=to_decimal(record["price"]),
            departure_airport_code=record["departureAirportCode"],
            destination_airport_code=record["destinationAirportCode"],
            departure_date=parse_timestamp(record["departureDate"]),
            arrival_date=parse_timestamp(record["arrivalDate"]),
        )
