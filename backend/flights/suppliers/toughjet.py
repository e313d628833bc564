from flights.domain import NormalizedOffer, SearchRequest
from flights.services.normalize import discounted_fare, parse_timestamp
from flights.suppliers.base import SupplierClient


class ToughJetSupplier(SupplierClient):
    """ToughJet splits the price into base, tax and a percentage discount.

    Its timestamps carry no zone and are read as UTC.
    """

    name = "ToughJet"

    def build_query(self, request: SearchRequest) -> dict:
        return {
            "from": request.origin,
            "to": request.destination,
            "outboundDate": request.departure_date.isoformat(),
            "inboundDate": request.return_date.isoformat(),
            "numberOfAdults": request.passenger_count,
        }

    def to_offer(self, record: dict) -> NormalizedOffer:
        return NormalizedOffer(
            airline=record["carrier"],
            supplier=self.name,
            fare=discounted_fare(record["basePrice"], record["tax"], record["discount"]),
            departure_airport_code=record["departureAirportName"],
            destination_airport_code=record["arrivalAirportName"],
            departure_date=parse_timestamp(record["outboundDateTime"]),
            arrival_date=parse_timestamp(record["inboundDateTime"]),
        )
