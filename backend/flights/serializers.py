from rest_framework import serializers

from flights.domain import SearchRequest


class SearchRequestSerializer(serializers.Serializer):
    origin = serializers.CharField(min_length=3, max_length=3)
    destination = serializers.CharField(min_length=3, max_length=3)
    departureDate = serializers.DateField()
    returnDate = serializers.DateField()
    numberOfPassengers = serializers.IntegerField(min_value=1, max_value=4)

    def validate(self, attrs):
        origin = attrs["origin"].strip().upper()
        destination = attrs["destination"].strip().upper()
        attrs["origin"] = origin
        attrs["destination"] = destination

        if origin == destination:
            raise serializers.ValidationError({"destination": "Destination must be different from origin."})

        if attrs["returnDate"] < attrs["departureDate"]:
            raise serializers.ValidationError({"returnDate": "Return date must be on or after departure date."})

        return attrs

    def to_search_request(self) -> SearchRequest:
        data = self.validated_data
        return SearchRequest(
            origin=data["origin"],
            destination=data["destination"],
            departure_date=data["departureDate"],
            return_date=data["returnDate"],
            passenger_count=data["numberOfPassengers"],
        )


class NormalizedOfferSerializer(serializers.Serializer):
    airline = serializers.CharField()
    supplier = serializers.CharField()
    # No quantizing here: pass-through fares keep the supplier's precision.
    fare = serializers.DecimalField(max_digits=None, decimal_places=None, coerce_to_string=False)
    departureAirportCode = serializers.CharField(source="departure_airport_code")
    destinationAirportCode = serializers.CharField(source="destination_airport_code")
    departureDate = serializers.DateTimeField(source="departure_date")
    arrivalDate = serializers.DateTimeField(source="arrival_date")
