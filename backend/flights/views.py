import logging

from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from flights.serializers import NormalizedOfferSerializer, SearchRequestSerializer
from flights.services.aggregator import AggregateError, get_aggregator

logger = logging.getLogger(__name__)


def _error_body(error, message):
    return {
        "timestamp": timezone.now().isoformat(),
        "error": error,
        "message": message,
    }


def _flatten_errors(errors) -> str:
    messages = []
    for field, field_errors in errors.items():
        for field_error in field_errors:
            messages.append(f"{field}: {field_error}")
    return "; ".join(messages) or "Validation failed"


class HealthView(APIView):
    def get(self, request):
        return Response({"status": "ok"})


class FlightSearchView(APIView):
    def get(self, request):
        serializer = SearchRequestSerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response(
                _error_body("Invalid Input", _flatten_errors(serializer.errors)),
                status=status.HTTP_400_BAD_REQUEST,
            )

        search_request = serializer.to_search_request()
        aggregator = get_aggregator()

        try:
            offers = aggregator.search(search_request)
        except AggregateError as exc:
            logger.error(
                "Flight search failed for every supplier",
                extra={"kind": exc.kind.value, "first_supplier": exc.first_cause.supplier},
            )
            return Response(
                _error_body("Flight search failed due to supplier failure", str(exc)),
                status=status.HTTP_502_BAD_GATEWAY,
            )

        return Response(NormalizedOfferSerializer(offers, many=True).data)
