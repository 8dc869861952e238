"""
ViewSets for the transactions API v1.
Thin adapters: parse the request, call TransactionService, map errors to status codes.
"""

import logging

from rest_framework import status, viewsets
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import OpenApiParameter, extend_schema
from drf_spectacular.types import OpenApiTypes

from apps.transactions.api.v1.serializers import (
    ConversionResultSerializer,
    CreateTransactionResponseSerializer,
    CreateTransactionSerializer,
    ErrorResponseSerializer,
    RetrieveTransactionQuerySerializer,
)
from apps.transactions.application.factory import build_transaction_service
from apps.transactions.domain import errors

logger = logging.getLogger(__name__)


ERROR_STATUS = {
    errors.ValidationError: status.HTTP_400_BAD_REQUEST,
    errors.NotFoundError: status.HTTP_404_NOT_FOUND,
    errors.RateUnavailableError: status.HTTP_400_BAD_REQUEST,
    errors.RateFormatError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    errors.StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    errors.UpstreamError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(message: str, status_code: int, log_message: str) -> Response:
    if status_code >= 500:
        logger.error("%s: status_code=%s error=%s", log_message, status_code, message)
    else:
        logger.warning("%s: status_code=%s error=%s", log_message, status_code, message)

    return Response({"status_code": status_code, "message": message}, status=status_code)


def domain_error_response(error: errors.TransactionError) -> Response:
    status_code = ERROR_STATUS.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return error_response(error.message, status_code, error.__class__.__name__)


def format_serializer_errors(serializer_errors: dict) -> str:
    return "; ".join(
        f"{field}: {' '.join(str(message) for message in messages)}"
        for field, messages in serializer_errors.items()
    )


@extend_schema(tags=['Transactions'])
class TransactionViewSet(viewsets.ViewSet):

    @extend_schema(
        request=CreateTransactionSerializer,
        responses={201: CreateTransactionResponseSerializer, 400: ErrorResponseSerializer, 500: ErrorResponseSerializer},
        description="Record a purchase transaction in U.S. dollars"
    )
    def create(self, request):
        serializer = CreateTransactionSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                f"invalid request payload: {format_serializer_errors(serializer.errors)}",
                status.HTTP_400_BAD_REQUEST,
                "Error decoding request body",
            )

        service = build_transaction_service()
        try:
            transaction_id = service.create(serializer.to_dto())
        except errors.TransactionError as e:
            return domain_error_response(e)

        return Response({"id": transaction_id}, status=status.HTTP_201_CREATED)

    @extend_schema(
        parameters=[
            OpenApiParameter("country_currency", OpenApiTypes.STR, required=True, description="Country as published by the Treasury (e.g. Brazil)"),
            OpenApiParameter("currency", OpenApiTypes.STR, required=True, description="Currency as published by the Treasury (e.g. Real)"),
        ],
        responses={
            200: ConversionResultSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            500: ErrorResponseSerializer,
        },
        description="Retrieve a transaction converted to the target currency"
    )
    def retrieve(self, request, pk=None):
        """
        Retrieve a transaction converted with the exchange rate in effect on its date.

        Query params:
        - country_currency: Country name (required)
        - currency: Currency name (required)
        """
        query = RetrieveTransactionQuerySerializer(data=request.query_params)
        query.is_valid()

        service = build_transaction_service()
        try:
            result = service.retrieve(query.to_dto(pk))
        except errors.TransactionError as e:
            return domain_error_response(e)

        return Response(ConversionResultSerializer(result).data)


@extend_schema(tags=['Health'], responses={200: OpenApiTypes.OBJECT})
@api_view(['GET'])
def health(request):
    return Response({"status": "ok"})
