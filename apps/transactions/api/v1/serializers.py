"""
Serializers for the transactions bounded context.
They only marshal data; domain rules are checked by TransactionService.
"""

from rest_framework import serializers

from apps.transactions.domain.models import CreateTransactionDTO, RetrieveTransactionDTO


class CreateTransactionSerializer(serializers.Serializer):
    description = serializers.CharField(allow_blank=True, trim_whitespace=False)
    transaction_date = serializers.DateField()
    amount = serializers.DecimalField(max_digits=None, decimal_places=None)

    def to_dto(self) -> CreateTransactionDTO:
        return CreateTransactionDTO(
            description=self.validated_data["description"],
            transaction_date=self.validated_data["transaction_date"],
            amount=self.validated_data["amount"],
        )


class CreateTransactionResponseSerializer(serializers.Serializer):
    id = serializers.CharField()


class RetrieveTransactionQuerySerializer(serializers.Serializer):
    country_currency = serializers.CharField(required=False, allow_blank=True, default="")
    currency = serializers.CharField(required=False, allow_blank=True, default="")

    def to_dto(self, transaction_id: str) -> RetrieveTransactionDTO:
        return RetrieveTransactionDTO(
            id=transaction_id,
            country=self.validated_data["country_currency"],
            currency=self.validated_data["currency"],
        )


class ConversionResultSerializer(serializers.Serializer):
    id = serializers.CharField()
    description = serializers.CharField()
    transaction_date = serializers.DateField()
    original_amount = serializers.DecimalField(max_digits=None, decimal_places=2, coerce_to_string=False)
    exchange_rate = serializers.DecimalField(max_digits=None, decimal_places=None, coerce_to_string=False)
    converted_amount = serializers.DecimalField(max_digits=None, decimal_places=2, coerce_to_string=False)


class ErrorResponseSerializer(serializers.Serializer):
    status_code = serializers.IntegerField()
    message = serializers.CharField()
