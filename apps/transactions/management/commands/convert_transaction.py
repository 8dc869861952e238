from django.core.management.base import BaseCommand, CommandError

from apps.transactions.domain.models import RetrieveTransactionDTO
from apps.transactions.application.factory import build_transaction_service
from apps.transactions.domain.errors import TransactionError


class Command(BaseCommand):
    help = 'Retrieve a stored transaction converted to a target currency'

    def add_arguments(self, parser):
        parser.add_argument('transaction_id', type=str, help='Transaction UUID')
        parser.add_argument(
            '--country',
            dest='country',
            type=str,
            required=True,
            help='Country as published by the Treasury (e.g. Brazil)'
        )
        parser.add_argument(
            '--currency',
            dest='currency',
            type=str,
            required=True,
            help='Currency as published by the Treasury (e.g. Real)'
        )

    def handle(self, **options):
        request = RetrieveTransactionDTO(
            id=options['transaction_id'],
            country=options['country'],
            currency=options['currency'],
        )

        try:
            result = build_transaction_service().retrieve(request)
        except TransactionError as e:
            raise CommandError(f"{e.__class__.__name__}: {e.message}") from e

        self.stdout.write(f"Transaction {result.id}: {result.description} on {result.transaction_date.isoformat()}")
        self.stdout.write(f"Original amount (USD): {result.original_amount}")
        self.stdout.write(f"Exchange rate: {result.exchange_rate}")
        self.stdout.write(
            self.style.SUCCESS(
                f"Converted amount ({options['country']}-{options['currency']}): {result.converted_amount}"
            )
        )
