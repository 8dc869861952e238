"""
Repository pattern implementation.
Abstracts database access to decouple domain logic from persistence.
"""

from django.db import DatabaseError, transaction as db_transaction

from apps.transactions.domain.errors import NotFoundError, StorageError
from apps.transactions.domain.interfaces import BaseTransactionLedger
from apps.transactions.domain.models import Transaction
from apps.transactions.infrastructure.persistence.models import TransactionRecord


class TransactionLedger(BaseTransactionLedger):
    """Ledger backed by the Django ORM."""

    def create(self, transaction: Transaction) -> str:
        """Insert a new row. An id collision fails instead of overwriting."""
        try:
            with db_transaction.atomic():
                TransactionRecord.objects.create(
                    id=transaction.id,
                    description=transaction.description,
                    date=transaction.transaction_date,
                    amount=transaction.amount,
                )
        except DatabaseError as e:
            raise StorageError(f"database: failed to save transaction: {e}") from e

        return transaction.id

    def find_by_id(self, transaction_id: str) -> Transaction:
        """Get a transaction by id."""
        try:
            record = TransactionRecord.objects.get(pk=transaction_id)
        except TransactionRecord.DoesNotExist:
            raise NotFoundError(f"database: not found: transaction with ID {transaction_id}")
        except DatabaseError as e:
            raise StorageError(f"database: failed to retrieve transaction: {e}") from e

        return to_domain(record)


def to_domain(record: TransactionRecord) -> Transaction:
    return Transaction(
        id=record.id,
        description=record.description,
        transaction_date=record.date,
        amount=record.amount,
    )
