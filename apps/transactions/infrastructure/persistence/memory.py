"""
In-memory ledger.
Same contract as TransactionLedger, for tests and local experiments.
"""

from apps.transactions.domain.errors import NotFoundError, StorageError
from apps.transactions.domain.interfaces import BaseTransactionLedger
from apps.transactions.domain.models import Transaction


class InMemoryTransactionLedger(BaseTransactionLedger):

    def __init__(self, transactions: list[Transaction] | None = None):
        self.transactions: dict[str, Transaction] = {}
        for transaction in transactions or []:
            self.transactions[transaction.id] = transaction

    def create(self, transaction: Transaction) -> str:
        if transaction.id in self.transactions:
            raise StorageError(f"transaction with ID {transaction.id} already exists")
        self.transactions[transaction.id] = transaction
        return transaction.id

    def find_by_id(self, transaction_id: str) -> Transaction:
        try:
            return self.transactions[transaction_id]
        except KeyError:
            raise NotFoundError(f"not found: transaction with ID {transaction_id}")
