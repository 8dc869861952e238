# ORM models live in the infrastructure layer; Django loads them from here.
from apps.transactions.infrastructure.persistence.models import TransactionRecord  # noqa: F401
