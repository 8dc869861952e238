"""
Django ORM models for persistence.
Infrastructure layer — technical storage detail.
"""

from django.db import models


class TransactionRecord(models.Model):
    """Append-only row of the transaction table. The id is assigned by the service."""

    id = models.CharField(primary_key=True, max_length=36, editable=False)
    description = models.CharField(max_length=50)
    date = models.DateField()
    amount = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        db_table = "transaction"
        ordering = ["-date"]

    def __str__(self):
        return f"{self.description} | {self.date} | {self.amount}"
