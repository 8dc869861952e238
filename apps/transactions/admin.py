"""
Django Admin configuration for the Transactions app.
Transactions are immutable, so the admin is read-only.
"""

from django.contrib import admin

from apps.transactions.infrastructure.persistence.models import TransactionRecord


@admin.register(TransactionRecord)
class TransactionRecordAdmin(admin.ModelAdmin):
    """Admin interface for TransactionRecord model."""

    list_display = ('id', 'description', 'date', 'amount')
    list_filter = ('date',)
    search_fields = ('id', 'description')
    readonly_fields = ('id', 'description', 'date', 'amount')
    date_hierarchy = 'date'
    ordering = ('-date',)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
