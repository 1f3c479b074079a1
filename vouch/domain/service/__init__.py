"""Domain services."""

from .base import Service
from .transaction_service import TransactionService

__all__ = [
    "Service",
    "TransactionService",
]
