"""
Services layer for the Photo Print Station.

This module contains the business logic services:
- PrintDispatcher: Monochrome print attempts with per-printer serialization

Thread Model:
    Flask request threads call PrintDispatcher directly. Attempts for the
    same printer wait on that printer's lock; different printers proceed
    in parallel.
"""

from .print_service import PrintDispatcher

__all__ = [
    "PrintDispatcher",
]
