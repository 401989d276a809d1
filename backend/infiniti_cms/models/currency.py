"""
Currency enumeration shared by billing models.
"""

import enum


class Currency(str, enum.Enum):
    """Supported billing currencies."""
    INR = "INR"
    USD = "USD"
    EUR = "EUR"
