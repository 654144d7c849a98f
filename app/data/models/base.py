"""
Declarative base shared by all ORM models.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Signed 64-bit range of a SQLite INTEGER column
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


def fits_integer(value: int) -> bool:
    """Whether ``value`` can be bound to an INTEGER column without overflow."""
    return INTEGER_MIN <= value <= INTEGER_MAX
