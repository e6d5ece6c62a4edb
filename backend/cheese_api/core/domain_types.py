"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CheeseId wraps the integer primary key assigned by the store, 0..MAX_CHEESE_ID
    - Price is whatever numeric value the store hands back (int, Decimal, float)
"""

from decimal import Decimal
from typing import NewType, Union


CheeseId = NewType("CheeseId", int)

Price = Union[int, float, Decimal]
RenderedPrice = Union[int, float]

# Largest value the Integer id column holds on every backend (Postgres int4)
MAX_CHEESE_ID = 2**31 - 1
