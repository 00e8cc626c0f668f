from decimal import Decimal
from typing import Annotated
from pydantic import Field

# Ids and cents live in signed 64-bit integer columns
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

RecordId = Annotated[int, Field(ge=MIN_ID, le=MAX_ID)]

# Whole cents: at most two decimal places, and small enough that amount * 100 fits the column
Amount = Annotated[Decimal, Field(max_digits=17, decimal_places=2, allow_inf_nan=False)]
