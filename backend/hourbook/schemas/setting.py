from typing import Any, Optional

from pydantic import BaseModel


class HourlyRateRead(BaseModel):
    numeric_value: Optional[float] = None


class HourlyRateUpsert(BaseModel):
    # Left untyped so a non-number is answered with 400, not a 422 from pydantic
    numeric_value: Any = None
