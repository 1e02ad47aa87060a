"""
Request datetimes

Clients may send ISO timestamps with an offset. Stored timestamps are naive
UTC, so every datetime accepted by a request model goes through UtcDatetime.
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from telecrm.domain.base import as_naive_utc

UtcDatetime = Annotated[datetime, AfterValidator(as_naive_utc)]
