"""Shared field types for models."""
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, PlainSerializer

from timetrack.utils.timeutil import ensure_utc, isoformat_utc


# Aware UTC datetime that serializes to JSON as "2025-11-10T12:00:00Z"
UtcDatetime = Annotated[
    datetime,
    AfterValidator(ensure_utc),
    PlainSerializer(isoformat_utc, return_type=str, when_used="json"),
]
