"""Epoch timestamp normalization."""

from datetime import UTC, datetime, timedelta

from src.exchange.errors import TimestampOutOfRangeError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
MICROS_PER_MILLI = 1000


def from_epoch_millis(millis: int) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Raises:
        TimestampOutOfRangeError: If the value falls outside years 1-9999

    """
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise TimestampOutOfRangeError(millis) from e


def from_epoch_micros_truncated(micros: int) -> datetime:
    """Convert epoch microseconds, truncated to whole milliseconds."""
    return from_epoch_millis(micros // MICROS_PER_MILLI)


def to_epoch_millis(timestamp: datetime) -> int:
    """Convert a datetime to epoch milliseconds (naive values are taken as UTC)."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return (timestamp - EPOCH) // timedelta(milliseconds=1)
