"""Date helpers shared by the progression engine.

Values arrive from the database layer as date, datetime or ISO strings;
the engine works on plain dates only.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

DateLike = Union[date, datetime, str, None]


def to_date(value: DateLike) -> Optional[date]:
	"""Coerce a date-like value to a date.

	Aware datetimes are converted to UTC before the date is taken.

	Raises:
		ValueError: If a string is not an ISO date or datetime
		TypeError: If the value is of an unsupported type
	"""
	if value is None or value == "":
		return None

	if isinstance(value, datetime):
		if value.tzinfo is not None:
			value = value.astimezone(timezone.utc)
		return value.date()

	if isinstance(value, date):
		return value

	if isinstance(value, str):
		text = value.strip()
		try:
			return date.fromisoformat(text[:10])
		except ValueError:
			raise ValueError(f"Invalid date value: {value!r}")

	raise TypeError(f"Unsupported date value type: {type(value).__name__}")


def add_days(value: date, days: int) -> date:
	return value + timedelta(days=days)


def yesterday_of(today: date) -> date:
	return today - timedelta(days=1)


def format_date(value: Optional[date]) -> Optional[str]:
	"""Render a date as YYYY-MM-DD, or None."""
	return value.isoformat() if value else None
