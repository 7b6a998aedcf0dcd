from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from birthday_notifier.models import BirthdayRecord, CsvConfig, DateFormat, MatchResult


def render_date_key(instant: datetime, date_format: DateFormat, separator: str) -> str:
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)

    month = f"{instant.month:02d}"
    day = f"{instant.day:02d}"
    if date_format is DateFormat.MONTH_DAY:
        return f"{month}{separator}{day}"
    return f"{day}{separator}{month}"


def warning_instant(now: datetime, offset_days: int) -> datetime:
    return now + timedelta(days=offset_days)


def match_dates(
    records: Iterable[BirthdayRecord],
    now: datetime,
    offset_days: int,
    csv_config: CsvConfig,
) -> MatchResult:
    """Split records into today's birthdays and those ``offset_days`` ahead.

    Matching is exact string equality against the rendered date keys. A record
    that matches today is never considered for the warning group, which matters
    when ``offset_days`` is 0 and both keys are equal.
    """
    today_key = render_date_key(now, csv_config.date_format, csv_config.date_separator)
    warning_key = render_date_key(
        warning_instant(now, offset_days), csv_config.date_format, csv_config.date_separator
    )

    today: list[BirthdayRecord] = []
    upcoming: list[BirthdayRecord] = []
    for record in records:
        if record.date == today_key:
            today.append(record)
        elif record.date == warning_key:
            upcoming.append(record)

    return MatchResult(today=today, upcoming=upcoming)
