from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DateFormat(Enum):
    MONTH_DAY = "month_day"
    DAY_MONTH = "day_month"


@dataclass(frozen=True)
class NotifyTarget:
    webhook_url: str
    channel_id: str


def resolve_target(enabled: bool, webhook_url: str | None, channel_id: str | None) -> NotifyTarget | None:
    if not enabled or webhook_url is None or channel_id is None:
        return None
    return NotifyTarget(webhook_url=webhook_url, channel_id=channel_id)


@dataclass(frozen=True)
class WarningConfig:
    enabled: bool
    channel_id: str | None
    webhook_url: str | None
    number_of_days_warning: int

    @property
    def target(self) -> NotifyTarget | None:
        return resolve_target(self.enabled, self.webhook_url, self.channel_id)


@dataclass(frozen=True)
class CsvConfig:
    path: Path
    date_separator: str
    date_format: DateFormat


@dataclass(frozen=True)
class SlackConfig:
    enabled: bool
    channel_id: str | None
    webhook_url: str | None

    @property
    def target(self) -> NotifyTarget | None:
        return resolve_target(self.enabled, self.webhook_url, self.channel_id)


@dataclass(frozen=True)
class AppConfig:
    warning: WarningConfig
    csv: CsvConfig
    slack: SlackConfig


@dataclass(frozen=True)
class BirthdayRecord:
    date: str
    tag: str


@dataclass(frozen=True)
class MatchResult:
    today: list[BirthdayRecord]
    upcoming: list[BirthdayRecord]
