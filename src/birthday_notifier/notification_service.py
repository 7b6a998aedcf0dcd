from __future__ import annotations

import logging
from datetime import datetime

from rich.console import Console

from birthday_notifier.date_logic import match_dates
from birthday_notifier.messages import format_mentions, today_prefix, upcoming_prefix
from birthday_notifier.models import AppConfig, BirthdayRecord, NotifyTarget
from birthday_notifier.notifier import WebhookNotifier
from birthday_notifier.record_source import read_records

LOGGER = logging.getLogger(__name__)

MESSAGE_STYLE = "yellow"


class NotificationService:
    def __init__(
        self,
        *,
        config: AppConfig,
        notifier: WebhookNotifier,
        console: Console,
    ) -> None:
        self._config = config
        self._notifier = notifier
        self._console = console

    def dispatch(self, now: datetime) -> int:
        """Print and send today's and upcoming birthday messages. Returns the send count."""
        records = read_records(self._config.csv.path)
        matches = match_dates(
            records,
            now,
            self._config.warning.number_of_days_warning,
            self._config.csv,
        )

        sent_count = 0
        if matches.today:
            prefix = today_prefix(len(matches.today))
            sent_count += self._announce(matches.today, prefix, self._config.slack.target)

        if matches.upcoming:
            prefix = upcoming_prefix(self._config.warning.number_of_days_warning)
            sent_count += self._announce(matches.upcoming, prefix, self._config.warning.target)

        LOGGER.info(
            "%s birthday(s) today, %s upcoming, %s message(s) sent",
            len(matches.today),
            len(matches.upcoming),
            sent_count,
        )
        return sent_count

    def _announce(self, records: list[BirthdayRecord], prefix: str, target: NotifyTarget | None) -> int:
        message = format_mentions(records, prefix)
        self._console.print(
            message,
            style=MESSAGE_STYLE,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

        if target is None:
            return 0
        self._notifier.send(message, target)
        return 1
