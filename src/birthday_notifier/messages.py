from __future__ import annotations

from collections.abc import Sequence

from birthday_notifier.models import BirthdayRecord

SINGLE_BIRTHDAY_PREFIX = "Happy birthday"
TWO_BIRTHDAYS_PREFIX = "Happy birthday to you both!"
MANY_BIRTHDAYS_PREFIX = "Happy birthday to you all!"
UPCOMING_PREFIX_TEMPLATE = "Birthdays {days} days from now: "

MENTION_SEPARATOR = ", "


def mention(tag: str) -> str:
    return f"<@{tag}>"


def format_mentions(records: Sequence[BirthdayRecord], prefix: str) -> str:
    if not records:
        raise ValueError("Cannot format a message without any birthdays")
    return prefix + MENTION_SEPARATOR.join(mention(record.tag) for record in records)


def today_prefix(count: int) -> str:
    if count < 1:
        raise ValueError(f"Birthday count must be positive, got {count}")
    if count == 1:
        return SINGLE_BIRTHDAY_PREFIX
    if count == 2:
        return TWO_BIRTHDAYS_PREFIX
    return MANY_BIRTHDAYS_PREFIX


def upcoming_prefix(days: int) -> str:
    return UPCOMING_PREFIX_TEMPLATE.format(days=days)
