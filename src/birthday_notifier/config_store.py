from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from birthday_notifier.exceptions import ConfigError
from birthday_notifier.models import AppConfig, CsvConfig, DateFormat, SlackConfig, WarningConfig

LOGGER = logging.getLogger(__name__)

CONFIG_FILENAME = "config.toml"
MAX_WARNING_DAYS = 255


def default_config_path() -> Path:
    return Path.cwd() / CONFIG_FILENAME


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    if name not in data:
        raise ConfigError(f"Missing [{name}] section")
    section = data[name]
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _required_bool(section: dict[str, Any], section_name: str, key: str) -> bool:
    if key not in section:
        raise ConfigError(f"Missing {section_name}.{key}")
    value = section[key]
    if not isinstance(value, bool):
        raise ConfigError(f"{section_name}.{key} must be true or false")
    return value


def _required_str(section: dict[str, Any], section_name: str, key: str) -> str:
    if key not in section:
        raise ConfigError(f"Missing {section_name}.{key}")
    value = section[key]
    if not isinstance(value, str):
        raise ConfigError(f"{section_name}.{key} must be a string")
    return value


def _optional_str(section: dict[str, Any], section_name: str, key: str) -> str | None:
    value = section.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{section_name}.{key} must be a string")
    return value


def _parse_warning_days(section: dict[str, Any]) -> int:
    if "number_of_days_warning" not in section:
        raise ConfigError("Missing warning.number_of_days_warning")

    value = section["number_of_days_warning"]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("warning.number_of_days_warning must be an integer")
    if value < 0 or value > MAX_WARNING_DAYS:
        raise ConfigError(f"warning.number_of_days_warning must be between 0 and {MAX_WARNING_DAYS}")
    return value


def _parse_date_separator(section: dict[str, Any]) -> str:
    value = _required_str(section, "csv", "date_separator")
    if len(value) != 1:
        raise ConfigError("csv.date_separator must be a single character")
    return value


def _parse_date_format(section: dict[str, Any]) -> DateFormat:
    value = _required_str(section, "csv", "date_format")
    try:
        return DateFormat(value)
    except ValueError as exc:
        allowed = sorted(item.value for item in DateFormat)
        raise ConfigError(f"csv.date_format must be one of {allowed}, got {value!r}") from exc


def _warn_if_incomplete(section_name: str, enabled: bool, webhook_url: str | None, channel_id: str | None) -> None:
    if not enabled:
        return
    missing = [name for name, value in (("webhook_url", webhook_url), ("channel_id", channel_id)) if value is None]
    if missing:
        LOGGER.warning(
            "[%s] is enabled but %s is not set; messages will be printed but not sent",
            section_name,
            " and ".join(missing),
        )


def parse_config(data: dict[str, Any], *, base_dir: Path | None = None) -> AppConfig:
    warning_data = _section(data, "warning")
    csv_data = _section(data, "csv")
    slack_data = _section(data, "slack")

    warning = WarningConfig(
        enabled=_required_bool(warning_data, "warning", "enabled"),
        channel_id=_optional_str(warning_data, "warning", "channel_id"),
        webhook_url=_optional_str(warning_data, "warning", "webhook_url"),
        number_of_days_warning=_parse_warning_days(warning_data),
    )

    csv_path = Path(_required_str(csv_data, "csv", "path"))
    if base_dir is not None and not csv_path.is_absolute():
        csv_path = base_dir / csv_path

    csv = CsvConfig(
        path=csv_path,
        date_separator=_parse_date_separator(csv_data),
        date_format=_parse_date_format(csv_data),
    )

    slack = SlackConfig(
        enabled=_required_bool(slack_data, "slack", "enabled"),
        channel_id=_optional_str(slack_data, "slack", "channel_id"),
        webhook_url=_optional_str(slack_data, "slack", "webhook_url"),
    )

    _warn_if_incomplete("warning", warning.enabled, warning.webhook_url, warning.channel_id)
    _warn_if_incomplete("slack", slack.enabled, slack.webhook_url, slack.channel_id)

    return AppConfig(warning=warning, csv=csv, slack=slack)


def load_config(path: Path, *, base_dir: Path | None = None) -> AppConfig:
    """Read and validate config.toml.

    A relative ``csv.path`` is left relative unless ``base_dir`` is given, in which
    case it is joined onto it.
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with path.open("rb") as file_obj:
            data = tomllib.load(file_obj)
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to parse {path}: {exc}") from exc

    return parse_config(data, base_dir=base_dir)
