from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import httpx
from rich.console import Console

from birthday_notifier.config_store import default_config_path, load_config
from birthday_notifier.exceptions import BirthdayNotifierError
from birthday_notifier.notification_service import NotificationService
from birthday_notifier.notifier import WebhookNotifier

LOGGER = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(config_path: Path, now: datetime, console: Console) -> int:
    config = load_config(config_path, base_dir=Path.cwd())

    with httpx.Client() as client:
        service = NotificationService(
            config=config,
            notifier=WebhookNotifier(client),
            console=console,
        )
        return service.dispatch(now)


def main() -> None:
    configure_logging()

    now = datetime.now(ZoneInfo("UTC"))
    try:
        run(default_config_path(), now, Console())
    except BirthdayNotifierError as exc:
        LOGGER.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
