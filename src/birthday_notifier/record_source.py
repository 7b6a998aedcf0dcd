from __future__ import annotations

import csv
import logging
from pathlib import Path

from birthday_notifier.exceptions import SourceReadError
from birthday_notifier.models import BirthdayRecord

LOGGER = logging.getLogger(__name__)

DATE_COLUMN = "Date"
TAG_COLUMN = "Tag"


def read_records(path: Path) -> list[BirthdayRecord]:
    """Read every row of the birthday CSV.

    The header must name ``Date`` and ``Tag`` columns; other columns are ignored.
    A row whose field count differs from the header aborts the whole read.
    """
    records: list[BirthdayRecord] = []

    try:
        with path.open("r", encoding="utf-8-sig", newline="") as file_obj:
            reader = csv.DictReader(file_obj)
            header = reader.fieldnames or []
            missing = [column for column in (DATE_COLUMN, TAG_COLUMN) if column not in header]
            if missing:
                raise SourceReadError(f"{path}: missing column(s) {', '.join(missing)} in header")

            for row in reader:
                # DictReader stores surplus fields under None and pads short rows with None
                if None in row or any(value is None for value in row.values()):
                    raise SourceReadError(
                        f"{path}: line {reader.line_num} has {_field_count(row)} fields, "
                        f"expected {len(header)}"
                    )
                records.append(BirthdayRecord(date=row[DATE_COLUMN], tag=row[TAG_COLUMN]))
    except OSError as exc:
        raise SourceReadError(f"Unable to read {path}: {exc}") from exc
    except (csv.Error, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Unable to parse {path}: {exc}") from exc

    LOGGER.debug("Read %s birthday records from %s", len(records), path)
    return records


def _field_count(row: dict[str | None, object]) -> int:
    present = sum(1 for key, value in row.items() if key is not None and value is not None)
    extra = row.get(None)
    return present + (len(extra) if isinstance(extra, list) else 0)
