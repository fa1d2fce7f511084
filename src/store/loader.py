import csv
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional

from core.logger import log_event
from engine.classifier import is_recognized
from models.schemas import VisaEntry

logger = logging.getLogger(__name__)


def _split_row(line: str) -> Optional[List[str]]:
    # Quotes must close on their own line; anything else is malformed.
    try:
        return next(csv.reader([line], strict=True), [])
    except csv.Error:
        return None


def parse_visa_csv(text: str) -> List[VisaEntry]:
    """
    Parse the tidy passport index table: a header row, then
    passport,destination,requirement rows, one per line. Quoted fields are
    honoured within a line; unquoted commas past the second column are
    folded back into the requirement. Rows with fewer than three fields or
    an unterminated quote are dropped.
    """
    lines = text.strip().splitlines()

    entries: List[VisaEntry] = []
    skipped = 0
    for line in lines[1:]:
        row = _split_row(line)
        if row is None or len(row) < 3:
            skipped += 1
            continue
        entries.append(
            VisaEntry(
                passport=row[0],
                destination=row[1],
                requirement=",".join(row[2:]).strip(),
            )
        )
    if skipped:
        logger.warning("Dropped %d malformed visa rows", skipped)
    return entries


def report_unrecognized(entries: Iterable[VisaEntry]) -> Counter:
    """
    Surface requirement values that only classify through the visa-required
    fallback. Each distinct value is reported once with its row count.
    """
    unknown = Counter(entry.requirement for entry in entries if not is_recognized(entry.requirement))
    for value, count in sorted(unknown.items()):
        logger.warning("Unrecognized visa requirement %r on %d rows; scored as visa-required", value, count)
        log_event("unrecognized_requirement", {"value": value, "rows": count})
    return unknown


def load_visa_entries(path: Path) -> List[VisaEntry]:
    text = Path(path).read_text(encoding="utf-8")
    entries = parse_visa_csv(text)
    logger.info("Loaded %d visa entries from %s", len(entries), path)
    report_unrecognized(entries)
    return entries
