import re

from models.schemas import RequirementCategory
from store.records import is_sentinel

KEYWORD_CATEGORIES = {
    "visa free": RequirementCategory.VISA_FREE,
    "visa on arrival": RequirementCategory.VOA,
    "eta": RequirementCategory.ETA,
    "e-visa": RequirementCategory.E_VISA,
    "no admission": RequirementCategory.NO_ADMISSION,
}

# Leading integer, the rest of the string is ignored ("30 days" -> 30).
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _normalize(raw: str) -> str:
    return raw.strip().lower()


def parse_stay_days(raw: str) -> int | None:
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def classify(raw: str) -> RequirementCategory:
    """
    Map a raw requirement string onto one of the six categories.

    A positive stay length in days counts as visa-free. Anything unrecognised
    falls through to visa-required.
    """
    req = _normalize(raw)
    if req == "visa free":
        return RequirementCategory.VISA_FREE
    days = parse_stay_days(req)
    if days is not None and days > 0:
        return RequirementCategory.VISA_FREE
    return KEYWORD_CATEGORIES.get(req, RequirementCategory.VISA_REQUIRED)


def is_recognized(raw: str) -> bool:
    """
    True when `raw` maps to a category by rule rather than by the
    visa-required fallback. The sentinel and explicit "visa required"
    count as recognised.
    """
    req = _normalize(raw)
    if is_sentinel(req) or req == "visa required" or req in KEYWORD_CATEGORIES:
        return True
    days = parse_stay_days(req)
    return days is not None and days > 0


def is_mobility_positive(raw: str) -> bool:
    return classify(raw).is_mobility_positive
