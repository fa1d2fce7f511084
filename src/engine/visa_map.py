from typing import Dict

from engine.classifier import classify
from engine.errors import InvalidArgumentError
from models.schemas import VisaMapEntry
from store.records import RecordStore

HOME_REQUIREMENT = "home"


def build_visa_map(store: RecordStore, country: str) -> Dict[str, VisaMapEntry]:
    """
    Requirement category for every destination of one passport, keyed by the
    destination's ISO alpha-3 code for the world map. The passport's own
    country is marked "home".
    """
    meta = store.countries.get(country)
    if meta is None:
        raise InvalidArgumentError(f"Unknown country: {country}")

    result: Dict[str, VisaMapEntry] = {}
    for entry in store.for_passport(country):
        dest_meta = store.countries.get(entry.destination)
        if dest_meta is None:
            continue
        result[dest_meta.code3] = VisaMapEntry(
            requirement=classify(entry.requirement).value,
            code=dest_meta.code,
        )

    result[meta.code3] = VisaMapEntry(requirement=HOME_REQUIREMENT, code=meta.code)
    return result
