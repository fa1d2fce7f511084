from typing import Iterable, Iterator, Tuple

from models.schemas import VisaEntry
from store.countries import CountryRegistry

# Marks a passport paired with its own country.
SENTINEL_REQUIREMENT = "-1"


def is_sentinel(requirement: str) -> bool:
    return requirement == SENTINEL_REQUIREMENT


class RecordStore:
    """
    Immutable visa table plus the country metadata it joins against.
    """

    def __init__(self, entries: Iterable[VisaEntry], countries: CountryRegistry):
        self._entries: Tuple[VisaEntry, ...] = tuple(entries)
        self.countries = countries

    def countable(self) -> Iterator[VisaEntry]:
        """Entries that take part in aggregation (sentinel rows removed)."""
        return (entry for entry in self._entries if not is_sentinel(entry.requirement))

    def for_passport(self, passport: str) -> Iterator[VisaEntry]:
        return (entry for entry in self.countable() if entry.passport == passport)
