from typing import Dict, List

from engine.classifier import is_mobility_positive
from models.schemas import WelcomingRank
from store.countries import slugify
from store.records import RecordStore


def _welcomes(store: RecordStore, passport: str, requirement: str) -> bool:
    return passport in store.countries and is_mobility_positive(requirement)


def calculate_welcoming_ranks(store: RecordStore) -> List[WelcomingRank]:
    """
    For each destination, how many known passports can enter visa-free, on
    arrival or with an ETA. Sorted descending by that count.
    """
    welcome: Dict[str, int] = {}
    for entry in store.countable():
        if _welcomes(store, entry.passport, entry.requirement):
            welcome[entry.destination] = welcome.get(entry.destination, 0) + 1

    ranks: List[WelcomingRank] = []
    for country, score in welcome.items():
        meta = store.countries.get(country)
        if meta is None:
            continue
        ranks.append(WelcomingRank(country=country, meta=meta, score=score, slug=slugify(country)))
    ranks.sort(key=lambda r: r.score, reverse=True)
    return ranks


def welcoming_score(store: RecordStore, destination: str) -> int:
    return sum(
        1
        for entry in store.countable()
        if entry.destination == destination and _welcomes(store, entry.passport, entry.requirement)
    )
