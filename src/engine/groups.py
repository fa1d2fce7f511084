import math
from typing import Dict, List, Sequence

from models.schemas import ColorStats, PassportRanking, RegionStats
from store.records import RecordStore

TOP_PASSPORTS_PER_REGION = 3
DEFAULT_RELATED_LIMIT = 5

COLOR_DESCRIPTIONS = {
    "red": (
        "Red passports are the most common worldwide, used by EU member states, Turkey, and many others. "
        "The EU adopted burgundy-red as a common passport color for its members."
    ),
    "blue": (
        "Blue passports are widely used across the Americas, Oceania, and many Asian nations. "
        "The United States, Canada, Australia, and India all use blue passports."
    ),
    "green": (
        "Green passports are traditional in many Muslim-majority countries and ECOWAS member states in West Africa. "
        "Countries like Saudi Arabia, Pakistan, and Morocco use green passports."
    ),
    "black": (
        "Black passports are the rarest color. New Zealand is the most well-known country with a black passport, "
        "reflecting its national color."
    ),
}


def _average_score(passports: List[PassportRanking]) -> int:
    # Halves round up.
    return math.floor(sum(p.mobility_score for p in passports) / len(passports) + 0.5)


def region_stats(rankings: Sequence[PassportRanking]) -> List[RegionStats]:
    """
    Group ranked passports by region: the best three, the rounded average
    mobility score and the passport count. Sorted by average, best first.
    Passports without a region are left out.
    """
    groups: Dict[str, List[PassportRanking]] = {}
    for ranking in rankings:
        if ranking.meta.region:
            groups.setdefault(ranking.meta.region, []).append(ranking)

    stats = [
        RegionStats(
            region=region,
            top_passports=passports[:TOP_PASSPORTS_PER_REGION],
            avg_score=_average_score(passports),
            count=len(passports),
        )
        for region, passports in groups.items()
    ]
    stats.sort(key=lambda s: s.avg_score, reverse=True)
    return stats


def color_stats(rankings: Sequence[PassportRanking]) -> List[ColorStats]:
    """Passport count and rounded average score per cover color, most common first."""
    groups: Dict[str, List[PassportRanking]] = {}
    for ranking in rankings:
        if ranking.meta.passport_color:
            groups.setdefault(ranking.meta.passport_color, []).append(ranking)

    stats = [
        ColorStats(
            color=color,
            count=len(passports),
            avg_score=_average_score(passports),
            description=COLOR_DESCRIPTIONS.get(color, ""),
        )
        for color, passports in groups.items()
    ]
    stats.sort(key=lambda s: s.count, reverse=True)
    return stats


def same_region_countries(
    store: RecordStore, rankings: Sequence[PassportRanking], country: str, limit: int = DEFAULT_RELATED_LIMIT
) -> List[PassportRanking]:
    """Other ranked passports from `country`'s region, in ranking order."""
    meta = store.countries.get(country)
    if meta is None or not meta.region:
        return []
    return [r for r in rankings if r.meta.region == meta.region and r.country != country][:limit]


def similar_rank_countries(
    rankings: Sequence[PassportRanking], country: str, limit: int = DEFAULT_RELATED_LIMIT
) -> List[PassportRanking]:
    """
    Passports whose mobility score is closest to `country`'s. Equal
    distances keep ranking order.
    """
    target = next((r for r in rankings if r.country == country), None)
    if target is None:
        return []
    others = [r for r in rankings if r.country != country]
    others.sort(key=lambda r: abs(r.mobility_score - target.mobility_score))
    return others[:limit]
