import logging
from typing import Dict, List, Sequence, Tuple

from engine.classifier import classify
from models.schemas import CategoryStats, CountryMeta, DssRanking, PassportRanking
from store.countries import slugify
from store.records import RecordStore

logger = logging.getLogger(__name__)


def calculate_rankings(store: RecordStore) -> List[PassportRanking]:
    """
    Per-passport category counts, sorted by mobility score (visa-free + VOA +
    ETA) with competition ranking. Passports missing from the country
    metadata are dropped. Equal scores keep the order passports first appear
    in the table.
    """
    scores: Dict[str, CategoryStats] = {}
    for entry in store.countable():
        stats = scores.setdefault(entry.passport, CategoryStats())
        stats.add(classify(entry.requirement))

    known: List[Tuple[str, CountryMeta, CategoryStats]] = []
    for country, stats in scores.items():
        meta = store.countries.get(country)
        if meta is None:
            logger.debug("Skipping ranking for unknown passport %s", country)
            continue
        known.append((country, meta, stats))
    known.sort(key=lambda row: row[2].mobility_score, reverse=True)

    rankings: List[PassportRanking] = []
    current_rank = 1
    for idx, (country, meta, stats) in enumerate(known):
        # Ties share the rank of the first row with that score; the next score skips ahead.
        if idx > 0 and stats.mobility_score < known[idx - 1][2].mobility_score:
            current_rank = idx + 1
        rankings.append(
            PassportRanking(
                rank=current_rank,
                country=country,
                meta=meta,
                visa_free_count=stats.visa_free,
                visa_on_arrival_count=stats.voa,
                eta_count=stats.eta,
                e_visa_count=stats.e_visa,
                visa_required_count=stats.visa_required,
                no_admission_count=stats.no_admission,
                mobility_score=stats.mobility_score,
                slug=slugify(country),
            )
        )
    return rankings


def rank_for_score(rankings: Sequence[PassportRanking], score: int) -> int:
    """
    Rank a passport with `score` would take if inserted into `rankings`:
    one more than the number of passports scoring strictly higher.
    """
    return 1 + sum(1 for r in rankings if r.mobility_score > score)


def calculate_dss(rankings: Sequence[PassportRanking]) -> List[DssRanking]:
    """
    Destination significance score: mobility weighted towards visa-free,
    then VOA, then ETA access.
    """
    weighted = [
        DssRanking(
            **r.model_dump(),
            dss_score=round(
                r.mobility_score * 100 + r.visa_free_count * 50 + r.visa_on_arrival_count * 20 + r.eta_count * 15
            )
            / 100,
        )
        for r in rankings
    ]
    weighted.sort(key=lambda r: r.dss_score, reverse=True)
    return weighted
