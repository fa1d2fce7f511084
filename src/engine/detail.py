from typing import Optional, Sequence

from engine.classifier import classify
from engine.welcoming import welcoming_score
from models.schemas import CountryDetail, PassportRanking, RequirementCategory
from store.records import RecordStore

_BUCKETS = {
    RequirementCategory.VISA_FREE: "visa_free",
    RequirementCategory.VOA: "visa_on_arrival",
    RequirementCategory.ETA: "eta",
    RequirementCategory.E_VISA: "e_visa",
    RequirementCategory.VISA_REQUIRED: "visa_required",
    RequirementCategory.NO_ADMISSION: "no_admission",
}


def get_country_detail(
    store: RecordStore, rankings: Sequence[PassportRanking], country: str
) -> Optional[CountryDetail]:
    """
    Partition every destination of `country`'s passport by category and
    attach how welcoming `country` is as a destination. Returns None when
    the country is unknown or has no ranking.
    """
    meta = store.countries.get(country)
    if meta is None:
        return None
    ranking = next((r for r in rankings if r.country == country), None)
    if ranking is None:
        return None

    detail = CountryDetail(
        country=country,
        meta=meta,
        ranking=ranking,
        welcoming_score=welcoming_score(store, country),
    )
    for entry in store.for_passport(country):
        getattr(detail, _BUCKETS[classify(entry.requirement)]).append(entry.destination)
    return detail
