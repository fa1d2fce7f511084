from typing import Dict, List, Sequence

from engine.classifier import classify
from engine.errors import InvalidArgumentError
from engine.rankings import rank_for_score
from models.schemas import (
    AccessLists,
    CategoryStats,
    ComparisonResult,
    DestinationEntry,
    OverlapComparison,
    PassportRanking,
    RequirementCategory,
)
from store.countries import slugify
from store.records import RecordStore

MIN_PASSPORTS = 2
MAX_PASSPORTS = 4


def validate_passports(store: RecordStore, names: Sequence[str]) -> List[str]:
    names = list(names)
    if not MIN_PASSPORTS <= len(names) <= MAX_PASSPORTS:
        raise InvalidArgumentError(
            f"Between {MIN_PASSPORTS} and {MAX_PASSPORTS} passports can be compared, got {len(names)}."
        )
    if len(set(names)) != len(names):
        raise InvalidArgumentError("Each passport can only be listed once.")
    unknown = [name for name in names if name not in store.countries]
    if unknown:
        raise InvalidArgumentError(f"Unknown countries: {', '.join(unknown)}")
    return names


def _access_map(store: RecordStore, names: List[str]) -> Dict[str, Dict[str, RequirementCategory]]:
    access: Dict[str, Dict[str, RequirementCategory]] = {name: {} for name in names}
    for entry in store.countable():
        if entry.passport not in access or entry.destination == entry.passport:
            continue
        access[entry.passport][entry.destination] = classify(entry.requirement)
    return access


def compare_passports(
    store: RecordStore, rankings: Sequence[PassportRanking], names: Sequence[str]
) -> ComparisonResult:
    """
    Build the per-destination table for 2-4 passports held together.

    For each destination the best category any of the passports gets is
    kept, along with the first passport (in request order) that gets it. A
    passport with no entry for a destination counts as no-admission.
    Destinations that are one of the compared passports, or that have no
    country metadata, are left out.

    `max_individual_score` and the gain are measured over this same table, so
    they can differ from a passport's global `mobility_score` (which may count
    another compared passport as a destination). The gain is never negative.
    """
    names = validate_passports(store, names)
    selected = {r.country: r for r in rankings if r.country in names}
    access = _access_map(store, names)

    destinations = set()
    for per_dest in access.values():
        destinations.update(dest for dest in per_dest if dest not in names)

    combined = CategoryStats()
    individual = {name: CategoryStats() for name in names}
    table: List[DestinationEntry] = []

    for dest in sorted(destinations):
        dest_meta = store.countries.get(dest)
        if dest_meta is None:
            continue

        per_passport: Dict[str, RequirementCategory] = {}
        best_status = RequirementCategory.NO_ADMISSION
        best_passport = names[0]
        best_rank = None
        for passport in names:
            status = access[passport].get(dest, RequirementCategory.NO_ADMISSION)
            per_passport[passport] = status
            individual[passport].add(status)
            if best_rank is None or status.ease_rank < best_rank:
                best_rank = status.ease_rank
                best_status = status
                best_passport = passport

        combined.add(best_status)
        table.append(
            DestinationEntry(
                destination=dest,
                code=dest_meta.code,
                slug=slugify(dest),
                best_status=best_status,
                best_passport=best_passport,
                per_passport=per_passport,
            )
        )

    combined_score = combined.mobility_score
    max_individual = max(stats.mobility_score for stats in individual.values())

    return ComparisonResult(
        countries=names,
        rankings={name: selected[name] for name in names if name in selected},
        combined_mobility_score=combined_score,
        combined_rank=rank_for_score(rankings, combined_score),
        combined_stats=combined,
        individual_stats=individual,
        gain_from_combining=combined_score - max_individual,
        max_individual_score=max_individual,
        destination_table=table,
    )


def compare_common_unique(store: RecordStore, names: Sequence[str]) -> OverlapComparison:
    """
    Split destinations into access every passport shares and access only
    some of them have. Shared access is checked visa-free first, then VOA,
    then ETA; a missing entry counts as visa-required.
    """
    names = validate_passports(store, names)
    access = _access_map(store, names)

    destinations: Dict[str, None] = {}
    for per_dest in access.values():
        for dest in per_dest:
            destinations.setdefault(dest)

    common = AccessLists()
    unique = {name: AccessLists() for name in names}
    shared_targets = (
        (RequirementCategory.VISA_FREE, common.visa_free),
        (RequirementCategory.VOA, common.visa_on_arrival),
        (RequirementCategory.ETA, common.eta),
    )

    for dest in destinations:
        statuses = [access[name].get(dest, RequirementCategory.VISA_REQUIRED) for name in names]
        for category, bucket in shared_targets:
            if all(status == category for status in statuses):
                bucket.append(dest)
                break
        else:
            for name, status in zip(names, statuses):
                if status == RequirementCategory.VISA_FREE:
                    unique[name].visa_free.append(dest)
                elif status == RequirementCategory.VOA:
                    unique[name].visa_on_arrival.append(dest)
                elif status == RequirementCategory.ETA:
                    unique[name].eta.append(dest)

    return OverlapComparison(countries=names, common=common, unique=unique)
