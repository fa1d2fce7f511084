from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from core import config
from engine import (
    build_visa_map,
    calculate_dss,
    calculate_rankings,
    calculate_welcoming_ranks,
    color_stats,
    compare_common_unique,
    compare_passports,
    get_country_detail,
    region_stats,
    same_region_countries,
    similar_rank_countries,
)
from models.schemas import (
    ColorStats,
    ComparisonResult,
    CountryDetail,
    CountryMeta,
    DssRanking,
    OverlapComparison,
    PassportRanking,
    RegionStats,
    VisaMapEntry,
    WelcomingRank,
)
from store.countries import load_country_meta
from store.loader import load_visa_entries
from store.records import RecordStore

logger = logging.getLogger(__name__)


class PassportIndex:
    """
    Query surface over the visa table.

    The record store, rankings and welcoming list are built on first use and
    kept for the life of the process. Comparisons and country pages are
    recomputed on every call. Cached results are tuples of frozen models.
    """

    def __init__(self, store_factory: Callable[[], RecordStore]):
        self._store_factory = store_factory
        self._lock = threading.Lock()
        self._store: Optional[RecordStore] = None
        self._rankings: Optional[Tuple[PassportRanking, ...]] = None
        self._welcoming: Optional[Tuple[WelcomingRank, ...]] = None

    @classmethod
    def from_store(cls, store: RecordStore) -> "PassportIndex":
        return cls(lambda: store)

    @classmethod
    def from_paths(cls, visa_path: Path, countries_path: Path) -> "PassportIndex":
        def build() -> RecordStore:
            countries = load_country_meta(countries_path)
            return RecordStore(load_visa_entries(visa_path), countries)

        return cls(build)

    @property
    def store(self) -> RecordStore:
        if self._store is None:
            with self._lock:
                if self._store is None:
                    self._store = self._store_factory()
        return self._store

    def get_rankings(self) -> Tuple[PassportRanking, ...]:
        if self._rankings is None:
            store = self.store
            with self._lock:
                if self._rankings is None:
                    self._rankings = tuple(calculate_rankings(store))
                    logger.info("Ranked %d passports", len(self._rankings))
        return self._rankings

    def get_welcoming_ranks(self) -> Tuple[WelcomingRank, ...]:
        if self._welcoming is None:
            store = self.store
            with self._lock:
                if self._welcoming is None:
                    self._welcoming = tuple(calculate_welcoming_ranks(store))
        return self._welcoming

    def get_dss_rankings(self) -> List[DssRanking]:
        return calculate_dss(self.get_rankings())

    def get_region_stats(self) -> List[RegionStats]:
        return region_stats(self.get_rankings())

    def get_color_stats(self) -> List[ColorStats]:
        return color_stats(self.get_rankings())

    def get_same_region(self, country: str) -> List[PassportRanking]:
        return same_region_countries(self.store, self.get_rankings(), country)

    def get_similar_rank(self, country: str) -> List[PassportRanking]:
        return similar_rank_countries(self.get_rankings(), country)

    def resolve_country(self, name_or_slug: str) -> Optional[CountryMeta]:
        countries = self.store.countries
        return countries.get(name_or_slug) or countries.by_slug(name_or_slug)

    def get_country_detail(self, country: str) -> Optional[CountryDetail]:
        return get_country_detail(self.store, self.get_rankings(), country)

    def get_comparison(self, countries: Sequence[str]) -> ComparisonResult:
        return compare_passports(self.store, self.get_rankings(), countries)

    def get_overlap(self, countries: Sequence[str]) -> OverlapComparison:
        return compare_common_unique(self.store, countries)

    def get_visa_map(self, country: str) -> Dict[str, VisaMapEntry]:
        return build_visa_map(self.store, country)


_default_index: Optional[PassportIndex] = None
_default_lock = threading.Lock()


def get_passport_index() -> PassportIndex:
    """Process-wide index over the configured data files."""
    global _default_index
    if _default_index is None:
        with _default_lock:
            if _default_index is None:
                _default_index = PassportIndex.from_paths(config.VISA_DATA_PATH, config.COUNTRY_META_PATH)
    return _default_index
