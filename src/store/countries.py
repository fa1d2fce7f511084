import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Optional

from models.schemas import CountryMeta

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    return _NON_ALNUM.sub("-", name.lower()).strip("-")


class CountryRegistry:
    """
    Read-only lookup of country metadata by display name or URL slug.
    """

    def __init__(self, countries: Iterable[CountryMeta]):
        self._by_name: Dict[str, CountryMeta] = {}
        self._by_slug: Dict[str, CountryMeta] = {}
        for meta in countries:
            self._by_name[meta.name] = meta
            self._by_slug[slugify(meta.name)] = meta

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def get(self, name: str) -> Optional[CountryMeta]:
        return self._by_name.get(name)

    def by_slug(self, slug: str) -> Optional[CountryMeta]:
        return self._by_slug.get(slug.lower())


def load_country_meta(path: Path) -> CountryRegistry:
    """
    Load country metadata from JSON. Accepts either a list of records or an
    object keyed by country name (the key fills in a missing "name").
    """
    with Path(path).open("r", encoding="utf-8") as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        records = [{"name": name, **record} for name, record in payload.items()]
    else:
        records = list(payload)

    registry = CountryRegistry(CountryMeta.model_validate(record) for record in records)
    logger.info("Loaded metadata for %d countries from %s", len(registry), path)
    return registry
