from models.schemas import CountryMeta, VisaEntry
from store.countries import CountryRegistry
from store.records import RecordStore


def make_meta(name: str) -> CountryMeta:
    code = name[:2].upper()
    return CountryMeta(name=name, code=code, code3=name[:3].upper(), region="Test", passport_color="blue")


def make_registry(*names: str) -> CountryRegistry:
    return CountryRegistry(make_meta(name) for name in names)


def make_store(rows: list[tuple[str, str, str]], countries: list[str] | None = None) -> RecordStore:
    """
    Build a store from (passport, destination, requirement) rows. Unless
    `countries` is given, every name in the rows is known.
    """
    if countries is None:
        countries = []
        for passport, destination, _ in rows:
            for name in (passport, destination):
                if name not in countries:
                    countries.append(name)
    entries = [VisaEntry(passport=p, destination=d, requirement=r) for p, d, r in rows]
    return RecordStore(entries, make_registry(*countries))


def with_self_rows(rows: list[tuple[str, str, str]]) -> list[tuple[str, str, str]]:
    """Add the "-1" row every passport carries for its own country."""
    passports = []
    for passport, _, _ in rows:
        if passport not in passports:
            passports.append(passport)
    return rows + [(p, p, "-1") for p in passports]
