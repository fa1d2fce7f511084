from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequirementCategory(str, Enum):
    VISA_FREE = "visa-free"
    VOA = "voa"
    ETA = "eta"
    E_VISA = "e-visa"
    VISA_REQUIRED = "visa-required"
    NO_ADMISSION = "no-admission"

    @property
    def ease_rank(self) -> int:
        """1 is the easiest entry, 6 the hardest."""
        return _EASE_ORDER.index(self) + 1

    @property
    def is_mobility_positive(self) -> bool:
        return self in (RequirementCategory.VISA_FREE, RequirementCategory.VOA, RequirementCategory.ETA)


_EASE_ORDER = list(RequirementCategory)


class VisaEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    passport: str
    destination: str
    requirement: str


class CountryMeta(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    code3: str
    region: str | None = None
    subregion: str | None = None
    passport_color: str | None = None


class CategoryStats(CamelModel):
    visa_free: int = 0
    voa: int = 0
    eta: int = 0
    e_visa: int = 0
    visa_required: int = 0
    no_admission: int = 0

    def add(self, category: RequirementCategory) -> None:
        field_name = _STATS_FIELDS[category]
        setattr(self, field_name, getattr(self, field_name) + 1)

    @property
    def mobility_score(self) -> int:
        return self.visa_free + self.voa + self.eta


_STATS_FIELDS = {
    RequirementCategory.VISA_FREE: "visa_free",
    RequirementCategory.VOA: "voa",
    RequirementCategory.ETA: "eta",
    RequirementCategory.E_VISA: "e_visa",
    RequirementCategory.VISA_REQUIRED: "visa_required",
    RequirementCategory.NO_ADMISSION: "no_admission",
}


class PassportRanking(CamelModel):
    model_config = ConfigDict(frozen=True)

    rank: int
    country: str
    meta: CountryMeta
    visa_free_count: int
    visa_on_arrival_count: int
    eta_count: int
    e_visa_count: int
    visa_required_count: int
    no_admission_count: int
    mobility_score: int
    slug: str


class DssRanking(PassportRanking):
    dss_score: float


class WelcomingRank(CamelModel):
    model_config = ConfigDict(frozen=True)

    country: str
    meta: CountryMeta
    score: int
    slug: str


class CountryDetail(CamelModel):
    country: str
    meta: CountryMeta
    ranking: PassportRanking
    visa_free: list[str] = Field(default_factory=list)
    visa_on_arrival: list[str] = Field(default_factory=list)
    eta: list[str] = Field(default_factory=list)
    e_visa: list[str] = Field(default_factory=list)
    visa_required: list[str] = Field(default_factory=list)
    no_admission: list[str] = Field(default_factory=list)
    welcoming_score: int = 0


class DestinationEntry(CamelModel):
    destination: str
    code: str
    slug: str
    best_status: RequirementCategory
    best_passport: str
    per_passport: dict[str, RequirementCategory]


class ComparisonResult(CamelModel):
    countries: list[str]
    rankings: dict[str, PassportRanking]
    combined_mobility_score: int
    combined_rank: int
    combined_stats: CategoryStats
    individual_stats: dict[str, CategoryStats]
    gain_from_combining: int
    max_individual_score: int
    destination_table: list[DestinationEntry]


class AccessLists(CamelModel):
    visa_free: list[str] = Field(default_factory=list)
    visa_on_arrival: list[str] = Field(default_factory=list)
    eta: list[str] = Field(default_factory=list)


class OverlapComparison(CamelModel):
    countries: list[str]
    common: AccessLists
    unique: dict[str, AccessLists]


class VisaMapEntry(CamelModel):
    requirement: str
    code: str


class RegionStats(CamelModel):
    region: str
    top_passports: list[PassportRanking]
    avg_score: int
    count: int


class ColorStats(CamelModel):
    color: str
    count: int
    avg_score: int
    description: str
