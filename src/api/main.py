# src/api/main.py
import logging

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from core import config
from engine.errors import InvalidArgumentError
from models.schemas import (
    ColorStats,
    ComparisonResult,
    CountryDetail,
    DssRanking,
    OverlapComparison,
    PassportRanking,
    RegionStats,
    VisaMapEntry,
    WelcomingRank,
)
from service.passport_index import PassportIndex, get_passport_index

logger = logging.getLogger(__name__)


app = FastAPI(title="Passport Index")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _split_countries(countries: str) -> list[str]:
    return [name.strip() for name in countries.split(",") if name.strip()]


def _bad_request(exc: InvalidArgumentError) -> HTTPException:
    logger.info("Rejected query: %s", exc)
    return HTTPException(status_code=400, detail=str(exc))


@app.get("/health")
def health(index: PassportIndex = Depends(get_passport_index)) -> dict:
    return {"status": "ok", "passports": len(index.get_rankings())}


@app.get("/rankings", response_model=list[PassportRanking])
def rankings(index: PassportIndex = Depends(get_passport_index)) -> list[PassportRanking]:
    return list(index.get_rankings())


@app.get("/rankings/dss", response_model=list[DssRanking])
def dss_rankings(index: PassportIndex = Depends(get_passport_index)) -> list[DssRanking]:
    return index.get_dss_rankings()


@app.get("/welcoming", response_model=list[WelcomingRank])
def welcoming(index: PassportIndex = Depends(get_passport_index)) -> list[WelcomingRank]:
    return list(index.get_welcoming_ranks())


@app.get("/countries/{country}", response_model=CountryDetail)
def country_detail(country: str, index: PassportIndex = Depends(get_passport_index)) -> CountryDetail:
    meta = index.resolve_country(country)
    detail = index.get_country_detail(meta.name) if meta else None
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Unknown country: {country}")
    return detail


@app.get("/compare", response_model=ComparisonResult)
def compare(
    countries: str = Query(..., description="Comma-separated passport names (2 to 4)"),
    index: PassportIndex = Depends(get_passport_index),
) -> ComparisonResult:
    try:
        return index.get_comparison(_split_countries(countries))
    except InvalidArgumentError as exc:
        raise _bad_request(exc) from exc


@app.get("/compare/overlap", response_model=OverlapComparison)
def compare_overlap(
    countries: str = Query(..., description="Comma-separated passport names (2 to 4)"),
    index: PassportIndex = Depends(get_passport_index),
) -> OverlapComparison:
    try:
        return index.get_overlap(_split_countries(countries))
    except InvalidArgumentError as exc:
        raise _bad_request(exc) from exc


@app.get("/visa-map", response_model=dict[str, VisaMapEntry])
def visa_map(
    country: str = Query(..., description="Passport country name"),
    index: PassportIndex = Depends(get_passport_index),
) -> dict[str, VisaMapEntry]:
    try:
        return index.get_visa_map(country)
    except InvalidArgumentError as exc:
        raise _bad_request(exc) from exc


@app.get("/stats/regions", response_model=list[RegionStats])
def regions(index: PassportIndex = Depends(get_passport_index)) -> list[RegionStats]:
    return index.get_region_stats()


@app.get("/stats/colors", response_model=list[ColorStats])
def colors(index: PassportIndex = Depends(get_passport_index)) -> list[ColorStats]:
    return index.get_color_stats()


def _resolve_or_404(index: PassportIndex, country: str) -> str:
    meta = index.resolve_country(country)
    if meta is None:
        raise HTTPException(status_code=404, detail=f"Unknown country: {country}")
    return meta.name


@app.get("/countries/{country}/same-region", response_model=list[PassportRanking])
def same_region(country: str, index: PassportIndex = Depends(get_passport_index)) -> list[PassportRanking]:
    return index.get_same_region(_resolve_or_404(index, country))


@app.get("/countries/{country}/similar", response_model=list[PassportRanking])
def similar_rank(country: str, index: PassportIndex = Depends(get_passport_index)) -> list[PassportRanking]:
    return index.get_similar_rank(_resolve_or_404(index, country))
