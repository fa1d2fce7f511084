from .classifier import classify
from .rankings import calculate_rankings, calculate_dss
from .welcoming import calculate_welcoming_ranks
from .comparison import compare_passports, compare_common_unique
from .detail import get_country_detail
from .visa_map import build_visa_map
from .groups import color_stats, region_stats, same_region_countries, similar_rank_countries
from .errors import InvalidArgumentError

__all__ = [
    "classify",
    "calculate_rankings",
    "calculate_dss",
    "calculate_welcoming_ranks",
    "compare_passports",
    "compare_common_unique",
    "get_country_detail",
    "build_visa_map",
    "region_stats",
    "color_stats",
    "same_region_countries",
    "similar_rank_countries",
    "InvalidArgumentError",
]
