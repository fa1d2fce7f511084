import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BUNDLED_DATA_DIR = Path(__file__).resolve().parents[2] / "data"

VISA_DATA_PATH = Path(os.getenv("VISA_DATA_PATH", BUNDLED_DATA_DIR / "passport-index-tidy.csv"))
COUNTRY_META_PATH = Path(os.getenv("COUNTRY_META_PATH", BUNDLED_DATA_DIR / "countries.json"))
DATA_QUALITY_LOG_PATH = Path(os.getenv("DATA_QUALITY_LOG_PATH", "data_quality.log"))

CORS_ALLOW_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
]
