import os
import logging
from dotenv import load_dotenv

load_dotenv()

API_URL = os.getenv("API_URL", "http://localhost:8000")
CANDIDATES_PATH = os.getenv("CANDIDATES_PATH") or None
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for the API process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT
    )
