import logging
import os
from dotenv import load_dotenv

load_dotenv()  # load variables from .env into environment

log = logging.getLogger(__name__)

def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning("%s=%r is not an integer; using default %d", name, raw, default)
        return default

# lexicon
SENTIMENT_LEXICON_PATH   = os.getenv("SENTIMENT_LEXICON_PATH") or None   # optional JSON override
SENTIMENT_LEXICON_EXTEND = os.getenv("SENTIMENT_LEXICON_EXTEND", "1").lower() not in {"0", "false", "no"}

# batch settings
SENTIMENT_BATCH_WORKERS = _int("SENTIMENT_BATCH_WORKERS", 1)
MAX_BATCH_SIZE          = _int("MAX_BATCH_SIZE", 1000)

# app settings
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = _int("APP_PORT", 5100)
