import os
from dotenv import load_dotenv

# Carrega variáveis do .env (se existir)
load_dotenv(override=True)

CACHE_TTL_SECONDS = int(os.getenv("RSSWIPE_CACHE_TTL_SECONDS", "300"))  # 5 min por fonte
REQUEST_TIMEOUT = float(os.getenv("RSSWIPE_REQUEST_TIMEOUT", "10"))
USER_AGENT = os.getenv("RSSWIPE_USER_AGENT", "Mozilla/5.0 (compatible; RSSWipe/1.0)")
MAX_FETCH_WORKERS = int(os.getenv("RSSWIPE_MAX_FETCH_WORKERS", "8"))
LOG_LEVEL = os.getenv("RSSWIPE_LOG_LEVEL", "INFO")

DB_PATH = os.getenv(
    "RSSWIPE_DB_PATH",
    os.path.join(os.path.dirname(__file__), "storage", "data", "rsswipe_db.json"),
)
