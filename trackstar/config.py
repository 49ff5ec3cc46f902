import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# --- API ---
API_TITLE = os.getenv("API_TITLE", "TrackStar API")
API_DESCRIPTION = "Personal Task & Habit Tracker API"
API_VERSION = "1.0.0"
PUBLIC_HOST = os.getenv("RENDER_URL", "localhost:3000")

# --- Server ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# --- Database ---
# Default to local SQLite, but prefer environment variable
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/trackstar.db")

# Fix for common SQLAlchemy issues with postgres:// vs postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)
# psycopg 3 driver
if DATABASE_URL.startswith("postgresql://"):
    DATABASE_URL = DATABASE_URL.replace("postgresql://", "postgresql+psycopg://", 1)

# --- Auth ---
USER_ID_HEADER = "x-user-id"

# --- Habit statistics ---
DEFAULT_STATS_DAYS = int(os.getenv("DEFAULT_STATS_DAYS", "30"))
MAX_STATS_DAYS = int(os.getenv("MAX_STATS_DAYS", "365"))
DEFAULT_LOG_LIMIT = 30

# --- API docs ---
OPENAPI_OUTPUT_FILE = os.getenv("OPENAPI_OUTPUT_FILE", "swagger-output.json")
GENERATE_DOCS_ON_STARTUP = _flag("GENERATE_DOCS_ON_STARTUP", "true")
