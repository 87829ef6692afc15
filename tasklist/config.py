from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from repo root and tasklist/.env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path(__file__).resolve().parent / ".env")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_list(value: str) -> list:
    return [item.strip() for item in value.split(",") if item.strip()]


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tasklist.db")
# Placeholder only; tokens signed with it can be forged by anyone
DEFAULT_SECRET_KEY = "change-me"
SECRET_KEY = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# bcrypt log-rounds; each step doubles the cost of a hash.
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))
if not 4 <= BCRYPT_ROUNDS <= 31:
    raise ValueError(f"BCRYPT_ROUNDS must be between 4 and 31, got {BCRYPT_ROUNDS}")

PUBLIC_PATH_PREFIXES = tuple(
    _as_list(os.getenv("PUBLIC_PATH_PREFIXES", "/api/auth/,/health,/docs,/openapi.json"))
)

ENFORCE_TASK_OWNERSHIP = _as_bool(os.getenv("ENFORCE_TASK_OWNERSHIP", "true"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = _as_list(os.getenv("CORS_ORIGINS", "http://localhost:3000"))
