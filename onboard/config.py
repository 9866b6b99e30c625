from pydantic import BaseModel
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_DB_PATH = _ROOT / "data" / "onboard.db"


def load_env_file(path: Path) -> int:
    """Copy KEY=VALUE lines from ``path`` into os.environ.

    Variables already in the environment win. Surrounding quotes are dropped.
    Returns the number of variables set.
    """
    if not path.exists():
        return 0
    loaded = 0
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip().removeprefix("export ").strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value
            loaded += 1
    return loaded


def _secret(name: str) -> str:
    """Read a key from the environment, dropping non-ASCII characters pasted along with it."""
    return os.getenv(name, "").encode('ascii', errors='ignore').decode('ascii').strip()


# Must run before Settings reads os.getenv
load_env_file(_ROOT / ".env")


class Settings(BaseModel):
    # Network
    host: str = os.getenv("ONBOARD_HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "2022"))

    # Service identity; empty disables the API key check
    dain_api_key: str = _secret("DAIN_API_KEY")
    api_key_header: str = "x-dain-api-key"

    # Employee store
    database_url: str = os.getenv("DATABASE_URL", f"sqlite+aiosqlite:///{_DEFAULT_DB_PATH}")
    employee_table: str = os.getenv("EMPLOYEE_TABLE", "userdata")

    # Availability conversion (Gemini through its OpenAI-compatible endpoint)
    gemini_api_key: str = _secret("GEMINI_KEY")
    llm_base_url: str = os.getenv("LLM_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")
    availability_model: str = os.getenv("AVAILABILITY_MODEL", "gemini-2.0-flash")

    # Weather
    weather_base_url: str = os.getenv("WEATHER_BASE_URL", "https://api.open-meteo.com/v1/forecast")
    weather_timeout_s: float = float(os.getenv("WEATHER_TIMEOUT", "10"))


settings = Settings()


def _mask(secret: str) -> str:
    return '***' + secret[-4:] if len(secret) > 4 else 'EMPTY'


# Log config for debugging
logger.info(f"Config: LLM → {settings.llm_base_url}, model={settings.availability_model} "
            f"(key={_mask(settings.gemini_api_key)})")
logger.info(f"Config: store table={settings.employee_table}, "
            f"DAIN key={_mask(settings.dain_api_key)}")
