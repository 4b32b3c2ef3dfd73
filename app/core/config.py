from typing import Optional

from pydantic import BaseModel
import os
from dotenv import load_dotenv

load_dotenv()

MPA_PATH = "/search-mpa"
CLIENT_SIDE_PATH = "/search-update-url-client-side"
SERVER_PATCH_PATH = "/search-server-patch"
SESSIONS_PATH = "/search/sessions"


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    return int(raw) if raw else None


class Settings(BaseModel):
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "9000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    seed_count: int = int(os.getenv("SEED_COUNT", "100"))
    seed_random: Optional[int] = _optional_int("SEED_RANDOM")

    datastar_script_url: str = os.getenv(
        "DATASTAR_SCRIPT_URL",
        "https://cdn.jsdelivr.net/gh/starfederation/datastar@1.0.0-RC.6/bundles/datastar.js",
    )


settings = Settings()
