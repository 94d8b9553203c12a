import os
import logging
from pathlib import Path
from typing import Dict
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent

# ── Filesystem roots ─────────────────────────────────────────────
CONTENT_DIR  = os.getenv("ITINERARY_CONTENT_DIR", str(BASE_DIR / "data" / "itineraries"))
TEMPLATE_DIR = os.getenv("ITINERARY_TEMPLATE_DIR", str(BASE_DIR / "templates"))
STATIC_DIR   = os.getenv("ITINERARY_STATIC_DIR", str(BASE_DIR / "static"))

# ── Server ───────────────────────────────────────────────────────
HOST      = os.getenv("HOST", "0.0.0.0")
PORT      = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Security headers (sent on every response) ────────────────────
DEFAULT_CSP = (
    "default-src 'self'; "
    "img-src 'self' data: https:; "
    "media-src 'self' https:; "
    "frame-src https://www.youtube.com https://www.youtube-nocookie.com https://player.vimeo.com; "
    "style-src 'self'; "
    "script-src 'self'; "
    "object-src 'none'; "
    "base-uri 'self'"
)

CONTENT_SECURITY_POLICY = os.getenv("CONTENT_SECURITY_POLICY", DEFAULT_CSP)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options":        "DENY",
    "Referrer-Policy":        "strict-origin-when-cross-origin",
}

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class SiteConfig(BaseModel):
    """Settings handed to the app factory; built from the env by default."""
    model_config = ConfigDict(frozen=True)

    content_dir:  Path = Path(CONTENT_DIR)
    template_dir: Path = Path(TEMPLATE_DIR)
    static_dir:   Path = Path(STATIC_DIR)
    host:         str  = HOST
    port:         int  = PORT
    log_level:    str  = LOG_LEVEL
    content_security_policy: str = CONTENT_SECURITY_POLICY

    @classmethod
    def from_env(cls) -> "SiteConfig":
        return cls()

    def response_headers(self) -> Dict[str, str]:
        headers = dict(SECURITY_HEADERS)
        if self.content_security_policy:
            headers["Content-Security-Policy"] = self.content_security_policy
        return headers


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up root logging once; later calls only adjust the level."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
