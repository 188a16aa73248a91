# config.py — paths, endpoints, feature flags, logging
# No environment lookups: edit the constants below.

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

BASE = Path(__file__).resolve().parent
ASSETS = BASE / "assets"

# --- Contact endpoint (served by contact_api) ---
CONTACT_ENDPOINT = "http://localhost:8000/api/contact"
CONTACT_TIMEOUT = 10.0  # seconds
CONTACT_SUCCESS = "Message sent successfully! I'll get back to you soon."

# --- Third-party tag (set to a GA4 id such as "G-XXXXXXX" to enable) ---
GA_MEASUREMENT_ID: Optional[str] = None

# --- Hero canvas ---
HERO_WIDTH = 1200
HERO_HEIGHT = 520
HERO_FPS = 12

# --- Feature flags ---
ANIMATE_HERO = True         # default for the sidebar toggle; off -> single static frame
SHOW_RESUME_PREVIEW = True  # render page 1 of the résumé under the download button

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)
