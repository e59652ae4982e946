"""
Global settings — loads from .env and exposes typed config values to the rest of the app.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
CONTENT_DIR = Path(os.getenv("CONTENT_DIR", str(ROOT_DIR / "public")))
DATA_DIR = Path(os.getenv("DATA_DIR", str(ROOT_DIR / "data")))
LOGS_DIR = ROOT_DIR / "logs"
COLLECTIONS_FILE = Path(__file__).resolve().parent / "collections.yaml"

# ── General ────────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() == "true"

# ── Publications ───────────────────────────────────────────────────────────────
# The site's admin account authors lab-wide entries; shown under the PI's name.
ADMIN_AUTHOR_NAME = os.getenv("ADMIN_AUTHOR_NAME", "Amanda Watson")

AUTHOR_ALIASES = {
    "admin": ADMIN_AUTHOR_NAME,
}

# ── Team ───────────────────────────────────────────────────────────────────────
DEFAULT_ORGANIZATION = os.getenv("DEFAULT_ORGANIZATION", "University of Virginia")
