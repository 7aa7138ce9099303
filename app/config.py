"""
Configuration settings for the folio page builder.

Everything can be overridden from the environment or a local .env file.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os

# Site layout
SITE_DIR = os.getenv("FOLIO_SITE_DIR", "site")
OUTPUT_DIR = os.getenv("FOLIO_OUTPUT_DIR", "public_html")
DATA_FILE = os.getenv("FOLIO_DATA_FILE", "data.json")
COMPONENTS_DIR = os.getenv("FOLIO_COMPONENTS_DIR", "components")
SHELL_FILE = os.getenv("FOLIO_SHELL_FILE", "index.html")

# Prefix for every image src generated by the section renderers
IMG_PREFIX = os.getenv("FOLIO_IMG_PREFIX", "./img/")

# Overlays only open on viewports at least this wide (logical px)
ZOOM_MIN_WIDTH = int(os.getenv("FOLIO_ZOOM_MIN_WIDTH", "1024"))

# Seconds before a remote data/template fetch gives up
FETCH_TIMEOUT = float(os.getenv("FOLIO_FETCH_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("FOLIO_LOG_LEVEL", "INFO").upper()


def get_data_source(site_dir: str | None = None) -> str:
    """Data document location: FOLIO_DATA_SOURCE wins, else <site_dir>/data.json."""
    explicit = os.getenv("FOLIO_DATA_SOURCE")
    if explicit:
        return explicit
    return join_source(site_dir or SITE_DIR, DATA_FILE)


def join_source(base: str, *parts: str) -> str:
    """Join path segments onto a local directory or a URL prefix."""
    if base.startswith(("http://", "https://")):
        return "/".join([base.rstrip("/"), *[p.strip("/") for p in parts]])
    return os.path.join(base, *parts)
