"""
Application configuration.

This module centralizes environment-based configuration for the
StreamFlix client, including the TMDB access key, the service base URL,
and the fixed page counts fetched for each movie list.
"""

import json
import os
import sys
from pathlib import Path


def load_api_key_from_json(path):
    """
    Read a TMDB API key from a JSON file of the form {"api_key": "..."}.

    Returns an empty string if the file is missing, unreadable, or does
    not carry a string key.
    """
    try:
        with open(Path(path), "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"[WARN] Could not load API key from {path}: {e}", file=sys.stderr)
        return ""

    api_key = data.get("api_key") if isinstance(data, dict) else None
    if not isinstance(api_key, str):
        print(f"[WARN] No api_key entry in {path}", file=sys.stderr)
        return ""

    return api_key.strip()


def parse_timeout(value, default=10.0):
    """
    Parse a positive timeout in seconds, falling back to default.
    """
    if value is None:
        return default

    try:
        timeout = float(value)
    except ValueError:
        timeout = 0.0

    if not timeout > 0 or timeout == float("inf"):
        print(f"[WARN] Invalid TMDB_REQUEST_TIMEOUT {value!r}, using {default:g}", file=sys.stderr)
        return default

    return timeout


# TMDB access key; the environment wins over the optional key file
TMDB_API_KEY = os.getenv("TMDB_API_KEY", "").strip()
TMDB_API_KEY_FILE = os.getenv("TMDB_API_KEY_FILE")

if not TMDB_API_KEY and TMDB_API_KEY_FILE:
    TMDB_API_KEY = load_api_key_from_json(TMDB_API_KEY_FILE)

# Endpoint paths are joined onto this, so it must end with a slash
TMDB_BASE_URL = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3/")
if not TMDB_BASE_URL.endswith("/"):
    TMDB_BASE_URL += "/"

# Seconds allowed for a single GET
REQUEST_TIMEOUT = parse_timeout(os.getenv("TMDB_REQUEST_TIMEOUT"))

# Fixed pagination per movie list
POPULAR_PAGES = 5
NOW_PLAYING_PAGES = 1

# Titles in the popular list matching this are highlighted after rendering
MATCH_PATTERN = r".*[dD]es.*"
