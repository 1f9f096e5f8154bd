"""
TMDB access helpers.

This module provides a thin client around the TMDB REST API that
returns raw response bodies, and the decoder that turns a movie list
response into (title, rating) pairs.
"""

import json
import sys

import requests

from core.config import REQUEST_TIMEOUT, TMDB_BASE_URL
from db.catalog import finite_rating


class TMDBClient:
    """
    Transport-only TMDB client.

    Every call returns the raw response body. Failures are reported on
    stderr and come back as an empty body.
    """

    def __init__(self, api_key, base_url=TMDB_BASE_URL, timeout=REQUEST_TIMEOUT):
        self.api_key = api_key
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout

    def _tmdb_get(self, path, params=None):
        """
        Perform a GET request against the TMDB API and return the body bytes.
        """
        if params is None:
            params = {}

        params = {"api_key": self.api_key, **params}

        try:
            resp = requests.get(
                f"{self.base_url}{path}",
                params=params,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.content
        except requests.exceptions.RequestException as e:
            print(f"Request failed, error: {e}", file=sys.stderr)
            return b""

    def get_popular(self, page: int) -> bytes:
        return self._tmdb_get("movie/popular", _list_params(page))

    def get_now_playing(self, page: int) -> bytes:
        return self._tmdb_get("movie/now_playing", _list_params(page))

    def get_movie_details(self, movie_id) -> bytes:
        return self._tmdb_get(f"movie/{movie_id}")


def _list_params(page):
    # bool is an int subclass but never a valid page
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise ValueError(f"page must be a positive integer, got {page!r}")

    return {"language": "en-US", "page": page}


def parse_movie_results(body):
    """
    Decode a movie list response into (title, rating) pairs.

    Reads the top-level "results" array and keeps, in order, every entry
    with a non-empty string "title" and a numeric "vote_average". Anything
    else is skipped. A non-finite rating becomes 0.
    """
    if not body:
        return []

    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as e:
        print(f"[WARN] Could not decode TMDB response: {e}", file=sys.stderr)
        return []

    results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(results, list):
        print("[WARN] TMDB response has no results array", file=sys.stderr)
        return []

    movies = []

    for entry in results:
        if not isinstance(entry, dict):
            continue

        title = entry.get("title")
        rating = entry.get("vote_average")

        if not isinstance(title, str) or not title:
            continue
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            continue

        movies.append((title, finite_rating(rating)))

    return movies
