"""
Application entry point.

This module fetches the popular and now playing movie lists in two
worker threads, renders both catalogs in every ordering once the
workers are done, and highlights popular titles matching a pattern.
"""

from concurrent.futures import ThreadPoolExecutor
import sys
import threading

from core.config import MATCH_PATTERN, TMDB_API_KEY
from db.catalog import Catalog
from display.render import Ordering, render
from fetcher import fetch_now_playing, fetch_popular
from metadata.tmdb import TMDBClient

# Render sequence per catalog
ORDERINGS = (Ordering.INSERTION, Ordering.TITLE_ASC, Ordering.RATING_DESC)


def scan_matches(catalog, pattern=MATCH_PATTERN, out=None):
    """
    Print every movie whose title matches pattern, in insertion order.

    Returns the matching movies.
    """
    out = out or sys.stdout
    matches = catalog.filter_titles(pattern)

    for movie in matches:
        print(f"Matching movie: {movie.title}", file=out)

    return matches


def shutdown(out=None):
    out = out or sys.stdout
    print(file=out)
    print("Bye Bye", file=out)


def run(client=None, out=None, pattern=MATCH_PATTERN):
    """
    Run one fetch, render and scan cycle.

    - Fetches both movie lists concurrently, each into its own catalog
    - Renders POPULAR then NOW PLAYING in all three orderings
    - Prints the popular titles matching pattern
    - Says goodbye

    Errors from a fetch worker are reported and leave its catalog as is;
    they never stop the run. Returns the (popular, now_playing) catalogs.
    """
    out = out or sys.stdout

    if client is None:
        if not TMDB_API_KEY:
            print("[WARN] TMDB_API_KEY is not set; requests will fail", file=sys.stderr)
        client = TMDBClient(TMDB_API_KEY)

    popular = Catalog()
    now_playing = Catalog()

    # Guards console announcements from the worker threads only
    console_lock = threading.Lock()

    with ThreadPoolExecutor(max_workers=2) as ex:
        futures = {
            "popular": ex.submit(fetch_popular, client, popular, console_lock, out=out),
            "now playing": ex.submit(fetch_now_playing, client, now_playing, console_lock, out=out),
        }

    # Leaving the executor joins both workers
    for name, future in futures.items():
        error = future.exception()
        if error is not None:
            print(f"[ERROR] Fetching {name} movies failed: {error}", file=sys.stderr)

    for heading, catalog in (("POPULAR", popular), ("NOW PLAYING", now_playing)):
        for ordering in ORDERINGS:
            render(heading, catalog, ordering, out)

    scan_matches(popular, pattern, out)
    shutdown(out)

    return popular, now_playing


def main():
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
