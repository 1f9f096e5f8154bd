"""
Now playing movies fetcher.

This module pulls the TMDB now playing list into its own catalog.
"""

import threading

from core.config import NOW_PLAYING_PAGES
from fetcher.announce import announce
from metadata.tmdb import parse_movie_results


def fetch_now_playing(client, catalog, lock, pages=NOW_PLAYING_PAGES, out=None):
    """
    Fill catalog from the now playing list, one page unless told otherwise.
    """
    announce(lock, f"Now playing movies thread ID: {threading.get_ident()}", out)

    for page in range(1, pages + 1):
        body = client.get_now_playing(page)

        for title, rating in parse_movie_results(body):
            catalog.add(title, rating)

    return catalog
