"""
Popular movies fetcher.

This module pulls the first pages of the TMDB popular list and appends
every decoded movie to the popular catalog, page by page.
"""

import threading

from core.config import POPULAR_PAGES
from fetcher.announce import announce
from metadata.tmdb import parse_movie_results


def fetch_popular(client, catalog, lock, pages=POPULAR_PAGES, out=None):
    """
    Fill catalog from pages 1..pages of the popular list.

    - Announces the worker thread under the shared console lock
    - Fetches each page in order
    - Appends decoded movies in the order TMDB returned them

    A page that fails to download or decode contributes nothing; the
    remaining pages are still fetched.
    """
    announce(lock, f"Popular movies thread ID: {threading.get_ident()}", out)

    for page in range(1, pages + 1):
        body = client.get_popular(page)

        for title, rating in parse_movie_results(body):
            catalog.add(title, rating)

    return catalog
