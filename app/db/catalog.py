"""
In-memory movie catalog.

This module provides the record type for a fetched movie and the
append-only catalog each fetch pipeline fills, along with the two
sorted views used for display.
"""

from dataclasses import dataclass
import math
import re

# Well-known titles used to exercise rendering without the network
SAMPLE_MOVIES = (
    ("The Shawshank Redemption", 9.3),
    ("The Godfather", 9.2),
    ("The Dark Knight", 9.4),
    ("Pulp Fiction", 9.0),
    ("Forrest Gump", 8.9),
    ("Inception", 9.1),
    ("Fight Club", 8.8),
    ("The Matrix", 9.0),
    ("Goodfellas", 9.1),
    ("The Lord of the Rings: The Return of the King", 9.3),
)


def finite_rating(value):
    """
    Coerce value to a float, mapping NaN, infinities and overflow to 0.
    """
    try:
        rating = float(value)
    except OverflowError:
        return 0.0
    return rating if math.isfinite(rating) else 0.0


@dataclass(frozen=True)
class Movie:
    title: str
    rating: float = 0.0


class Catalog:
    """
    Ordered collection of movies.

    Movies keep the order in which they were added. Sorted views are
    returned as fresh lists and never reorder the catalog itself.
    """

    def __init__(self, movies=None):
        self._movies = []
        for title, rating in movies or ():
            self.add(title, rating)

    def __len__(self):
        return len(self._movies)

    def __iter__(self):
        return iter(self._movies)

    def add(self, title: str, rating: float):
        """
        Append a movie. Duplicates are kept; a non-finite rating is stored as 0.
        """
        self._movies.append(Movie(title, finite_rating(rating)))

    def view(self):
        """
        Return the movies in insertion order.
        """
        return tuple(self._movies)

    def sorted_by_title(self):
        return sorted(self._movies, key=lambda movie: movie.title)

    def sorted_by_rating(self):
        """
        Return the movies highest rated first; equal ratings keep their order.
        """
        return sorted(self._movies, key=lambda movie: movie.rating, reverse=True)

    def filter_titles(self, pattern):
        """
        Return the movies, in insertion order, whose title contains a match
        for pattern (a regex string or compiled pattern).
        """
        regex = re.compile(pattern)
        return [movie for movie in self._movies if regex.search(movie.title)]

    def seed_with_sample_data(self):
        """
        Replace the catalog contents with SAMPLE_MOVIES.
        """
        self._movies = [Movie(title, rating) for title, rating in SAMPLE_MOVIES]
