"""
Console rendering for movie catalogs.

Each rendering prints a heading block followed by one
"<title> | <rating>" line per movie, in the requested ordering.
"""

from enum import Enum
import sys

SEPARATOR = "_" * 54


class Ordering(Enum):
    INSERTION = ""
    TITLE_ASC = " (Sorted Alphabetically)"
    RATING_DESC = " (Sorted by rating)"

    @property
    def suffix(self):
        return self.value


def format_rating(rating):
    # Six significant digits without trailing zeros: 6.0 -> "6", 9.3 -> "9.3"
    return f"{rating:g}"


def ordered_movies(catalog, ordering):
    if ordering is Ordering.TITLE_ASC:
        return catalog.sorted_by_title()
    if ordering is Ordering.RATING_DESC:
        return catalog.sorted_by_rating()
    return catalog.view()


def render(heading, catalog, ordering=Ordering.INSERTION, out=None):
    """
    Print catalog under heading in the given ordering.

    Output goes to sys.stdout unless another text stream is passed.
    """
    out = out or sys.stdout

    print(SEPARATOR, file=out)
    print(f"{heading}{ordering.suffix}", file=out)
    print(SEPARATOR, file=out)

    for movie in ordered_movies(catalog, ordering):
        print(f"{movie.title} | {format_rating(movie.rating)}", file=out)
