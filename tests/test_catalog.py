import unittest

from db.catalog import SAMPLE_MOVIES, Catalog, Movie, finite_rating


class CatalogTests(unittest.TestCase):
    def setUp(self):
        self.catalog = Catalog()
        self.catalog.seed_with_sample_data()

    def test_add_keeps_insertion_order_and_duplicates(self):
        catalog = Catalog()
        catalog.add('B', 6.0)
        catalog.add('A', 7.5)
        catalog.add('B', 6.0)
        self.assertEqual(catalog.view(), (Movie('B', 6.0), Movie('A', 7.5), Movie('B', 6.0)))
        self.assertEqual(len(catalog), 3)

    def test_non_finite_rating_is_stored_as_zero(self):
        catalog = Catalog()
        catalog.add('Nan', float('nan'))
        catalog.add('Inf', float('inf'))
        self.assertEqual([m.rating for m in catalog.view()], [0.0, 0.0])

    def test_finite_rating(self):
        self.assertEqual(finite_rating(7), 7.0)
        self.assertEqual(finite_rating(float('-inf')), 0.0)
        self.assertEqual(finite_rating(10 ** 400), 0.0)

    def test_movie_is_immutable(self):
        movie = Movie('Inception', 9.1)
        with self.assertRaises(AttributeError):
            movie.title = 'Tenet'

    def test_seed_replaces_previous_contents(self):
        catalog = Catalog([('Old', 1.0)])
        catalog.seed_with_sample_data()
        self.assertEqual([(m.title, m.rating) for m in catalog.view()], list(SAMPLE_MOVIES))

    def test_sorted_by_title(self):
        titles = [m.title for m in self.catalog.sorted_by_title()]
        self.assertEqual(titles[0], 'Fight Club')
        self.assertEqual(titles[-1], 'The Shawshank Redemption')
        self.assertEqual(titles, sorted(titles))
        self.assertCountEqual(self.catalog.sorted_by_title(), self.catalog.view())

    def test_sorted_by_title_compares_code_points(self):
        catalog = Catalog([('\u00c9t\u00e9', 6.0), ('alien', 8.5), ('Zodiac', 7.7), ('Alien', 8.5), ('B', 5.0)])
        self.assertEqual([m.title for m in catalog.sorted_by_title()],
                         ['Alien', 'B', 'Zodiac', 'alien', '\u00c9t\u00e9'])

    def test_sorted_by_rating_is_stable(self):
        ranked = self.catalog.sorted_by_rating()
        titles = [m.title for m in ranked]
        self.assertEqual(titles[0], 'The Dark Knight')
        self.assertLess(titles.index('Inception'), titles.index('Goodfellas'))
        self.assertLess(titles.index('Pulp Fiction'), titles.index('The Matrix'))
        self.assertLess(titles.index('The Shawshank Redemption'),
                        titles.index('The Lord of the Rings: The Return of the King'))
        ratings = [m.rating for m in ranked]
        self.assertEqual(ratings, sorted(ratings, reverse=True))

    def test_sorted_views_do_not_touch_catalog(self):
        before = self.catalog.view()
        first = self.catalog.sorted_by_rating()
        self.catalog.sorted_by_title()
        self.assertEqual(self.catalog.sorted_by_rating(), first)
        self.assertEqual(self.catalog.view(), before)

    def test_filter_titles_searches_substrings(self):
        catalog = Catalog([('Desperado', 7.2), ('Heat', 8.3), ('The Ides of March', 7.1)])
        matches = catalog.filter_titles(r'.*[dD]es.*')
        self.assertEqual([m.title for m in matches], ['Desperado', 'The Ides of March'])

    def test_filter_titles_is_case_sensitive_outside_class(self):
        catalog = Catalog([('DESPERADO', 7.2), ('Redemption', 9.3)])
        self.assertEqual(catalog.filter_titles(r'.*[dD]es.*'), [])


if __name__ == '__main__':
    unittest.main()
