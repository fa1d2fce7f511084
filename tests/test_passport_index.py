import unittest
from unittest.mock import patch

from pydantic import ValidationError

from core import config
from service.passport_index import PassportIndex
from tests.helpers import make_store, with_self_rows


class PassportIndexTests(unittest.TestCase):
    def test_store_is_built_once(self):
        store = make_store([("A", "B", "visa free")])
        calls = []

        def factory():
            calls.append(1)
            return store

        index = PassportIndex(factory)
        index.get_rankings()
        index.get_welcoming_ranks()
        index.get_comparison(["A", "B"])

        self.assertEqual(len(calls), 1)

    def test_rankings_are_cached(self):
        index = PassportIndex.from_store(make_store([("A", "B", "visa free")]))
        self.assertIs(index.get_rankings(), index.get_rankings())
        self.assertIs(index.get_welcoming_ranks(), index.get_welcoming_ranks())

    def test_callers_cannot_change_cached_rankings(self):
        index = PassportIndex.from_store(
            make_store([("A", "X", "visa free"), ("A", "Y", "eta"), ("B", "X", "eta"), ("C", "X", "eta")])
        )
        rankings = index.get_rankings()

        with self.assertRaises(AttributeError):
            rankings.reverse()
        with self.assertRaises(ValidationError):
            rankings[0].rank = 99
        with self.assertRaises(ValidationError):
            index.get_welcoming_ranks()[0].score = 0

        self.assertEqual([(r.country, r.rank) for r in index.get_rankings()], [("A", 1), ("B", 2), ("C", 2)])

    def test_country_detail_matches_rankings(self):
        index = PassportIndex.from_store(
            make_store(with_self_rows([("A", "B", "visa free"), ("B", "A", "eta"), ("C", "A", "e-visa")]))
        )
        for ranking in index.get_rankings():
            self.assertEqual(index.get_country_detail(ranking.country).ranking, ranking)

    def test_resolve_country_by_name_or_slug(self):
        index = PassportIndex.from_store(make_store([("United States", "Germany", "eta")]))

        self.assertEqual(index.resolve_country("United States").name, "United States")
        self.assertEqual(index.resolve_country("united-states").name, "United States")
        self.assertIsNone(index.resolve_country("atlantis"))


class BundledDataTests(unittest.TestCase):
    def setUp(self):
        patcher = patch("store.loader.log_event")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.index = PassportIndex.from_paths(config.VISA_DATA_PATH, config.COUNTRY_META_PATH)

    def test_rankings(self):
        rankings = self.index.get_rankings()

        self.assertEqual(len(rankings), 8)
        self.assertEqual((rankings[0].country, rankings[0].mobility_score, rankings[0].rank), ("Japan", 5, 1))
        self.assertEqual([r.rank for r in rankings], [1, 2, 2, 2, 5, 6, 6, 6])
        self.assertEqual(rankings[1].meta.code3, "DEU")

    def test_welcoming(self):
        ranks = self.index.get_welcoming_ranks()

        self.assertEqual((ranks[0].country, ranks[0].score), ("Kenya", 7))
        self.assertEqual((ranks[1].country, ranks[1].score), ("Singapore", 4))
        self.assertNotIn("Afghanistan", [r.country for r in ranks])

    def test_combining_japan_and_kenya(self):
        result = self.index.get_comparison(["Japan", "Kenya"])

        self.assertEqual(result.combined_mobility_score, 5)
        self.assertEqual(result.max_individual_score, 4)
        self.assertEqual(result.gain_from_combining, 1)
        self.assertEqual(result.combined_rank, 1)
        nigeria = next(row for row in result.destination_table if row.destination == "Nigeria")
        self.assertEqual(nigeria.best_passport, "Kenya")


if __name__ == "__main__":
    unittest.main()
