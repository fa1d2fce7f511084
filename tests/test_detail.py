import unittest

from engine.detail import get_country_detail
from engine.rankings import calculate_rankings
from engine.visa_map import build_visa_map
from engine.errors import InvalidArgumentError
from tests.helpers import make_store, with_self_rows

ROWS = with_self_rows(
    [
        ("Japan", "Germany", "90"),
        ("Japan", "India", "visa on arrival"),
        ("Japan", "Kenya", "eta"),
        ("Japan", "China", "e-visa"),
        ("Japan", "Nigeria", "visa required"),
        ("Japan", "North Korea", "no admission"),
        ("Germany", "Japan", "90"),
        ("Kenya", "Japan", "e-visa"),
        ("India", "Japan", "eta"),
    ]
)


class CountryDetailTests(unittest.TestCase):
    def setUp(self):
        self.store = make_store(ROWS)
        self.rankings = calculate_rankings(self.store)

    def test_partitions_destinations_by_category(self):
        detail = get_country_detail(self.store, self.rankings, "Japan")

        self.assertEqual(detail.visa_free, ["Germany"])
        self.assertEqual(detail.visa_on_arrival, ["India"])
        self.assertEqual(detail.eta, ["Kenya"])
        self.assertEqual(detail.e_visa, ["China"])
        self.assertEqual(detail.visa_required, ["Nigeria"])
        self.assertEqual(detail.no_admission, ["North Korea"])
        self.assertNotIn("Japan", detail.visa_required)

    def test_welcoming_score(self):
        detail = get_country_detail(self.store, self.rankings, "Japan")
        # Germany (visa free) and India (eta); Kenya needs an e-visa.
        self.assertEqual(detail.welcoming_score, 2)

    def test_ranking_matches_full_ranking(self):
        for ranking in self.rankings:
            with self.subTest(country=ranking.country):
                detail = get_country_detail(self.store, self.rankings, ranking.country)
                self.assertEqual(detail.ranking, ranking)

    def test_unknown_or_unranked_country_returns_none(self):
        self.assertIsNone(get_country_detail(self.store, self.rankings, "Atlantis"))
        # China is known but issues no passport rows here.
        self.assertIsNone(get_country_detail(self.store, self.rankings, "China"))


class VisaMapTests(unittest.TestCase):
    def test_keys_destinations_by_alpha3_code(self):
        store = make_store(ROWS)
        visa_map = build_visa_map(store, "Japan")

        self.assertEqual(visa_map["GER"].requirement, "visa-free")
        self.assertEqual(visa_map["GER"].code, "GE")
        self.assertEqual(visa_map["NOR"].requirement, "no-admission")
        self.assertEqual(visa_map["JAP"].requirement, "home")

    def test_unknown_destinations_are_skipped(self):
        store = make_store([("Japan", "Atlantis", "visa free")], countries=["Japan"])
        self.assertEqual(list(build_visa_map(store, "Japan")), ["JAP"])

    def test_unknown_passport_is_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            build_visa_map(make_store(ROWS), "Atlantis")


if __name__ == "__main__":
    unittest.main()
