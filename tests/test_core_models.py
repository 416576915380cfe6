import unittest

from name_match.core.models import MatchResult, Remark


class TestRemarkFromScore(unittest.TestCase):
    def test_thresholds(self):
        self.assertEqual(Remark.from_score(100), Remark.EXACT_MATCH)
        self.assertEqual(Remark.from_score(99), Remark.HIGH_SIMILARITY)
        self.assertEqual(Remark.from_score(90), Remark.HIGH_SIMILARITY)
        self.assertEqual(Remark.from_score(89), Remark.POSSIBLE_MATCH)
        self.assertEqual(Remark.from_score(70), Remark.POSSIBLE_MATCH)
        self.assertEqual(Remark.from_score(69), Remark.LOW_MATCH)
        self.assertEqual(Remark.from_score(0), Remark.LOW_MATCH)

    def test_display_text(self):
        self.assertEqual(Remark.HIGH_SIMILARITY.value, "High Similarity")


class TestMatchResult(unittest.TestCase):
    def test_to_dict(self):
        result = MatchResult(
            input_name="Vikash Yadav Luniwal",
            given_name="Vikash Yadav",
            percentage=94,
            remark=Remark.HIGH_SIMILARITY,
            strategy="subset",
        )
        self.assertEqual(
            result.to_dict(),
            {
                "inputName": "Vikash Yadav Luniwal",
                "givenName": "Vikash Yadav",
                "percentage": 94,
                "remark": "High Similarity",
                "strategy": "subset",
                "capped": False,
            },
        )

    def test_is_immutable(self):
        result = MatchResult("a", "b", 0, Remark.LOW_MATCH)
        with self.assertRaises(AttributeError):
            result.percentage = 100  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
