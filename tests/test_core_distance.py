import unittest

from name_match.core.distance import levenshtein


class TestLevenshtein(unittest.TestCase):
    def test_identical(self):
        self.assertEqual(levenshtein("yadav", "yadav"), 0)

    def test_empty_sides(self):
        self.assertEqual(levenshtein("", "yadav"), 5)
        self.assertEqual(levenshtein("yadav", ""), 5)
        self.assertEqual(levenshtein("", ""), 0)

    def test_single_substitution(self):
        self.assertEqual(levenshtein("yadav", "yadaw"), 1)

    def test_insert_and_substitute(self):
        self.assertEqual(levenshtein("rahul", "rahool"), 2)

    def test_classic_example(self):
        self.assertEqual(levenshtein("kitten", "sitting"), 3)

    def test_symmetric(self):
        self.assertEqual(levenshtein("vikash", "vikas"), levenshtein("vikas", "vikash"))

    def test_case_sensitive(self):
        self.assertEqual(levenshtein("Yadav", "yadav"), 1)


if __name__ == "__main__":
    unittest.main()
