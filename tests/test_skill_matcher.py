# tests/test_skill_matcher.py
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hackathon_allocation.matching.skill_matcher import score


class TestSkillMatcher(unittest.TestCase):

    def test_same_inputs_same_result(self):
        skills = ["Python", "ML", "React"]
        keywords = ["python", "machine learning", "react native"]
        self.assertEqual(score(skills, keywords), score(skills, keywords))

    def test_empty_sides_score_zero(self):
        for skills, keywords in [([], ["python"]), (["python"], []), ([], [])]:
            result = score(skills, keywords)
            self.assertEqual(result.score, 0.0)
            self.assertEqual(result.matched_skills, [])

    def test_blank_terms_are_ignored(self):
        # a blank skill would otherwise substring-match every keyword
        result = score(["", "  ", "python"], ["python"])
        self.assertEqual(result.score, 1.0)
        self.assertEqual(result.matched_skills, ["python"])

        self.assertEqual(score(["  "], ["python"]).score, 0.0)

    def test_identical_sets_saturate_and_keep_mentor_casing(self):
        result = score(["python", "react"], ["Python", "React"])
        self.assertEqual(result.score, 1.0)
        self.assertEqual(set(result.matched_skills), {"python", "react"})

        result = score(["PyThon ", "React"], ["python", "react"])
        self.assertEqual(result.matched_skills, ["PyThon", "React"])

    def test_partial_match_counts_half(self):
        result = score(["react"], ["react native"])
        self.assertAlmostEqual(result.score, 0.5)
        self.assertEqual(result.matched_skills, ["react"])

        # keyword inside the skill also counts
        result = score(["tensorflow lite"], ["tensorflow"])
        self.assertAlmostEqual(result.score, 0.5)

    def test_skill_counted_once_across_passes(self):
        # exact on "python"; "python3" would be a partial hit on the same skill
        result = score(["python"], ["python", "python3"])
        self.assertAlmostEqual(result.score, 0.5)  # 1.0 / max(1, 2)
        self.assertEqual(result.matched_skills, ["python"])

    def test_mixed_exact_and_partial(self):
        # "ab" exact (1.0) + "a" inside "ab" (0.5) over max(2, 1)
        result = score(["a", "ab"], ["ab"])
        self.assertAlmostEqual(result.score, 0.75)
        self.assertEqual(result.matched_skills, ["ab", "a"])

    def test_normalised_by_larger_side(self):
        result = score(["python"], ["python", "django", "flask", "sql"])
        self.assertAlmostEqual(result.score, 0.25)

    def test_score_never_exceeds_one(self):
        result = score(["go", "golang", "gopher"], ["go"])
        self.assertLessEqual(result.score, 1.0)
        self.assertGreaterEqual(result.score, 0.0)

    def test_duplicate_skills_after_normalisation(self):
        result = score(["Python", "python", " PYTHON"], ["python"])
        self.assertEqual(result.score, 1.0)
        self.assertEqual(result.matched_skills, ["Python"])

    def test_no_overlap(self):
        result = score(["react", "css"], ["python", "tensorflow"])
        self.assertEqual(result.score, 0.0)
        self.assertEqual(result.matched_skills, [])


if __name__ == '__main__':
    unittest.main()
