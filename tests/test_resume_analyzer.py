import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analysis.aggregator import (  # noqa: E402
    analyze_resume,
    analyze_text,
    build_corpus,
    summarize_metrics,
)
from app.schemas.resume import Education, Experience, PersonalInfo, ResumeRecord  # noqa: E402


class ResumeAnalyzerTests(unittest.TestCase):
    def setUp(self):
        self.record = ResumeRecord(
            personal_info=PersonalInfo(
                name="Jane Doe",
                email="jane@example.com",
                summary="Led a team of 10 engineers. Increased revenue by 25% using React and Python.",
            ),
            experiences=[
                Experience(
                    company="Acme",
                    position="Engineer",
                    duration="2019 - 2023",
                    description="Reduced costs by $40,000 across 3 projects.",
                )
            ],
            education=[Education(institution="MIT", degree="BSc", duration="2015 - 2019")],
            skills="Python, SQL",
        )

    def _assert_empty(self, result):
        self.assertEqual(result.word_count, 0)
        self.assertEqual(result.sentence_count, 0)
        self.assertEqual(result.action_verbs_used, ())
        self.assertEqual(result.action_verbs_percentage, 0.0)
        self.assertEqual(result.industry_keywords_found, ())
        self.assertEqual(result.keyword_density, 0.0)
        self.assertEqual(result.quantifiable_metrics, ())
        self.assertFalse(result.has_quantifiable_achievements)
        self.assertEqual(result.readability_score, 0.0)
        self.assertEqual(result.average_words_per_sentence, 0.0)

    def test_corpus_joins_fields_in_resume_order(self):
        corpus = build_corpus(self.record)
        self.assertEqual(
            corpus,
            "jane doe led a team of 10 engineers. increased revenue by 25% using react and python. "
            "acme engineer reduced costs by $40,000 across 3 projects. mit bsc  python, sql",
        )

    def test_corpus_skips_duration_and_contact_fields(self):
        corpus = build_corpus(self.record)
        self.assertNotIn("2019", corpus)
        self.assertNotIn("jane@example.com", corpus)

    def test_empty_record_yields_zero_metrics(self):
        self._assert_empty(analyze_resume(ResumeRecord(), "technology"))
        self._assert_empty(analyze_resume(None, "general"))
        self._assert_empty(analyze_resume({}, "general"))

    def test_null_fields_degrade_to_empty(self):
        payload = {
            "personalInfo": {"name": None, "summary": ""},
            "experiences": [None, {"company": None, "position": None, "description": None}],
            "education": None,
            "skills": None,
        }
        self._assert_empty(analyze_resume(payload, "finance"))

    def test_form_payload_with_camel_case_keys(self):
        payload = {
            "personalInfo": {"name": "Sam", "summary": "Improved uptime by 20%."},
            "experiences": [{"company": "Initech", "position": "SRE", "description": "Automated deploys."}],
            "skills": ["Docker", "Kubernetes"],
        }
        result = analyze_resume(payload, "technology")
        self.assertIn("Docker", result.industry_keywords_found)
        self.assertIn("Kubernetes", result.industry_keywords_found)
        self.assertEqual(result.quantifiable_metrics, ("20%",))

    def test_end_to_end_example(self):
        summary_only = ResumeRecord(personal_info=self.record.personal_info)
        result = analyze_resume(summary_only, "technology")
        self.assertIn("led", result.action_verbs_used)
        self.assertIn("increased", result.action_verbs_used)
        self.assertIn("React", result.industry_keywords_found)
        self.assertIn("Python", result.industry_keywords_found)
        self.assertIn("25%", result.quantifiable_metrics)
        self.assertTrue(result.has_quantifiable_achievements)
        self.assertEqual(result.sentence_count, 2)

    def test_percentages_divide_by_raw_word_count(self):
        result = analyze_text("Led projects.", "general")
        self.assertEqual(result.word_count, 2)
        self.assertEqual(result.action_verbs_used, ("led",))
        self.assertEqual(result.action_verbs_percentage, 50.0)
        self.assertEqual(result.keyword_density, 0.0)
        self.assertEqual(result.average_words_per_sentence, 2.0)

    def test_keyword_density_counts_unique_keywords(self):
        result = analyze_text("Leadership and communication. Leadership again.", "general")
        self.assertEqual(result.industry_keywords_found, ("leadership", "communication"))
        self.assertAlmostEqual(result.keyword_density, 2 / result.word_count * 100)

    def test_unknown_industry_matches_general(self):
        text = build_corpus(self.record)
        self.assertEqual(
            analyze_text(text, "quantum-basket-weaving"),
            analyze_text(text, "general"),
        )

    def test_industry_tag_is_matched_exactly(self):
        text = "machine learning react"
        self.assertEqual(analyze_text(text, "technology").industry_keywords_found, ("machine learning", "React"))
        self.assertEqual(analyze_text(text, "Technology"), analyze_text(text, "general"))

    def test_analysis_is_repeatable(self):
        first = analyze_resume(self.record, "technology")
        second = analyze_resume(self.record, "technology")
        self.assertEqual(first, second)
        self.assertEqual(first.model_dump(), second.model_dump())

    def test_result_is_immutable(self):
        result = analyze_resume(self.record, "technology")
        with self.assertRaises(ValidationError):
            result.word_count = 0

    def test_result_serializes_with_camel_case_keys(self):
        dumped = analyze_resume(self.record, "technology").model_dump(by_alias=True)
        for key in (
            "wordCount",
            "sentenceCount",
            "actionVerbsUsed",
            "actionVerbsPercentage",
            "industryKeywordsFound",
            "keywordDensity",
            "quantifiableMetrics",
            "hasQuantifiableAchievements",
            "readabilityScore",
            "averageWordsPerSentence",
        ):
            self.assertIn(key, dumped)

    def test_summary_counts(self):
        result = analyze_resume(self.record, "technology")
        summary = summarize_metrics(result)
        self.assertEqual(summary.word_count, result.word_count)
        self.assertEqual(summary.action_verbs_count, len(result.action_verbs_used))
        self.assertEqual(summary.keywords_count, len(result.industry_keywords_found))
        self.assertEqual(summary.metrics_count, len(result.quantifiable_metrics))
        self.assertEqual(summary.readability_score, int(result.readability_score + 0.5))


if __name__ == "__main__":
    unittest.main()
