from .aggregator import analyze_resume, analyze_text, build_corpus, summarize_metrics
from .keyword_advisor import keyword_match_percentage, missing_industry_keywords, relevant_keywords
from .lexical import find_action_verbs, find_industry_keywords
from .metrics import find_quantifiable_metrics
from .readability import count_syllables, reading_ease
from .reference_data import ATS_OPTIMIZATION_TIPS, DEFAULT_REFERENCE, GENERAL_INDUSTRY, ReferenceData
from .text_normalizer import split_sentences, tokenize_words

__all__ = [
    "analyze_resume",
    "analyze_text",
    "build_corpus",
    "summarize_metrics",
    "keyword_match_percentage",
    "missing_industry_keywords",
    "relevant_keywords",
    "find_action_verbs",
    "find_industry_keywords",
    "find_quantifiable_metrics",
    "count_syllables",
    "reading_ease",
    "ATS_OPTIMIZATION_TIPS",
    "DEFAULT_REFERENCE",
    "GENERAL_INDUSTRY",
    "ReferenceData",
    "split_sentences",
    "tokenize_words",
]
