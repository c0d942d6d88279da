"""Tests for keyword extraction and similarity."""

from seedvault.clustering.keywords import extract_keywords, MAX_KEYWORDS
from seedvault.clustering.similarity import jaccard_similarity, overlapping_keywords


def test_extract_korean_idea():
    assert extract_keywords("#seed/idea 모바일 학습 플랫폼") == ["모바일", "플랫폼"]


def test_extract_drops_short_words_and_stop_words():
    # "학습" and "앱" are too short, "idea" is filler
    assert extract_keywords("#seed/idea 모바일 학습 앱") == ["모바일"]


def test_extract_tag_only_content():
    assert extract_keywords("#seed/idea ") == []


def test_extract_strips_punctuation_and_lowercases():
    keywords = extract_keywords("Build a Mobile-Learning platform, v2!")
    assert keywords == ["build", "mobile", "learning", "platform"]


def test_extract_keeps_first_occurrence_order():
    assert extract_keywords("gamma alpha gamma beta") == ["gamma", "alpha", "gamma", "beta"]


def test_extract_caps_keywords():
    text = " ".join(f"word{i}" for i in range(15))
    keywords = extract_keywords(text)
    assert len(keywords) == MAX_KEYWORDS
    assert keywords[0] == "word0"
    assert keywords[-1] == "word9"


def test_extract_malformed_content():
    assert extract_keywords(None) == []
    assert extract_keywords(42) == []
    assert extract_keywords("") == []


def test_extract_only_stop_words():
    assert extract_keywords("아이디어 시스템 서비스 method") == []


def test_similarity_symmetric():
    a = ["mobile", "learning", "platform"]
    b = ["mobile", "game"]
    assert jaccard_similarity(a, b) == jaccard_similarity(b, a)
    assert jaccard_similarity(a, b) == 0.25


def test_similarity_identity_and_empty():
    assert jaccard_similarity(["mobile"], ["mobile"]) == 1.0
    assert jaccard_similarity([], []) == 0.0
    assert jaccard_similarity(["mobile"], []) == 0.0


def test_similarity_ignores_repeats():
    assert jaccard_similarity(["alpha", "alpha", "beta"], ["alpha", "beta"]) == 1.0


def test_overlapping_keywords_matches_substrings():
    base = ["mobile", "learning", "garden"]
    assert overlapping_keywords(base, ["mobiles", "learn"]) == ["mobile", "learning"]
    assert overlapping_keywords(base, []) == []
