"""Tests of the critical section extractor."""

import pytest

from lexidetect.detection.critical_sections import (
    CriticalSectionExtractor,
    ReasonBuilder,
)
from lexidetect.detection.fingerprints import FingerprintLibrary
from tests.samples import CLAUDE_WRITERLY_TEXT, MIXED_SIGNALS_TEXT, SAMPLE_TEXTS


@pytest.fixture
def extractor(library: FingerprintLibrary) -> CriticalSectionExtractor:
    """Create an extractor with the default sentence threshold."""
    return CriticalSectionExtractor(library, sentence_threshold=70.0)


class TestPhrasePass:
    """Tests of finding fingerprint phrases."""

    def test_every_occurrence_is_found(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        text = "Moreover, cats. MOREOVER, dogs."
        sections = extractor.extract(text)

        assert [(s.start, s.end, s.text) for s in sections] == [
            (0, 8, "Moreover"),
            (16, 24, "MOREOVER"),
        ]
        assert all(s.confidence == 95.0 for s in sections)

    def test_word_boundaries(self, extractor: CriticalSectionExtractor) -> None:
        assert extractor.extract("Moreovers and furthermores.") == []

    def test_punctuation_phrases_need_no_boundaries(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        text = "Fast—cheap. Not true."
        found = {(s.text, s.reason) for s in extractor.extract(text)}
        assert found == {
            ("—", "Common Claude writing pattern: '—'"),
            ("Not true.", "Common Claude writing pattern: 'not true.'"),
        }

    def test_reason_follows_provenance(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        sections = extractor.extract("At the end of the day, absolutely.")
        phrase_reasons = [s.reason for s in sections if s.confidence == 95.0]
        assert phrase_reasons == [
            "Detected common AI phrase: 'at the end of the day'",
            "Common Gemini writing pattern: 'absolutely'",
        ]

    def test_overlapping_phrases_are_preserved(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        sections = extractor.extract("Here's what you need to know.")
        assert [s.text for s in sections] == [
            "Here's what you need to know",
            "Here's what",
        ]
        assert sections[0].start == sections[1].start == 0


class TestSentencePass:
    """Tests of flagging whole sentences."""

    def test_sentence_with_ai_phrases_is_flagged(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        text = "I like tea. Furthermore, we need to delve into the details."
        sentence_sections = [s for s in extractor.extract(text) if s.confidence != 95]

        assert len(sentence_sections) == 1
        section = sentence_sections[0]
        assert section.text == "Furthermore, we need to delve into the details."
        assert section.start == 12
        assert section.confidence == 100.0
        assert section.reason == (
            'Contains AI phrase: "delve into", "furthermore" • '
            "GPT pattern: 'delve into'"
        )

    def test_short_sentences_are_skipped(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        assert extractor.score_sentence("Moreover, it works.") == pytest.approx(80.0)
        assert extractor.extract("Moreover, it works.")[0].confidence == 95.0
        assert len(extractor.extract("Moreover, it works.")) == 1

    def test_plain_sentence_is_not_flagged(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        score = extractor.score_sentence("The cat sat on the mat today.")
        assert score == pytest.approx(60.0)
        assert extractor.extract("The cat sat on the mat today.") == []

    def test_threshold_is_tunable(self, library: FingerprintLibrary) -> None:
        extractor = CriticalSectionExtractor(library, sentence_threshold=50.0)
        sections = extractor.extract("The cat sat on the mat today.")

        assert len(sections) == 1
        assert sections[0].reason == "Consistent sentence structure typical of AI"

    def test_repetitive_sentence_mentions_diversity(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        text = "the cat the cat the cat the cat the cat the cat."
        (section,) = extractor.extract(text)
        assert section.reason == "Low vocabulary diversity (17%)"


class TestReasonBuilder:
    """Tests of building explanations."""

    def test_repeated_evidence_gets_distinct_reasons(
        self, library: FingerprintLibrary
    ) -> None:
        builder = ReasonBuilder(library)
        assert builder.for_phrase("moreover") == "Common GPT writing pattern: 'moreover'"
        assert builder.for_phrase("moreover") == (
            "Common GPT writing pattern: 'moreover' (occurrence 2)"
        )

    @pytest.mark.parametrize(
        ("score", "reason"),
        [
            (90.0, "Highly repetitive structure and predictable patterns"),
            (80.0, "Predictable word choice with consistent rhythm"),
            (70.0, "Consistent sentence structure typical of AI"),
        ],
    )
    def test_fallback_by_score_band(
        self, library: FingerprintLibrary, score: float, reason: str
    ) -> None:
        builder = ReasonBuilder(library)
        assert builder.for_sentence(score, "Plain words only here", 1.0) == reason


class TestInvariants:
    """Tests of properties holding for every text."""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_sections_match_text_and_are_sorted(
        self, extractor: CriticalSectionExtractor, text: str
    ) -> None:
        sections = extractor.extract(text)

        starts = [section.start for section in sections]
        assert starts == sorted(starts)
        for section in sections:
            assert 0 <= section.start < section.end <= len(text)
            assert section.text == text[section.start : section.end]
            assert 0 <= section.confidence <= 100

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_reasons_are_unique(
        self, extractor: CriticalSectionExtractor, text: str
    ) -> None:
        reasons = [section.reason for section in extractor.extract(text)]
        assert len(reasons) == len(set(reasons))

    def test_reasons_name_specific_patterns(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        reasons = [section.reason for section in extractor.extract(MIXED_SIGNALS_TEXT)]
        assert reasons
        assert any(
            "AI phrase:" in reason or "pattern:" in reason or "diversity" in reason
            for reason in reasons
        )

    def test_claude_writerly_sections(
        self, extractor: CriticalSectionExtractor
    ) -> None:
        texts = {section.text for section in extractor.extract(CLAUDE_WRITERLY_TEXT)}
        assert {"Not true.", "The fear?", "The reality?", "Think of it like"} <= texts
