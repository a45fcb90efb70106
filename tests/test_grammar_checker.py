"""
Tests for Grammar Checker
=========================
Per-sentence and document-wide grammar flags.
"""

import pytest

from text_segmentation import SegmentedText, segment_text
from grammar_checker import (
    GrammarChecker, GrammarErrorType, check_grammar, get_error_description, DOCUMENT_WIDE,
)


@pytest.fixture
def checker() -> GrammarChecker:
    return GrammarChecker()


def errors_of(checker, text, error_type):
    return checker.check(segment_text(text)).of_type(error_type)


class TestCapitalization:
    """Sentence-initial capitals."""

    def test_single_error_at_first_character(self):
        """Test single error at first character."""
        result = check_grammar(segment_text("hello world. This is fine."))
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.type == GrammarErrorType.CAPITALIZATION
        assert (error.char_start, error.char_end, error.sentence_id) == (0, 1, 0)

    def test_later_sentence_offset(self, checker):
        """Test later sentence offset."""
        errors = errors_of(checker, "Fine here. then not.", GrammarErrorType.CAPITALIZATION)
        assert [(e.char_start, e.sentence_id) for e in errors] == [(11, 1)]

    def test_brand_words_skipped(self, checker):
        """Test brand words skipped."""
        assert errors_of(checker, "iphone sales rose.", GrammarErrorType.CAPITALIZATION) == []

    def test_digits_not_flagged(self, checker):
        """Test digits not flagged."""
        assert errors_of(checker, "3 cats sat.", GrammarErrorType.CAPITALIZATION) == []


class TestRepeatedWords:
    """Adjacent duplicates within a sentence."""

    def test_flags_second_occurrence(self, checker):
        """Test flags second occurrence."""
        errors = errors_of(checker, "I saw the the cat.", GrammarErrorType.REPEATED_WORD)
        assert [(e.char_start, e.char_end) for e in errors] == [(10, 13)]

    def test_case_insensitive(self, checker):
        """Test case insensitive."""
        errors = errors_of(checker, "The the cat sat.", GrammarErrorType.REPEATED_WORD)
        assert [(e.char_start, e.char_end) for e in errors] == [(4, 7)]

    @pytest.mark.parametrize("text", ["Bye bye now.", "It was very very good."])
    def test_intentional_repeats_allowed(self, checker, text):
        """Test intentional repeats allowed."""
        assert errors_of(checker, text, GrammarErrorType.REPEATED_WORD) == []

    def test_not_across_sentences(self, checker):
        """Test not across sentences."""
        assert errors_of(checker, "I ran. Ran fast.", GrammarErrorType.REPEATED_WORD) == []


class TestDocumentWideChecks:
    """Spacing and missing-space checks use sentence_id -1."""

    def test_multiple_spaces(self, checker):
        """Test multiple spaces."""
        segmented = SegmentedText(original_text="a  b")
        errors = checker.check(segmented).of_type(GrammarErrorType.SPACING)
        assert [(e.char_start, e.char_end, e.sentence_id) for e in errors] == [(1, 3, DOCUMENT_WIDE)]

    def test_normalized_text_has_no_spacing_errors(self, checker):
        """Test normalized text has no spacing errors."""
        assert errors_of(checker, "Too    many spaces.", GrammarErrorType.SPACING) == []

    def test_missing_space_after_period(self, checker):
        """Test missing space after period."""
        errors = errors_of(checker, "Hello.World is here.", GrammarErrorType.MISSING_SPACE)
        assert [(e.char_start, e.char_end, e.sentence_id) for e in errors] == [(5, 7, DOCUMENT_WIDE)]

    def test_missing_space_after_comma(self, checker):
        """Test missing space after comma."""
        errors = errors_of(checker, "Red,blue and green.", GrammarErrorType.MISSING_SPACE)
        assert len(errors) == 1

    @pytest.mark.parametrize("text", [
        "We visited the U.S.A. last year.",
        "I saw Dr.Smith today.",
        "Visit example.com today.",
        "Open notes.txt now.",
    ])
    def test_missing_space_exclusions(self, checker, text):
        """Test missing space exclusions."""
        assert errors_of(checker, text, GrammarErrorType.MISSING_SPACE) == []


class TestArticles:
    """a/an usage."""

    @pytest.mark.parametrize("text", ["I ate a apple.", "I saw an dog.", "Wait for a hour."])
    def test_flags_misuse(self, checker, text):
        """Test flags misuse."""
        assert len(errors_of(checker, text, GrammarErrorType.ARTICLE)) == 1

    @pytest.mark.parametrize("text", [
        "I ate an apple.", "She is an honest person.", "It was a unique day.", "It is a house.",
    ])
    def test_correct_usage(self, checker, text):
        """Test correct usage."""
        assert errors_of(checker, text, GrammarErrorType.ARTICLE) == []

    def test_error_spans_article(self, checker):
        """Test error spans article."""
        error = errors_of(checker, "I ate a apple.", GrammarErrorType.ARTICLE)[0]
        assert (error.char_start, error.char_end) == (6, 7)


class TestContractions:
    """its/your/their where the contraction was meant."""

    @pytest.mark.parametrize("text", ["Its a nice day.", "Your going home.", "Their coming too."])
    def test_flags_possessive(self, checker, text):
        """Test flags possessive."""
        errors = errors_of(checker, text, GrammarErrorType.CONTRACTION)
        assert len(errors) == 1
        assert errors[0].char_start == 0

    def test_possessive_use_not_flagged(self, checker):
        """Test possessive use not flagged."""
        assert errors_of(checker, "The dog wagged its tail.", GrammarErrorType.CONTRACTION) == []


class TestApostrophes:
    """Plural and decade apostrophes."""

    def test_plural_with_apostrophe(self, checker):
        """Test plural with apostrophe."""
        errors = errors_of(checker, "The apple's are red.", GrammarErrorType.APOSTROPHE)
        assert [(e.char_start, e.char_end, e.sentence_id) for e in errors] == [(4, 11, DOCUMENT_WIDE)]

    def test_contraction_s_not_flagged(self, checker):
        """Test 's contractions not flagged."""
        assert errors_of(checker, "Let's do it.", GrammarErrorType.APOSTROPHE) == []

    def test_decade(self, checker):
        """Test decade."""
        errors = errors_of(checker, "In the 1990's we danced.", GrammarErrorType.APOSTROPHE)
        assert len(errors) == 1

    def test_can_be_disabled(self):
        """Test can be disabled."""
        checker = GrammarChecker(check_apostrophes=False)
        assert errors_of(checker, "The apple's are red.", GrammarErrorType.APOSTROPHE) == []


class TestTerminalPunctuation:
    """Optional end-of-sentence punctuation check."""

    LONG_TEXT = "The first sentence ends properly here. The second sentence has no final mark"

    def test_off_by_default(self, checker):
        """Test off by default."""
        assert errors_of(checker, self.LONG_TEXT, GrammarErrorType.PUNCTUATION) == []

    def test_flags_unterminated_last_sentence_when_enabled(self):
        """Test flags unterminated last sentence when enabled."""
        checker = GrammarChecker(check_terminal_punctuation=True)
        errors = errors_of(checker, self.LONG_TEXT, GrammarErrorType.PUNCTUATION)
        assert len(errors) == 1
        assert errors[0].sentence_id == 1
        assert errors[0].char_end == len(self.LONG_TEXT)
        assert errors[0].char_start == len(self.LONG_TEXT) - 1

    def test_short_last_sentence_skipped(self):
        """Test short last sentence skipped."""
        checker = GrammarChecker(check_terminal_punctuation=True)
        text = "The first sentence ends properly here and is long. Done"
        assert errors_of(checker, text, GrammarErrorType.PUNCTUATION) == []

    def test_short_document_skipped(self):
        """Test short document skipped."""
        checker = GrammarChecker(check_terminal_punctuation=True)
        text = "This sentence has no final punctuation mark"
        assert errors_of(checker, text, GrammarErrorType.PUNCTUATION) == []


class TestResults:
    """Serialization and descriptions."""

    def test_to_dict(self, checker):
        """Test to dict."""
        data = checker.check(segment_text("hello there.")).to_dict()
        assert data["errors"][0] == {
            "type": "capitalization",
            "message": "Sentence should start with a capital letter.",
            "charStart": 0,
            "charEnd": 1,
            "sentenceId": 0,
        }

    def test_error_descriptions(self):
        """Test error descriptions."""
        assert get_error_description("capitalization") == "Capital letter needed"
        assert get_error_description(GrammarErrorType.REPEATED_WORD) == "Repeated word"
        assert get_error_description("nonsense") == "Grammar issue"

    def test_disabled_checker(self):
        """Test disabled checker."""
        assert GrammarChecker(enabled=False).check(segment_text("hello the the.")).errors == []

    def test_deterministic(self, checker):
        """Test deterministic."""
        text = "hello the the world.Its a apple."
        first = [e.to_dict() for e in checker.check(segment_text(text)).errors]
        second = [e.to_dict() for e in checker.check(segment_text(text)).errors]
        assert first == second
