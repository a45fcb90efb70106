"""
Tests for Spell Checker
=======================
Dictionary rules, proper-noun leniency, session dictionary and
suggestion ranking.
"""

import pytest

from text_segmentation import segment_text
from spell_checker import SpellChecker, SessionDictionary, check_spelling


@pytest.fixture(scope="module")
def checker() -> SpellChecker:
    return SpellChecker()


def flagged(checker, text, session=None):
    return [e.word for e in checker.check(segment_text(text), session=session).errors]


class TestFlagging:
    """Which words get flagged."""

    def test_flags_misspellings_only(self, checker):
        """Test flags misspellings only."""
        assert flagged(checker, "Ths is a tst.") == ["Ths", "tst"]

    def test_error_offsets_point_at_word(self, checker):
        """Test error offsets point at word."""
        seg = segment_text("Ths is a tst.")
        errors = checker.check(seg).errors
        for error in errors:
            assert seg.original_text[error.char_start:error.char_end] == error.word
        assert [e.word_index for e in errors] == [0, 3]

    def test_module_level_check_spelling(self):
        """Test module-level check_spelling."""
        result = check_spelling(segment_text("Ths is a tst."))
        assert [e.word for e in result.errors] == ["Ths", "tst"]

    def test_clean_text_has_no_errors(self, checker):
        """Test clean text has no errors."""
        assert flagged(checker, "I like cats and dogs.") == []

    @pytest.mark.parametrize("word", ["running", "making", "walked", "cats", "dog's", "42", "3rd"])
    def test_rule_based_acceptance(self, checker, word):
        """Test rule-based acceptance."""
        assert checker.is_correctly_spelled(word)

    def test_single_characters_accepted(self, checker):
        """Test single characters accepted."""
        assert checker.is_correctly_spelled("x")

    def test_silent_e_needs_vowel_suffix(self, checker):
        """Test consonant-cluster typos are not read as the + s or he + s."""
        assert not checker.is_correctly_spelled("ths")
        assert not checker.is_correctly_spelled("hs")

    @pytest.mark.parametrize("word", ["hoping", "running", "goes", "its"])
    def test_short_stems_still_inflect(self, checker, word):
        """Test real inflections over short stems are accepted."""
        assert checker.is_correctly_spelled(word)

    def test_hyphenated_parts_checked(self, checker):
        """Test hyphenated parts checked."""
        assert checker.is_correctly_spelled("well-known")
        assert not checker.is_correctly_spelled("well-knwn")


class TestProperNouns:
    """Capitalized words mid-sentence are treated as names."""

    def test_mid_sentence_name_accepted(self, checker):
        """Test mid sentence name accepted."""
        assert flagged(checker, "I met Zorblax today.") == []

    def test_sentence_initial_capital_is_not_a_name(self, checker):
        """Test sentence initial capital is not a name."""
        assert flagged(checker, "Zorblax met me.") == ["Zorblax"]

    def test_name_seen_mid_sentence_vouches_for_sentence_start(self, checker):
        """Test name seen mid sentence vouches for sentence start."""
        assert flagged(checker, "Zorblax met me. I like Zorblax.") == []


class TestSessionDictionary:
    """Ignored words are scoped to the session object."""

    def test_ignored_word_not_flagged(self, checker):
        """Test ignored word not flagged."""
        session = SessionDictionary()
        session.add("TST")
        assert flagged(checker, "Ths is a tst.", session) == ["Ths"]

    def test_sessions_are_independent(self, checker):
        """Test sessions are independent."""
        first, second = SessionDictionary(["tst"]), SessionDictionary()
        assert flagged(checker, "Ths is a tst.", first) == ["Ths"]
        assert flagged(checker, "Ths is a tst.", second) == ["Ths", "tst"]

    def test_add_remove_clear(self):
        """Test add remove clear."""
        session = SessionDictionary()
        session.add("Foo")
        assert "foo" in session
        assert "FOO" in session
        assert len(session) == 1
        session.remove("foo")
        assert "foo" not in session
        session.add("bar")
        session.clear()
        assert session.words() == []


class TestSuggestions:
    """Suggestion ranking."""

    def test_suggestions_for_examples(self, checker):
        """Test suggestions for examples."""
        errors = checker.check(segment_text("Ths is a tst.")).errors
        assert "this" in errors[0].suggestions
        assert "test" in errors[1].suggestions

    def test_limit_respected(self, checker):
        """Test limit respected."""
        assert len(checker.generate_suggestions("tst", 2)) <= 2
        assert checker.generate_suggestions("tst", 0) == []
        assert checker.generate_suggestions("", 5) == []

    def test_deterministic(self, checker):
        """Test deterministic."""
        assert checker.generate_suggestions("recieve") == checker.generate_suggestions("recieve")

    def test_custom_dictionary(self):
        """Test custom dictionary."""
        small = SpellChecker(dictionary=["hello", "world"])
        errors = small.check(segment_text("hello wurld")).errors
        assert [e.word for e in errors] == ["wurld"]
        assert errors[0].suggestions == ["world"]

    def test_word_itself_never_suggested(self, checker):
        """Test word itself never suggested."""
        assert "test" not in checker.generate_suggestions("test")

    def test_letter_swap_listed_once(self):
        """Test a b/d reversal reached by swap and by edit distance is listed once."""
        assert SpellChecker(dictionary=["dog"]).generate_suggestions("bog") == ["dog"]

    def test_phonetic_confusion_outranks_edit_distance(self):
        """Test ph/f respelling ranks ahead of a plain one-letter edit."""
        small = SpellChecker(dictionary=["phone", "bone"])
        assert small.generate_suggestions("fone") == ["phone", "bone"]

    def test_able_ible_confusion(self):
        """Test able/ible endings are suggested."""
        assert SpellChecker(dictionary=["visible"]).generate_suggestions("visable") == ["visible"]

    def test_suffix_pattern_candidate(self):
        """Test ise/ize endings are suggested once."""
        assert SpellChecker(dictionary=["organize"]).generate_suggestions("organise") == ["organize"]

    def test_injected_priorities(self):
        """Test swap, phonetic and pattern candidates keep their priority order."""
        assert SpellChecker.SWAP_SCORE < SpellChecker.PHONETIC_SCORE < SpellChecker.PATTERN_SCORE


class TestCheckerContract:
    """BaseChecker behavior."""

    def test_disabled_checker_returns_empty(self):
        """Test disabled checker returns empty."""
        assert SpellChecker(enabled=False).check(segment_text("Ths is a tst.")).errors == []

    def test_safe_check_records_failure(self):
        """Test safe check records failure."""
        checker = SpellChecker()
        result = checker.safe_check(None)
        assert result.errors == []
        assert checker.get_errors()[0].startswith("Spelling error:")
        checker.clear_errors()
        assert checker.get_errors() == []

    def test_to_dict(self, checker):
        """Test to dict."""
        data = checker.check(segment_text("Ths is a tst.")).to_dict()
        assert set(data["errors"][0]) == {"word", "charStart", "charEnd", "wordIndex", "suggestions"}
