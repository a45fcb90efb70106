"""
Tests for Text Segmentation
===========================
Normalization, sentence boundaries, word offsets and lookup helpers.
"""

import pytest

from text_segmentation import (
    SegmentedText, normalize_text, is_abbreviation, split_sentences, segment_text,
    find_word_at_position, find_sentence_for_word, get_text_span,
)


SAMPLE_TEXTS = [
    "",
    "   ",
    "Hello world.",
    "Dr. Smith arrived. He sat down",
    "We use tools, e.g. hammers. Then we stop!",
    "Wait... what?! Really",
    "hello\u200b  world\t\t again.\nNew line here.",
    "I don't think it's well-known. Don’t worry.",
    "Tabs\tand \x07 bells \x00 are   removed.",
]


@pytest.fixture
def sample() -> SegmentedText:
    return segment_text("Dr. Smith arrived. He sat down")


class TestNormalization:
    """Tests for normalize_text."""

    def test_zero_width_removed_and_spaces_collapsed(self):
        """Test zero width removed and spaces collapsed."""
        assert normalize_text("hello\u200b  world\t!") == "hello world !"

    def test_newlines_kept(self):
        """Test newlines kept."""
        assert normalize_text("one\n\ntwo") == "one\n\ntwo"

    def test_control_characters_removed_without_double_space(self):
        """Test control characters removed without double space."""
        assert normalize_text("a \x07 b") == "a b"

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_segmentation_is_idempotent(self, text):
        """Test segmentation is idempotent."""
        first = segment_text(text).original_text
        assert segment_text(first).original_text == first


class TestSentenceSplitting:
    """Tests for sentence boundaries."""

    def test_abbreviation_does_not_end_sentence(self, sample):
        """Test abbreviation does not end sentence."""
        assert [s.text for s in sample.sentences] == ["Dr. Smith arrived.", "He sat down"]

    def test_inner_abbreviation_period(self):
        """Test inner abbreviation period."""
        text = "We use tools, e.g. hammers. Then we stop!"
        assert is_abbreviation(text, text.index("e.g.") + 1)
        assert is_abbreviation(text, text.index("e.g.") + 3)
        assert len(segment_text(text).sentences) == 2

    def test_terminator_runs_close_one_sentence(self):
        """Test terminator runs close one sentence."""
        seg = segment_text("Wait... what?! Really")
        assert [s.text for s in seg.sentences] == ["Wait...", "what?!", "Really"]

    def test_trailing_text_becomes_final_sentence(self):
        """Test trailing text becomes final sentence."""
        text = "Hello there. How are you"
        seg = segment_text(text)
        last = seg.sentences[-1]
        assert last.text == "How are you"
        assert last.sentence_end == len(text)

    def test_blank_text_has_no_sentences(self):
        """Test blank text has no sentences."""
        assert split_sentences("   ") == []
        seg = segment_text("")
        assert seg.sentence_count == 0
        assert seg.word_count == 0

    def test_whitespace_between_sentences_belongs_to_neither(self):
        """Test whitespace between sentences belongs to neither."""
        seg = segment_text("One. Two.")
        first, second = seg.sentences
        assert first.sentence_end == 4
        assert second.sentence_start == 5


class TestInvariants:
    """Offset and ordering properties over a range of inputs."""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_word_offsets_slice_back_to_word(self, text):
        """Test word offsets slice back to word."""
        seg = segment_text(text)
        for word in seg.all_words:
            assert 0 <= word.char_start < word.char_end <= len(seg.original_text)
            assert seg.original_text[word.char_start:word.char_end] == word.word

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_sentences_ordered_and_non_overlapping(self, text):
        """Test sentences ordered and non-overlapping."""
        seg = segment_text(text)
        for position, sentence in enumerate(seg.sentences):
            assert sentence.sentence_id == position
            assert sentence.sentence_start < sentence.sentence_end
        for previous, current in zip(seg.sentences, seg.sentences[1:]):
            assert previous.sentence_end <= current.sentence_start

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_word_index_matches_position(self, text):
        """Test word index matches position."""
        seg = segment_text(text)
        for position, word in enumerate(seg.all_words):
            assert word.word_index == position
            assert word in seg.sentences[word.sentence_id].words


class TestWords:
    """Tests for word tokenization."""

    def test_contractions_and_hyphens_are_single_words(self):
        """Test contractions and hyphens are single words."""
        seg = segment_text("I don't think it's well-known.")
        assert [w.word for w in seg.all_words] == ["I", "don't", "think", "it's", "well-known"]

    def test_typographic_apostrophe(self):
        """Test typographic apostrophe."""
        seg = segment_text("Don’t worry.")
        assert seg.all_words[0].word == "Don’t"

    def test_punctuation_is_not_a_word(self):
        """Test punctuation is not a word."""
        seg = segment_text("Yes, no; maybe!")
        assert [w.word for w in seg.all_words] == ["Yes", "no", "maybe"]


class TestHelpers:
    """Tests for lookup helpers."""

    def test_find_word_at_position(self, sample):
        """Test find word at position."""
        word = find_word_at_position(sample, sample.original_text.index("Smith") + 2)
        assert word.word == "Smith"
        assert find_word_at_position(sample, sample.original_text.index(" arrived")) is None

    def test_find_sentence_for_word(self, sample):
        """Test find sentence for word."""
        he = next(w for w in sample.all_words if w.word == "He")
        assert find_sentence_for_word(sample, he.word_index).sentence_id == 1
        assert find_sentence_for_word(sample, 99) is None
        assert find_sentence_for_word(sample, -1) is None

    def test_get_text_span(self):
        """Test get text span."""
        assert get_text_span("hello world", 6, 11) == "world"

    def test_to_dict_uses_wire_names(self, sample):
        """Test to dict uses wire names."""
        data = sample.to_dict()
        assert set(data) == {"sentences", "allWords", "originalText"}
        assert set(data["allWords"][0]) == {"word", "charStart", "charEnd", "wordIndex", "sentenceId"}
        assert data["sentences"][0]["sentenceId"] == 0
