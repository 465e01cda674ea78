"""
Unit tests for the case filter.
"""

import pytest

from dictcase.errors import ConfigurationError
from dictcase.filters.case_filter import CaseFilter


class TestWordRewriting:
    """Dictionary words are upper-cased, everything else passes through."""

    def test_sentence_example(self, go_filter):
        """Dictionary words are upper-cased; other words keep their case."""
        result = go_filter.transform("I go. You go home.", final=True)

        assert result.text == "I GO. You GO home."
        assert result.remainder == ""
        assert result.rotate is False
        assert result.words_replaced == 2

    def test_any_case_variant_matches(self, go_filter):
        """Lookup is case-insensitive."""
        result = go_filter.transform("go Go gO GO", final=True)
        assert result.text == "GO GO GO GO"

    def test_words_containing_dictionary_word_untouched(self, go_filter):
        """Only whole words match."""
        text = "gone ago going ego"
        assert go_filter.transform(text, final=True).text == text

    def test_idempotent(self, go_filter):
        """Upper-cased dictionary words stay upper-cased on a second pass."""
        once = go_filter.transform_text("Let's go, go, GO!")
        assert go_filter.transform_text(once) == once
        assert once == "Let's GO, GO, GO!"

    def test_punctuation_and_whitespace_pass_through(self):
        """Non-word characters are copied unchanged."""
        case_filter = CaseFilter({"word"})
        text = "  -- (word) [42] \t; word?!\n"
        assert case_filter.transform(text, final=True).text == "  -- (WORD) [42] \t; WORD?!\n"

    def test_words_with_digits(self):
        """Tokens are runs of word characters, digits included."""
        case_filter = CaseFilter({"mp3"})
        assert case_filter.transform_text("an mp3 player, 3rd mp3s") == "an MP3 player, 3rd mp3s"

    def test_cyrillic_words(self):
        """Letters of the legacy encoding are word characters."""
        case_filter = CaseFilter({"привет"})
        assert case_filter.transform_text("Привет, мир. привет!") == "ПРИВЕТ, мир. ПРИВЕТ!"

    def test_unencodable_upper_case_left_alone(self):
        """Characters whose upper-case form the output encoding lacks keep their case."""
        case_filter = CaseFilter({"µg"})
        result = case_filter.transform("Take 5 µg daily.", final=True)

        assert result.text == "Take 5 µG daily."
        assert result.words_replaced == 1
        assert case_filter.transform_text("µg") == "µG"

    def test_encoding_check_disabled(self):
        case_filter = CaseFilter({"µg"}, encoding=None)
        assert case_filter.transform_text("µg") == "ΜG"

    def test_dictionary_normalized_to_lowercase(self):
        """Dictionary entries are matched regardless of their own case."""
        case_filter = CaseFilter({"GO"})
        assert case_filter.transform_text("go") == "GO"

    def test_count_words(self, go_filter):
        """Counts dictionary words only."""
        assert go_filter.count_words("I go. You go home. Gone.") == 2


class TestRemainder:
    """Unconsumed text carried to the next call."""

    def test_trailing_word_held_back(self, go_filter):
        """A word touching the end of a non-final buffer may continue in the next block."""
        result = go_filter.transform("I go")

        assert result.text == "I "
        assert result.remainder == "go"
        assert result.rotate is False

    def test_trailing_word_written_when_final(self, go_filter):
        """The last buffer is consumed entirely."""
        result = go_filter.transform("I go", final=True)

        assert result.text == "I GO"
        assert result.remainder == ""

    def test_buffer_of_one_word_is_all_remainder(self, go_filter):
        """A buffer that is one unfinished word produces no output yet."""
        result = go_filter.transform("somethi")

        assert result.text == ""
        assert result.remainder == "somethi"

    def test_word_split_across_blocks(self):
        """A word cut by block boundaries is recognized once joined."""
        case_filter = CaseFilter({"hello"})

        first = case_filter.transform("say hel")
        second = case_filter.transform(first.remainder + "lo now", final=True)

        assert first.text + second.text == "say HELLO now"

    def test_no_remainder_after_trailing_punctuation(self, go_filter):
        """A buffer ending in a non-word character is fully consumed."""
        result = go_filter.transform("we go ")

        assert result.text == "we GO "
        assert result.remainder == ""


class TestRotation:
    """Decisions on where an output file may end."""

    def test_newlines_are_counted(self, go_filter):
        """The line counter advances once per newline."""
        result = go_filter.transform("a\nb\n\nc", lines_written=3, final=True)
        assert result.lines_written == 6

    def test_rotation_fires_one_line_before_max_lines(self):
        """
        A terminator ends the file once max_lines - 1 newlines are written.

        The threshold is one line below the limit on purpose; this test
        pins that behaviour.
        """
        case_filter = CaseFilter({"b"}, max_lines=3)
        result = case_filter.transform("a.\nb.\nc.\nd.", final=True)

        assert result.rotate is True
        assert result.text == "a.\nB.\nc."
        assert result.remainder == "\nd."
        assert result.lines_written == 2

    def test_no_rotation_below_threshold(self):
        """Terminators before the threshold do not end the file."""
        case_filter = CaseFilter({"x"}, max_lines=3)
        result = case_filter.transform("a.\nb!\n", final=True)

        assert result.rotate is False
        assert result.lines_written == 2

    @pytest.mark.parametrize("terminator", [".", "!", "?"])
    def test_each_terminator_rotates(self, terminator):
        """All sentence terminators are valid cut points."""
        case_filter = CaseFilter({"x"}, max_lines=1)
        result = case_filter.transform(f"Stop{terminator} Next", final=True)

        assert result.rotate is True
        assert result.text == f"Stop{terminator}"
        assert result.remainder == " Next"

    def test_other_punctuation_does_not_rotate(self):
        """Commas, colons and similar never end a file."""
        case_filter = CaseFilter({"x"}, max_lines=1)
        result = case_filter.transform("a, b; c: d", final=True)

        assert result.rotate is False

    def test_incoming_line_count_is_honoured(self):
        """Lines already written to the current file count towards the threshold."""
        case_filter = CaseFilter({"x"}, max_lines=5)
        result = case_filter.transform("done. more", lines_written=4)

        assert result.rotate is True
        assert result.text == "done."
        assert result.remainder == " more"

    def test_hard_cap_cuts_at_newline_without_terminator(self):
        """
        Deliberate exception to cutting only after a sentence terminator.

        When max_lines newlines pass with no terminator in reach, the file is
        cut right after the newline that fills it, so no file ever exceeds
        max_lines. Such a file ends with a newline, not a terminator.
        """
        case_filter = CaseFilter({"x"}, max_lines=2)
        result = case_filter.transform("one\ntwo\nthree")

        assert result.rotate is True
        assert result.text == "one\ntwo\n"
        assert result.remainder == "three"
        assert result.lines_written == 2

    def test_remainder_keeps_held_back_word(self):
        """After a rotation, the remainder holds everything after the cut."""
        case_filter = CaseFilter({"go"}, max_lines=1)
        result = case_filter.transform("Stop. go")

        assert result.rotate is True
        assert result.remainder == " go"


class TestConfiguration:
    """Constructor validation."""

    def test_max_lines_must_be_positive(self):
        with pytest.raises(ConfigurationError):
            CaseFilter({"go"}, max_lines=0)

    def test_terminators_required(self):
        with pytest.raises(ConfigurationError):
            CaseFilter({"go"}, terminators="")

    def test_unknown_encoding(self):
        with pytest.raises(ConfigurationError):
            CaseFilter({"go"}, encoding="no-such-codec")
