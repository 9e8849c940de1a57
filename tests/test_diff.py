"""Tests for rcs_parser.diff."""
import pytest

from rcs_parser.diff import parse_diff_command, parse_diff_line, parse_diff_lines, parse_diff_string
from rcs_parser.errors import RcsLexicalError
from rcs_parser.nodes import DiffAdd, DiffDelete, DiffText


class TestParseDiffLine:
    def test_unix_and_windows_endings(self) -> None:
        assert parse_diff_line("abc\ndef") == (4, "abc")
        assert parse_diff_line("abc\r\ndef") == (5, "abc")

    def test_empty_line(self) -> None:
        assert parse_diff_line("\n") == (1, "")

    def test_unescapes_doubled_at(self) -> None:
        assert parse_diff_line("mail me@@example.com @@@@\n") == (26, "mail me@example.com @@")

    @pytest.mark.parametrize("text", ["abc", "", "abc@\n", "abc\rdef\n"])
    def test_missing_line_ending(self, text: str) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_diff_line(text)
        assert info.value.rules == ["crlf", "Diff"]


class TestParseDiffLines:
    def test_reads_exact_count(self) -> None:
        text = "abc\r\ndef\r\nghi\r\n"
        pos, lines = parse_diff_lines(text, 0, 2)
        assert lines == ["abc", "def"]
        assert text[pos:] == "ghi\r\n"

    def test_zero_lines(self) -> None:
        assert parse_diff_lines("abc\n", 0, 0) == (0, [])

    def test_short_input_is_an_error(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_diff_lines("abc\ndef\ng", 0, 3)
        assert info.value.frames[-1].offset == 8


class TestParseDiffCommand:
    def test_delete(self) -> None:
        assert parse_diff_command("d1 2\r\n") == (6, DiffDelete(position=1, count=2))

    def test_delete_with_loose_whitespace(self) -> None:
        assert parse_diff_command("d  1 \n 2\n") == (9, DiffDelete(position=1, count=2))

    def test_add(self) -> None:
        assert parse_diff_command("a2 2\nX\nY\n") == (9, DiffAdd(position=2, lines=["X", "Y"]))
        assert parse_diff_command("a1213 2\naaa\nbbb\n")[1] == DiffAdd(position=1213, lines=["aaa", "bbb"])

    def test_trailing_spaces_before_line_ending(self) -> None:
        assert parse_diff_command("d3 1  \t\n")[1] == DiffDelete(position=3, count=1)

    def test_leaves_following_commands(self) -> None:
        text = "d1 1\na1 1\nnew\n"
        pos, command = parse_diff_command(text)
        assert command == DiffDelete(position=1, count=1)
        assert text[pos:] == "a1 1\nnew\n"

    def test_unknown_opcode(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_diff_command("c2 3\n")
        assert info.value.rules == ["one_of", "Diff"]
        assert info.value.offset == 0

    def test_missing_count(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_diff_command("a2 ")
        assert info.value.rules == ["digit", "Diff"]
        assert info.value.offset == 3

    def test_missing_added_lines(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_diff_command("a2 3\n")
        assert info.value.rules == ["crlf", "Diff"]

    def test_add_lines_unescape_at(self) -> None:
        assert parse_diff_command("a0 1\nuser@@host\n")[1] == DiffAdd(position=0, lines=["user@host"])


class TestParseDiffString:
    def test_empty_stream(self) -> None:
        assert parse_diff_string("@@") == (2, DiffText())

    def test_stream(self) -> None:
        text = "@d1 2\na4 2\nThe named is the mother of all things.\n\nd9 1\n@rest"
        pos, diff = parse_diff_string(text)
        assert diff.commands == [
            DiffDelete(position=1, count=2),
            DiffAdd(position=4, lines=["The named is the mother of all things.", ""]),
            DiffDelete(position=9, count=1),
        ]
        assert text[pos:] == "rest"

    def test_added_line_cannot_swallow_terminator(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_diff_string("@a0 1\nno newline@")
        assert info.value.rules == ["crlf", "Diff", "string"]

    def test_unterminated(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_diff_string("@d1 1\n")
        assert info.value.rules == ["tag", "string"]
