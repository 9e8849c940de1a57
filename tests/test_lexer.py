"""Tests for rcs_parser.lexer."""
import pytest

from rcs_parser.errors import RcsLexicalError
from rcs_parser.lexer import (
    is_idchar,
    is_special,
    is_visible,
    parse_id,
    parse_intstring,
    parse_num,
    parse_string,
    parse_sym,
)
from rcs_parser.nodes import Num


def remainder(text: str, result: tuple[int, object]) -> str:
    return text[result[0] :]


class TestCharacterClasses:
    @pytest.mark.parametrize("char", ["$", ",", ".", ":", ";", "@"])
    def test_special(self, char: str) -> None:
        assert is_special(char)

    @pytest.mark.parametrize("char", ["\r", " ", "G", "8", "á"])
    def test_not_special(self, char: str) -> None:
        assert not is_special(char)

    @pytest.mark.parametrize("char", ["a", "9", "*", ".", "ö", "~", "\xa0", "\xff"])
    def test_visible(self, char: str) -> None:
        assert is_visible(char)

    @pytest.mark.parametrize("char", [" ", "\n", "\t", "\x7f", "\x9f", "ő"])
    def test_not_visible(self, char: str) -> None:
        assert not is_visible(char)

    @pytest.mark.parametrize("char", ["f", "9", "F", "*", "~", "!", "á"])
    def test_idchar(self, char: str) -> None:
        assert is_idchar(char)

    @pytest.mark.parametrize("char", ["$", " ", "\x7f", "\n", ".", "@"])
    def test_not_idchar(self, char: str) -> None:
        assert not is_idchar(char)


class TestSymAndId:
    def test_sym_stops_at_special(self) -> None:
        assert parse_sym("abc123*$zzz") == (7, "abc123*")
        assert parse_sym("XZY-_ ~~~") == (5, "XZY-_")
        assert parse_sym("abc123*é") == (8, "abc123*é")

    def test_sym_stops_at_period(self) -> None:
        assert parse_sym("v1.2") == (2, "v1")

    def test_sym_requires_one_char(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_sym(" abc")
        assert info.value.rules == ["take_while1", "sym"]
        assert info.value.offset == 0

    def test_id_allows_periods(self) -> None:
        text = "A.a.1.@xyz"
        result = parse_id(text)
        assert result[1] == "A.a.1."
        assert remainder(text, result) == "@xyz"
        assert parse_id(".") == (1, ".")

    def test_id_requires_one_char(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_id(" .abc")
        assert info.value.rules == ["take_while1", "id"]


class TestParseNum:
    def test_single_and_dotted(self) -> None:
        assert parse_num("1") == (1, Num.of(1))
        assert parse_num("1.1") == (3, Num.of(1, 1))
        assert parse_num("1.1.1") == (5, Num.of(1, 1, 1))

    def test_leaves_remainder(self) -> None:
        text = "134.1.4.2w"
        result = parse_num(text)
        assert result[1] == Num.of(134, 1, 4, 2)
        assert remainder(text, result) == "w"

    def test_stops_at_first_non_digit_group(self) -> None:
        text = "134a.1.4.2w"
        result = parse_num(text)
        assert result[1] == Num.of(134)
        assert remainder(text, result) == "a.1.4.2w"

    def test_trailing_period_is_not_consumed(self) -> None:
        text = "1.2.;"
        result = parse_num(text)
        assert result[1] == Num.of(1, 2)
        assert remainder(text, result) == ".;"

    def test_date(self) -> None:
        assert parse_num("2021.04.07.12.00.00;")[1] == Num.of(2021, 4, 7, 12, 0, 0)

    def test_offset(self) -> None:
        assert parse_num("head 2.1;", 5) == (8, Num.of(2, 1))

    @pytest.mark.parametrize("text", ["", "not_number", "  1", ".1"])
    def test_failures(self, text: str) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_num(text)
        assert info.value.rules == ["digit", "Num"]
        assert info.value.offset == 0


class TestParseString:
    def test_empty(self) -> None:
        assert parse_string("@@") == (2, "")

    def test_plain(self) -> None:
        text = "@abc@xyz"
        result = parse_string(text)
        assert result[1] == "abc"
        assert remainder(text, result) == "xyz"

    def test_escaped_at(self) -> None:
        assert parse_string("@abc@@def@") == (10, "abc@def")
        assert parse_string("@@@@xyz")[1] == "@"
        assert parse_string("@abc@@def@@@@ghi@xyz")[1] == "abc@def@@ghi"

    def test_keeps_newlines(self) -> None:
        assert parse_string("@line one\nline two\n@")[1] == "line one\nline two\n"

    def test_unterminated_fails_at_end_of_input(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_string("@zzz")
        assert info.value.rules == ["tag", "string"]
        assert info.value.offset == 4
        assert info.value.frames[1].offset == 0

    @pytest.mark.parametrize("text", ["zzz", "zzz@", "zz@@z"])
    def test_must_open_with_at(self, text: str) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_string(text)
        assert info.value.rules == ["tag", "string"]
        assert info.value.offset == 0


class TestParseIntstring:
    def test_values(self) -> None:
        assert parse_intstring("@@") == (2, "")
        assert parse_intstring("@abc@xyz") == (5, "abc")

    def test_does_not_unescape(self) -> None:
        text = "@abc@@xyz@"
        result = parse_intstring(text)
        assert result[1] == "abc"
        assert remainder(text, result) == "@xyz@"

    def test_must_open_with_at(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_intstring("zzz")
        assert info.value.rules == ["tag", "intstring"]

    def test_unterminated(self) -> None:
        with pytest.raises(RcsLexicalError) as info:
            parse_intstring("@zzz")
        assert info.value.rules == ["take_until", "intstring"]
        assert info.value.offset == 1
