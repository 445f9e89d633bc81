"""Tests for quoted-printable decoding and escape unescaping."""

from imc import (
    Block,
    Property,
    decode_quoted_printable,
    unescape,
    unescape_block,
    unescape_value,
    wants_quoted_printable,
)
from imc.encoding import decode_value


class TestQuotedPrintable:
    def test_signaled_by_encoding_param(self):
        assert wants_quoted_printable({"ENCODING": ["QUOTED-PRINTABLE"]})

    def test_case_insensitive(self):
        assert wants_quoted_printable({"encoding": ["quoted-printable"]})

    def test_other_encodings_ignored(self):
        assert not wants_quoted_printable({"ENCODING": ["BASE64"]})
        assert not wants_quoted_printable({"TYPE": ["QUOTED-PRINTABLE"]})
        assert not wants_quoted_printable({})

    def test_decode(self):
        assert decode_quoted_printable("a=20b") == "a b"

    def test_decode_utf8_bytes(self):
        assert decode_quoted_printable("caf=C3=A9") == "café"

    def test_decode_with_charset(self):
        assert decode_quoted_printable("caf=E9", "ISO-8859-1") == "café"

    def test_unknown_charset_falls_back_to_utf8(self):
        assert decode_quoted_printable("a=20b", "X-BOGUS") == "a b"

    def test_decode_value_uses_charset_param(self):
        params = {"ENCODING": ["QUOTED-PRINTABLE"], "CHARSET": ["ISO-8859-1"]}
        assert decode_value(params, "caf=E9") == "café"

    def test_literal_characters_survive_charset(self):
        assert decode_quoted_printable("café =E9", "ISO-8859-1") == "café é"

    def test_literal_characters_survive_default_charset(self):
        assert decode_quoted_printable("café =C3=A9") == "café é"

    def test_decode_value_untouched_without_signal(self):
        assert decode_value({}, "a=20b") == "a=20b"


class TestUnescape:
    def test_all_sequences(self):
        assert unescape(r"a\;b\,c\:d\ne") == "a;b,c:d\ne"

    def test_backslash_before_escape_not_protected(self):
        assert unescape(r"a\\;b") == r"a\;b"

    def test_nested_values(self):
        assert unescape_value([[r"a\,b", [r"c\;d"]]]) == [["a,b", ["c;d"]]]

    def test_non_string_leaves_untouched(self):
        assert unescape_value([[1, None]]) == [[1, None]]

    def test_block_walk_reaches_nested_blocks(self):
        inner = Block()
        inner.add("NOTE", Property(value=[[r"x\;y"]]))
        outer = Block()
        outer.add("VCARD", inner)
        outer.add("FN", Property(params={"X": [r"p\;q"]}, value=[[r"a\,b"]]))

        unescape_block(outer)

        assert outer["VCARD"][0]["NOTE"][0].value == [["x;y"]]
        assert outer["FN"][0].value == [["a,b"]]
        assert outer["FN"][0].params == {"X": [r"p\;q"]}
