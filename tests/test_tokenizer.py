import pytest

from curlparse.exceptions import CurlSyntaxError, UnterminatedQuote
from curlparse.tokenizer import Token, split, tokenize


class TestToken:
    def test_eq(self):
        assert Token("a", 0) == Token("a", 0, quoted=False)
        assert Token("a", 0) != Token("a", 1)
        assert Token("a", 0) != Token("a", 0, quoted=True)
        assert Token("a", 0) != "a"

    def test_hash(self):
        assert len({Token("a", 0), Token("a", 0), Token("b", 2)}) == 2

    def test_repr(self):
        assert repr(Token("-X", 5)) == "Token(value='-X', offset=5, quoted=False)"

    def test_immutable(self):
        token = tokenize("curl http://a")[0]
        with pytest.raises(TypeError):
            token.value = "http://b"
        with pytest.raises(TypeError):
            del token.offset
        assert token == Token("http://a", 5)
        assert hash(token) == hash(Token("http://a", 5))

    def test_is_option(self):
        assert Token("-X", 0).is_option()
        assert Token("--request", 0).is_option()
        assert Token("--", 0).is_option()
        assert not Token("-", 0).is_option()
        assert not Token("", 0).is_option()
        assert not Token("http://example.com", 0).is_option()


class TestTokenize:
    def test_end_to_end(self):
        text = "curl 'http://example.com' -X GET -H 'Accept: application/json'"
        assert tokenize(text) == [
            Token("http://example.com", 5, quoted=True),
            Token("-X", 26),
            Token("GET", 29),
            Token("-H", 33),
            Token("Accept: application/json", 36, quoted=True),
        ]

    def test_whitespace_runs(self):
        assert split("  a \t\t b\t c  ") == ["a", "b", "c"]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   \t ") == []

    def test_strips_program_name(self):
        assert split("curl http://example.com") == ["http://example.com"]
        assert split("CURL http://example.com") == ["http://example.com"]
        assert split("Curl") == []

    def test_program_name_is_optional(self):
        assert split("-X GET http://example.com") == ["-X", "GET", "http://example.com"]

    def test_quoted_program_name_is_kept(self):
        assert split("'curl' http://example.com") == ["curl", "http://example.com"]

    def test_program_name_only_stripped_first(self):
        assert split("http://example.com curl") == ["http://example.com", "curl"]
        assert split("curl curl") == ["curl"]

    @pytest.mark.parametrize(
        "value",
        [
            "http://example.com/?a=1&b=2",
            "hello world",
            "  padded  ",
            "tab\there",
            "-X",
            "curl",
            "",
        ],
    )
    def test_quoting_round_trip(self, value):
        assert tokenize(f"'{value}'") == [Token(value, 0, quoted=True)]
        assert tokenize(f'"{value}"') == [Token(value, 0, quoted=True)]

    def test_single_quotes_are_literal(self):
        assert split(r"'a\"b\\c $x'") == ['a\\"b\\\\c $x']

    def test_double_quote_escapes(self):
        assert split(r'"a\"b\\c\d"') == ['a"b\\c\\d']
        assert split(r'"\$HOME \`cmd\`"') == ["$HOME `cmd`"]

    def test_double_quotes_keep_single_quotes(self):
        assert split("\"it's\"") == ["it's"]

    def test_backslash_outside_quotes(self):
        assert split(r"a\ b c") == ["a b", "c"]
        assert split(r"\'quoted\'") == ["'quoted'"]

    def test_trailing_backslash(self):
        assert split("a \\") == ["a", "\\"]

    def test_juxtaposition(self):
        assert tokenize("a'b'c") == [Token("abc", 0, quoted=True)]
        assert tokenize("x a'b'\"c\"d") == [
            Token("x", 0),
            Token("abcd", 2, quoted=True),
        ]

    def test_empty_quotes(self):
        assert tokenize("a '' b") == [
            Token("a", 0),
            Token("", 2, quoted=True),
            Token("b", 5),
        ]
        assert tokenize('""') == [Token("", 0, quoted=True)]

    def test_line_continuation(self):
        text = "curl 'http://example.com' \\\n  -H 'Accept: */*' \\\r\n  --compressed"
        assert split(text) == ["http://example.com", "-H", "Accept: */*", "--compressed"]

    def test_line_continuation_inside_word(self):
        assert split("ab\\\ncd") == ["abcd"]
        assert split('"ab\\\ncd"') == ["abcd"]

    def test_newlines_separate_words(self):
        assert split("a\nb\r\nc") == ["a", "b", "c"]

    def test_offsets_count_code_points(self):
        assert tokenize("curl -H 'X: \u00e9t\u00e9' http://a")[2].offset == 17

    def test_offsets_are_word_starts(self):
        text = "curl  -H   'A: 1'"
        assert [token.offset for token in tokenize(text)] == [6, 11]


class TestUnterminatedQuote:
    def test_single_quote_offset(self):
        text = "curl 'http://example.com -X GET"
        with pytest.raises(UnterminatedQuote) as excinfo:
            tokenize(text)
        assert excinfo.value.offset == 5
        assert excinfo.value.quote == "'"
        assert text[excinfo.value.offset] == "'"

    def test_double_quote_offset(self):
        text = 'curl http://example.com -H "Accept: */*'
        with pytest.raises(UnterminatedQuote) as excinfo:
            tokenize(text)
        assert excinfo.value.offset == 27
        assert excinfo.value.quote == '"'

    def test_escaped_closing_quote(self):
        with pytest.raises(UnterminatedQuote) as excinfo:
            tokenize('x "abc\\"')
        assert excinfo.value.offset == 2

    def test_quote_inside_word(self):
        with pytest.raises(UnterminatedQuote) as excinfo:
            tokenize("curl abc'def")
        assert excinfo.value.offset == 8

    def test_is_a_syntax_error(self):
        with pytest.raises(CurlSyntaxError):
            tokenize("'")
        with pytest.raises(ValueError, match="unterminated ' quote at offset 0"):
            tokenize("'")
