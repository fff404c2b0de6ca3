from curlparse.exceptions import (
    CurlSyntaxError,
    MissingArgument,
    MissingUrl,
    UnknownOption,
    UnterminatedQuote,
    UsageError,
)


class TestCurlSyntaxError:
    def test_hierarchy(self):
        for exc in (
            UnterminatedQuote("'", 0),
            MissingArgument("-X", 0),
            MissingUrl(),
            UnknownOption("--foo", 0),
        ):
            assert isinstance(exc, CurlSyntaxError)
            assert isinstance(exc, ValueError)

    def test_attributes(self):
        exc = MissingArgument("-H", 14)
        assert exc.flag == exc.token == "-H"
        assert exc.offset == 14
        assert str(exc) == "option -H requires an argument"

    def test_missing_url_has_no_offset(self):
        exc = MissingUrl()
        assert exc.offset is None
        assert exc.pointer("curl -v") == ""

    def test_pointer(self):
        text = "curl 'http://example.com -X GET"
        assert UnterminatedQuote("'", 5).pointer(text) == (
            "curl 'http://example.com -X GET\n"
            "     ^"
        )

    def test_pointer_multiline(self):
        text = "curl http://example.com \\\n  -H"
        assert MissingArgument("-H", 28).pointer(text) == "  -H\n  ^"

    def test_pointer_at_end_of_line(self):
        text = "curl http://x --bar\nnext"
        assert UnknownOption("--bar", 14).pointer(text) == "curl http://x --bar\n              ^"


class TestUsageError:
    def test_print_help(self):
        assert UsageError().print_help
        assert not UsageError("bad", print_help=False).print_help
        assert str(UsageError("bad", print_help=False)) == "bad"
