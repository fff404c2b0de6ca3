import json

from curlparse.utils.test import get_testenv
from tests.utils.cmdline import proc


class TestParseCommand:
    def test_json_output(self):
        ret, out, _ = proc(
            "parse",
            "curl 'http://example.com' -H 'Accept: */*' -d a=1 --compressed --foo",
        )
        assert ret == 0
        result = json.loads(out)
        assert result["url"] == "http://example.com"
        assert result["method"] is None
        assert result["headers"] == [["Accept", "*/*"]]
        assert result["data"] == ["a=1"]
        assert result["flags"] == ["compressed"]
        assert result["unrecognized"] == [{"value": "--foo", "offset": 63}]

    def test_output_indent_setting(self):
        _, out, _ = proc(
            "parse", "-s", "PARSE_OUTPUT_INDENT=4", "curl http://example.com"
        )
        assert '\n    "url": "http://example.com"' in out

    def test_table_output(self):
        ret, out, _ = proc("parse", "--format", "table", "curl -X PUT http://example.com")
        assert ret == 0
        assert "Field" in out
        assert '"PUT"' in out
        assert '"http://example.com"' in out
        assert "cookie_jar" not in out

    def test_table_output_from_setting(self):
        _, out, _ = proc(
            "parse", "-s", "PARSE_OUTPUT_FORMAT=table", "curl http://example.com"
        )
        assert "Field" in out

    def test_invalid_format(self):
        ret, _, err = proc("parse", "-f", "xml", "curl http://example.com")
        assert ret == 2
        assert "Unrecognized output format 'xml'" in err

    def test_stdin(self):
        ret, out, _ = proc(
            "parse", "-", input="curl http://example.com \\\n  -X DELETE\n"
        )
        assert ret == 0
        assert json.loads(out)["method"] == "DELETE"

    def test_syntax_error(self):
        ret, out, err = proc("parse", "curl 'http://example.com -X GET")
        assert ret == 1
        assert out == ""
        assert "error: unterminated ' quote at offset 5" in err
        assert "curl 'http://example.com -X GET\n     ^" in err

    def test_missing_argument(self):
        ret, _, err = proc("parse", "curl http://example.com -H")
        assert ret == 1
        assert "error: option -H requires an argument" in err

    def test_missing_url(self):
        ret, _, err = proc("parse", "curl -v -k")
        assert ret == 1
        assert "error: no URL specified" in err

    def test_strict(self):
        ret, _, err = proc("parse", "--strict", "curl --foo http://example.com")
        assert ret == 1
        assert "error: unknown option --foo at offset 5" in err
        assert "curl --foo http://example.com\n     ^" in err

    def test_strict_from_environment(self):
        env = get_env(CURLPARSE_CURL_STRICT_OPTIONS="1")
        ret, _, err = proc("parse", "curl --foo http://example.com", env=env)
        assert ret == 1
        assert "unknown option --foo" in err

    def test_no_command(self):
        ret, out, _ = proc("parse")
        assert ret == 2
        assert "Usage" in out

    def test_too_many_arguments(self):
        ret, _, err = proc("parse", "curl", "http://example.com")
        assert ret == 2
        assert "it is only possible to pass one cURL command" in err

    def test_debug_logging(self):
        ret, _, err = proc(
            "parse", "--loglevel", "DEBUG", "curl --foo http://example.com"
        )
        assert ret == 0
        assert "Unrecognized curl option --foo at offset 5" in err
        assert "started" in err


def get_env(**extra):
    env = get_testenv()
    env.update(extra)
    return env
