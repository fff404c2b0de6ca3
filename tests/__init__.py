"""
tests: this package contains all curlparse unittests
"""

from curlparse.tokenizer import Token


def tokens(*values: str) -> list[Token]:
    """Build unquoted tokens from *values*, with offsets as if they were
    joined by single spaces"""
    result: list[Token] = []
    offset = 0
    for value in values:
        result.append(Token(value, offset))
        offset += len(value) + 1
    return result
