"""
Splits a raw path string into text runs and punctuation tokens.

The only characters with meaning to the grammar are the two separators,
the drive colon and the question mark of the verbatim prefix. Everything
between them is a ``TEXT`` token, matched greedily, so consecutive text
is always a single token and never empty.
"""
from collections import namedtuple
import re

TEXT = 'text'
PUNCT = 'punct'

PUNCTUATION = '/\\:?'

Token = namedtuple('Token', ['kind', 'value'])

_TOKEN_RE = re.compile(r'(?P<text>[^/\\:?]+)|(?P<punct>[/\\:?])')


def is_separator(token):
    return token.kind == PUNCT and token.value in '/\\'


def tokenize(raw):
    """Tokenizes ``raw``.

    Every character is either punctuation or part of a text run, so any
    string tokenizes and joining the token values gives ``raw`` back.

    Args:
        raw (str): The path string.

    Returns:
        List[Token]: The tokens in order. The empty string gives an empty list.
    """
    return [Token(match.lastgroup, match.group(match.lastgroup))
            for match in _TOKEN_RE.finditer(raw)]
