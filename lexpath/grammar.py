"""
Builds a :class:`lexpath.Path` from the tokens produced by ``lexpath.lexer``.

The grammar is an ordered choice with backtracking. In order, a path is::

    volume?  separator?  (text (separator text)*)?  separator?

where the volume is the first of these alternatives that matches:

1. ``\\\\?\\server\\share``  (verbatim UNC)
2. ``\\\\?\\C:``             (verbatim disk)
3. ``\\\\server\\share``     (UNC)
4. ``C:``                  (disk; the first character of the text is the letter)

The order matters: ``disk`` on its own would happily match the start of
inputs meant for the other three. The verbatim prefix is consumed and
dropped, so it does not survive a round trip through ``render``.

Every token has to be consumed, otherwise parsing fails as a whole.
"""
import logging

from lexpath import lexer
from lexpath.base import body_from_text
from lexpath.base import Disk
from lexpath.base import Path
from lexpath.base import UNC

logger = logging.getLogger(__name__)

VERBATIM_PREFIX = '\\\\?\\'


class _Parser(object):
    """Recursive-descent parser over a token list.

    Rule methods consume tokens and return a value, or return ``None``
    when they don't match. Rules run through :meth:`_attempt` leave the
    position untouched when they fail.
    """
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def _peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _attempt(self, rule):
        start = self.pos
        result = rule()
        if result is None:
            self.pos = start
        return result

    def _text(self):
        token = self._peek()
        if token is None or token.kind != lexer.TEXT:
            return None
        self.pos += 1
        return token.value

    def _punct(self, char):
        token = self._peek()
        if token is None or token.kind != lexer.PUNCT or token.value != char:
            return None
        self.pos += 1
        return char

    def _separator(self):
        token = self._peek()
        if token is None or not lexer.is_separator(token):
            return None
        self.pos += 1
        return token.value

    def _verbatim_prefix(self):
        for char in VERBATIM_PREFIX:
            if self._punct(char) is None:
                return None
        return VERBATIM_PREFIX

    def _server_share(self):
        server = self._text()
        if server is None or self._separator() is None:
            return None
        share = self._text()
        if share is None:
            return None
        return UNC(server, share)

    def _verbatim_unc(self):
        if self._verbatim_prefix() is None:
            return None
        return self._server_share()

    def _verbatim_disk(self):
        if self._verbatim_prefix() is None:
            return None
        return self._disk()

    def _unc(self):
        if self._punct('\\') is None or self._punct('\\') is None:
            return None
        return self._server_share()

    def _disk(self):
        text = self._text()
        if not text or self._punct(':') is None:
            return None
        return Disk(text[0])

    def volume(self):
        for rule in (self._verbatim_unc, self._verbatim_disk, self._unc, self._disk):
            result = self._attempt(rule)
            if result is not None:
                return result
        return None

    def _next_component(self):
        if self._separator() is None:
            return None
        return self._text()

    def body(self):
        text = self._text()
        if text is None:
            return []
        components = [body_from_text(text)]
        while True:
            text = self._attempt(self._next_component)
            if text is None:
                return components
            components.append(body_from_text(text))

    def path(self):
        volume = self.volume()
        has_root = self._separator() is not None
        body = self.body()
        has_trailing_separator = self._separator() is not None
        if self.pos != len(self.tokens):
            return None
        return Path(volume=volume,
                    has_root=has_root,
                    body=body,
                    has_trailing_separator=has_trailing_separator)


def parse(raw):
    """Parses ``raw`` into a :class:`lexpath.Path`.

    Returns:
        Path: The parsed path, or ``None`` if ``raw`` is not a valid path.
    """
    parser = _Parser(lexer.tokenize(raw))
    p = parser.path()
    if p is None:
        logger.debug('unexpected %r in %r (token %d of %d)',
                     parser.tokens[parser.pos].value, raw, parser.pos, len(parser.tokens))
    return p
