#
# Copyright (c) 2006-2013, Prometheus Research, LLC
#


from ..util import Hashable, Printable, YAMLable, maybe
from ..error import Mark
import urllib.parse


class Token(Hashable, Printable, YAMLable):
    """
    A lexical token.

    `code`: ``str``
        The token type indicator; for punctuation characters, coincides
        with the token value.

    `text`: ``str``
        The token value: the keyword kind for ``KEYWORD`` tokens, the
        lowercased name for ``IDENT`` tokens, the raw contents for ``STRING``
        and ``NUMBER`` tokens.

    `mark`: :class:`.Mark` or ``None``
        The lexeme in the input; not a part of the token value.

    Tokens compare by `code` and `text` only.
    """

    __slots__ = ('code', 'text', 'mark')

    def __init__(self, code, text, mark=None):
        assert isinstance(code, str) and code
        assert isinstance(text, str)
        assert isinstance(mark, maybe(Mark))
        self.code = code
        self.text = text
        self.mark = mark

    def __basis__(self):
        return (self.code, self.text)

    def is_keyword(self, kind=None):
        """
        Checks if the token is a keyword, optionally of the given kind.
        """
        assert isinstance(kind, maybe(str))
        return (self.code == KEYWORD and
                (kind is None or self.text == kind))

    def is_symbol(self, symbol=None):
        """
        Checks if the token is a punctuation character, optionally
        the given one.
        """
        assert isinstance(symbol, maybe(str))
        return (not self.code.isalpha() and
                (symbol is None or self.code == symbol))

    def __str__(self):
        # '`<code>`' or '%<code>:<text>'
        chunks = []
        if self.code.isalpha():
            chunks.append("%"+self.code)
        else:
            chunks.append("`%s`" % self.code.replace("`", "``"))
        if self.code.isalpha() or self.text != self.code:
            chunks.append(":")
            chunks.append(urllib.parse.quote(self.text, safe=''))
        return "".join(chunks)

    def __yaml__(self):
        yield ('code', self.code)
        if self.code.isalpha() or self.code != self.text:
            yield ('text', self.text)


#
# Token codes recognized by the tokenizer.
#

# A reserved word; the token text is one of the keyword kinds below.
KEYWORD = 'KEYWORD'

# A name that is not a reserved word, in lower case.
IDENT = 'IDENT'

# A sequence of characters enclosed in single quotes.
STRING = 'STRING'

# An unsigned number, possibly with a decimal point.
NUMBER = 'NUMBER'

# Punctuation and operator characters.  The token code coincides
# with the token value.
SYMBOLS = [
    # arithmetic operators
    '+', '-', '*', '/',

    # punctuation
    '(', ')', ',', ';',
]


#
# Keyword kinds.
#

CREATE = 'CREATE'
TABLE = 'TABLE'
TRUE = 'TRUE'
FALSE = 'FALSE'
PRIMARY = 'PRIMARY'
KEY = 'KEY'
# A 4-byte integer type; spelled `INT` or `INTEGER`.
INT4 = 'INT4'

# Mapping from an uppercase spelling to a keyword kind.
KEYWORDS = {
    'CREATE': CREATE,
    'TABLE': TABLE,
    'TRUE': TRUE,
    'FALSE': FALSE,
    'PRIMARY': PRIMARY,
    'KEY': KEY,
    'INT': INT4,
    'INTEGER': INT4,
}


def to_keyword(text, keywords=KEYWORDS):
    """
    Finds the keyword kind for a name.

    `text`: ``str``
        A name in any letter case.

    `keywords`: ``dict``
        Mapping from uppercase spellings to keyword kinds.

    *Returns*: ``str`` or ``None``
        The keyword kind; ``None`` if `text` is not a reserved word.
    """
    assert isinstance(text, str)
    return keywords.get(text.upper())


