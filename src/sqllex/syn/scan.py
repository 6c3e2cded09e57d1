#
# Copyright (c) 2006-2012, Prometheus Research, LLC
#


from ..util import Printable, maybe
from ..error import (Mark, LexError, UnterminatedStringError,
        UnexpectedCharacterError, scan_guard)
from .token import (Token, KEYWORD, IDENT, STRING, NUMBER, SYMBOLS, KEYWORDS,
        to_keyword)
import re
import regex
import logging


log = logging.getLogger(__name__)


class Tokenizer(Printable):
    """
    Converts SQL text to a lazy sequence of tokens.

    `text`: ``str``
        A raw SQL string.

    A tokenizer is an iterator: each call of ``next()`` scans one lexeme
    and returns a :class:`.Token`, raises :exc:`.LexError` if the input
    at the head cannot be classified, or raises ``StopIteration`` at the end
    of input.  After an error, the tokenizer is exhausted.  A tokenizer
    cannot be rewound; create a new one to scan the text again.

    Subclasses may override the patterns and tables below to recognize
    a different lexical syntax.
    """

    # Characters to skip over between tokens.
    space_regexp = re.compile(r"\s+", re.U)

    # A sequence of characters enclosed in single quotes; no escapes.
    string_regexp = re.compile(r"['] (?P<value> [^']* ) [']", re.X|re.U)

    # An unsigned number; a trailing dot is allowed.
    number_regexp = re.compile(r"[0-9]+ (?: [.] [0-9]* )?", re.X)

    # A character that starts a name: any Unicode alphabetic character.
    letter_regexp = regex.compile(r"\p{Alphabetic}")

    # A name: an alphabetic character followed by alphabetic, numeric
    # and `_` characters.
    name_regexp = regex.compile(r"\p{Alphabetic} [\p{Alphabetic}\p{N}_]*",
                                regex.X)

    # Reserved words.
    keywords = KEYWORDS

    # Punctuation characters.
    symbols = SYMBOLS

    def __init__(self, text):
        assert isinstance(text, str)
        # The input text.
        self.text = text
        # The head of the input.
        self.index = 0
        # Set when the end of input or an error is reached.
        self.is_done = False
        # A token scanned by `peek()` but not yet returned.
        self.lookahead = None

    @property
    def is_exhausted(self):
        """
        ``True`` if no more tokens could be produced.
        """
        return (self.is_done and self.lookahead is None)

    def __iter__(self):
        return self

    def __next__(self):
        # Return the token scanned by `peek()` first.
        if self.lookahead is not None:
            token = self.lookahead
            self.lookahead = None
            return token
        if self.is_done:
            raise StopIteration
        try:
            token = self.scan()
        except LexError as exc:
            self.is_done = True
            log.debug("tokenizer stopped at position %s: %s",
                      self.index, exc.message)
            raise
        if token is None:
            self.is_done = True
            raise StopIteration
        return token

    def peek(self):
        """
        Returns the next token without consuming it.

        *Returns*: :class:`.Token` or ``None``
            The next token; ``None`` at the end of input.
        """
        if self.lookahead is None:
            try:
                self.lookahead = next(self)
            except StopIteration:
                return None
        return self.lookahead

    def skip(self):
        # Advance over whitespace characters.
        match = self.space_regexp.match(self.text, self.index)
        if match is not None:
            self.index = match.end()

    def scan(self):
        """
        Scans the next lexeme.

        *Returns*: :class:`.Token` or ``None``
            The next token; ``None`` at the end of input.
        """
        self.skip()
        if self.index >= len(self.text):
            return None
        # Pick the rule by the first character.
        char = self.text[self.index]
        if char == "'":
            return self.scan_string()
        if '0' <= char <= '9':
            return self.scan_number()
        if self.letter_regexp.match(self.text, self.index) is not None:
            return self.scan_name()
        return self.scan_symbol()

    def scan_string(self):
        start = self.index
        match = self.string_regexp.match(self.text, start)
        if match is None:
            mark = Mark(self.text, start, len(self.text))
            with scan_guard(mark):
                raise UnterminatedStringError()
        return self.emit(STRING, match.group('value'), match.end())

    def scan_number(self):
        match = self.number_regexp.match(self.text, self.index)
        assert match is not None
        return self.emit(NUMBER, match.group(), match.end())

    def scan_name(self):
        match = self.name_regexp.match(self.text, self.index)
        assert match is not None
        block = self.text[self.index:match.end()]
        kind = to_keyword(block, self.keywords)
        if kind is not None:
            return self.emit(KEYWORD, kind, match.end())
        return self.emit(IDENT, block.lower(), match.end())

    def scan_symbol(self):
        char = self.text[self.index]
        if char not in self.symbols:
            # The character is left at the head.
            mark = Mark(self.text, self.index, self.index+1)
            with scan_guard(mark):
                raise UnexpectedCharacterError(char)
        return self.emit(char, char, self.index+1)

    def emit(self, code, text, end):
        # Generate a token for the lexeme between the head and `end`
        # and advance the head.
        assert isinstance(end, int) and self.index < end <= len(self.text)
        token = Token(code, text, Mark(self.text, self.index, end))
        self.index = end
        return token

    def __str__(self):
        return "%s/%s" % (self.index, len(self.text))


def tokenize(text, tokenizer_class=None):
    """
    Tokenizes the input SQL string.

    `text`: ``str``
        A raw SQL string.

    `tokenizer_class`: subclass of :class:`Tokenizer` or ``None``
        The tokenizer to use; :class:`Tokenizer` by default.

    *Returns*: [:class:`.Token`]
        List of tokens.

    Raises :exc:`.LexError` on the first lexeme that cannot be classified.
    """
    assert isinstance(tokenizer_class, maybe(type))
    if tokenizer_class is None:
        tokenizer_class = Tokenizer
    assert issubclass(tokenizer_class, Tokenizer)
    tokens = list(tokenizer_class(text))
    log.debug("scanned %s tokens", len(tokens))
    return tokens


