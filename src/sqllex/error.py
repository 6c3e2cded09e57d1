#
# Copyright (c) 2006-2012, Prometheus Research, LLC
#


from .util import Printable, maybe, oneof, listof, urlquote


#
# Error paragraphs.
#


class Paragraph(Printable):
    """
    A block of an error message.
    """

    def __init__(self, message):
        assert isinstance(message, str)
        self.message = message

    def __str__(self):
        return self.message


class PointerPara(Paragraph):
    """
    An error paragraph followed by an excerpt of the input with the marked
    fragment underlined.
    """

    def __init__(self, message, mark):
        super(PointerPara, self).__init__(message)
        assert isinstance(mark, Mark)
        self.mark = mark

    def __str__(self):
        if not self.mark:
            return self.message
        lines = self.mark.excerpt()
        pointer = "\n".join("    "+line for line in lines)
        return "%s:\n%s" % (self.message, pointer)


#
# Input fragments.
#


class Mark(Printable):
    """
    A fragment of an SQL source.

    `text`: ``str``
        The input SQL string.

    `start`: ``int``
        The starting position of the fragment.

    `end`: ``int``
        The ending position of the fragment.

    A :class:`Mark` object represents a fragment of the input to be
    used as an error context for error reporting.
    """

    def __init__(self, text, start, end):
        # Sanity check on the arguments.
        assert isinstance(text, str)
        assert isinstance(start, int)
        assert isinstance(end, int)
        assert 0 <= start <= end <= len(text)

        self.text = text
        self.start = start
        self.end = end

    @property
    def fragment(self):
        """
        The marked slice of the input.
        """
        return self.text[self.start:self.end]

    def excerpt(self):
        """
        Returns a list of lines that forms an excerpt of the original SQL
        string with ``^`` characters underlining the marked fragment.
        """
        if not self.text:
            return []
        # Find the line that contains the mark.
        excerpt_start = self.text.rfind('\n', 0, self.start)+1
        excerpt_end = self.text.find('\n', excerpt_start)
        if excerpt_end == -1:
            excerpt_end = len(self.text)

        # Assuming that the mark could be multiline, find the
        # beginning and the end of the mark in the selected excerpt.
        pointer_start = max(self.start, excerpt_start)
        pointer_end = min(self.end, excerpt_end)

        # The lengths of the indent and the underline.
        pointer_indent = pointer_start - excerpt_start
        pointer_length = pointer_end - pointer_start

        # Generate the excerpt and the pointer lines.
        lines = []
        lines.append(self.text[excerpt_start:excerpt_end])
        lines.append(' '*pointer_indent + '^'*max(pointer_length, 1))
        return lines

    def __str__(self):
        return "\n".join(self.excerpt())

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__,
                            urlquote(self.fragment, ''))

    def __bool__(self):
        return bool(self.text)


def get_mark(node):
    """
    Returns the mark of a token (or another node with a `mark` attribute);
    ``None`` if the node has no mark.
    """
    if isinstance(node, Mark):
        return node
    return getattr(node, 'mark', None)


#
# Errors.
#


class Error(Exception):
    """
    An error with a message composed of paragraphs.

    The first paragraph describes the problem; the following ones are added
    with :meth:`wrap` and give its context.
    """

    def __init__(self, *paragraphs):
        paragraphs = list(paragraphs)
        assert isinstance(paragraphs, listof(oneof(str, Paragraph)))
        self.paragraphs = [paragraph if isinstance(paragraph, Paragraph)
                           else Paragraph(paragraph)
                           for paragraph in paragraphs]

    @property
    def message(self):
        """
        The message of the leading paragraph.
        """
        if not self.paragraphs:
            return ""
        return self.paragraphs[0].message

    def wrap(self, *paragraphs):
        self.paragraphs.extend(paragraph if isinstance(paragraph, Paragraph)
                               else Paragraph(paragraph)
                               for paragraph in paragraphs)

    def __str__(self):
        return "\n".join(str(paragraph) for paragraph in self.paragraphs)

    def __repr__(self):
        if not self.paragraphs:
            return "<%s>" % self.__class__.__name__
        return "<%s: %s>" % (self.__class__.__name__,
                             self.paragraphs[0].message)


class LexError(Error):
    """
    Failure to classify the input at the tokenizer head.
    """


class UnterminatedStringError(LexError):
    """
    A string literal is not closed before the end of input.
    """

    def __init__(self, *paragraphs):
        if not paragraphs:
            paragraphs = ("Cannot find a matching quote mark",)
        super(UnterminatedStringError, self).__init__(*paragraphs)


class UnexpectedCharacterError(LexError):
    """
    A character that starts no lexeme.

    `character`: ``str``
        The offending character.
    """

    def __init__(self, character, *paragraphs):
        assert isinstance(character, str) and len(character) == 1
        if not paragraphs:
            paragraphs = ("Got unexpected character %r" % character,)
        super(UnexpectedCharacterError, self).__init__(*paragraphs)
        self.character = character


#
# Error context.
#


class ErrorGuard(object):
    # Adds the given paragraphs to any `Error` escaping the block.

    def __init__(self, *paragraphs):
        self.paragraphs = paragraphs

    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc_value, exc_traceback):
        if isinstance(exc_value, Error):
            exc_value.wrap(*self.paragraphs)


class PointerErrorGuard(object):
    # Adds a pointer paragraph to any `Error` escaping the block unless
    # the error already points into the same input.

    def __init__(self, message, mark):
        assert isinstance(message, str)
        self.message = message
        mark = get_mark(mark)
        assert isinstance(mark, maybe(Mark))
        self.mark = mark

    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc_value, exc_traceback):
        if not isinstance(exc_value, Error):
            return
        if not self.mark:
            return
        if any(paragraph.mark.text == self.mark.text
               for paragraph in exc_value.paragraphs
               if isinstance(paragraph, PointerPara)):
            return
        exc_value.wrap(PointerPara(self.message, self.mark))


def scan_guard(mark):
    return PointerErrorGuard("While tokenizing", mark)


