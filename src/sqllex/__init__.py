#
# Copyright (c) 2006-2012, Prometheus Research, LLC
#


"""
:mod:`sqllex`
=============

This package provides a lexical analyzer for SQL.

To convert an SQL string to a list of tokens, run::

    >>> from sqllex import tokenize
    >>> tokens = tokenize("create table tbl (a int primary key);")

To scan the input lazily, one token at a time, iterate over a tokenizer::

    >>> from sqllex import Tokenizer
    >>> for token in Tokenizer(text):
    ...     print(token)

A lexeme that cannot be classified raises :exc:`sqllex.error.LexError`.
"""


__version__ = '1.0.0'
__copyright__ = """Copyright (c) 2006-2012, Prometheus Research, LLC"""
__license__ = """
This is free software: you are free to change and redistribute it.
There is NO WARRANTY, to the extent permitted by law.
"""
__legal__ = """\
SQLLex %(__version__)s
%(__copyright__)s
%(__license__)s""" % vars()


import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


from .error import LexError
from .syn.token import Token
from .syn.scan import Tokenizer, tokenize
