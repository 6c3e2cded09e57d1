#
# Copyright (c) 2006-2012, Prometheus Research, LLC
#


"""
The :mod:`sqllex.syn` package defines the lexical syntax of SQL.

* :mod:`.token` describes lexical tokens: token codes, keyword kinds
  and punctuation characters.
* :mod:`.scan` converts a stream of characters to a sequence of tokens.
"""


from . import scan, token


