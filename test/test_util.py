#
# Copyright (c) 2006-2013, Prometheus Research, LLC
#


from sqllex.util import maybe, oneof, listof, urlquote, Hashable, Printable


def test_type_checks():
    assert isinstance(None, maybe(int))
    assert isinstance(1, maybe(int))
    assert not isinstance("1", maybe(int))
    assert isinstance("1", oneof(int, str))
    assert not isinstance(1.0, oneof(int, str))
    assert isinstance([1, 2], listof(int))
    assert isinstance([], listof(int))
    assert not isinstance([1, "2"], listof(int))
    assert not isinstance((1, 2), listof(int))


def test_urlquote():
    assert urlquote("tbl") == "tbl"
    assert urlquote("a;b") == "a%3Bb"
    assert urlquote("100%") == "100%25"
    assert urlquote("a\nb") == "a%0Ab"
    assert urlquote("a;b", "") == "a;b"


class Pair(Hashable, Printable):

    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        self.left = left
        self.right = right

    def __basis__(self):
        return (self.left, self.right)

    def __str__(self):
        return "%s:%s" % (self.left, self.right)


def test_hashable():
    assert Pair(1, 2) == Pair(1, 2)
    assert Pair(1, 2) != Pair(2, 1)
    assert hash(Pair(1, 2)) == hash(Pair(1, 2))
    assert Pair(Pair(1, 2), 3) == Pair(Pair(1, 2), 3)
    assert Pair(Pair(1, 2), 3) != Pair(Pair(1, 3), 3)
    assert repr(Pair(1, 2)) == "<Pair 1:2>"


