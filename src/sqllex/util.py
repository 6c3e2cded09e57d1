#
# Copyright (c) 2006-2013, Prometheus Research, LLC
#


import re
import yaml


#
# Type checking helpers.
#


class maybe(object):
    """
    Checks if a value is either ``None`` or an instance of the specified type.

    Use with ``isinstance()`` as in::

        isinstance(X, maybe(T))
    """

    def __init__(self, value_type):
        self.value_type = value_type

    def __instancecheck__(self, value):
        return (value is None or isinstance(value, self.value_type))


class oneof(object):
    """
    Checks if a value is an instance of one of the specified types.

    Use with ``isinstance()`` as in::

        isinstance(X, oneof(T1, T2, ...))
    """

    def __init__(self, *value_types):
        self.value_types = value_types

    def __instancecheck__(self, value):
        for value_type in self.value_types:
            if isinstance(value, value_type):
                return True
        return False


class listof(object):
    """
    Checks if a value is a list containing elements of the specified type.

    Use with ``isinstance()`` as in::

        isinstance(X, listof(T))
    """

    def __init__(self, item_type):
        self.item_type = item_type

    def __instancecheck__(self, value):
        if not isinstance(value, list):
            return False
        item_type = self.item_type
        for item in value:
            if not isinstance(item, item_type):
                return False
        return True


#
# Text utilities.
#


def urlquote(text, reserved=";/?:@&=+$,"):
    """
    Replaces non-printable and reserved characters with ``%XX`` sequences.
    """
    assert isinstance(text, str)
    text = re.sub(r"[\x00-\x1F%%\x7F%s]" % re.escape(reserved),
                  (lambda m: "%%%02X" % ord(m.group())),
                  text)
    return text


#
# Base classes for value objects.
#


class Hashable(object):
    """
    An immutable object with by-value comparison semantics.

    A subclass of :class:`Hashable` should reimplement :meth:`__basis__`
    to produce a tuple of all object attributes which uniquely identify
    the object.

    Two :class:`Hashable` instances are considered equal if they are of
    the same type and their basis vectors are equal.
    """

    __slots__ = ('_basis', '_hash', '__weakref__')

    def __hash__(self):
        try:
            return self._hash
        except AttributeError:
            self._rehash()
            return self._hash

    def __basis__(self):
        """
        Returns a vector of values uniquely identifying the object.
        """
        raise NotImplementedError()

    def _rehash(self):
        # Calculate the object hash and the basis vector.
        _basis = self.__basis__()
        if isinstance(_basis, tuple):
            _basis = tuple((element.__class__, hash(element), element._basis)
                           if isinstance(element, Hashable) else element
                           for element in _basis)
        self._basis = _basis
        self._hash = hash(_basis)

    def __eq__(self, other):
        # Start with cheap identity and type checks.
        if self is other:
            return True
        if not (isinstance(other, Hashable) and
                self.__class__ is other.__class__):
            return False
        return (hash(self) == hash(other) and self._basis == other._basis)

    def __ne__(self, other):
        # Since we override `==`, we also need to override `!=`.
        if self is other:
            return False
        return not (self == other)


class Printable(object):
    """
    An object with default string representation.

    A subclass of :class:`Printable` is expected to reimplement the
    :meth:`__str__` method.
    """

    __slots__ = ()

    def __str__(self):
        # Override in subclasses.
        return "-"

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self)


class YAMLable(object):
    """
    An object with YAML representation.

    Subclasses of :class:`YAMLable` must override :meth:`__yaml__` to generate
    a list of ``(field, value)`` pairs.
    """

    __slots__ = ()

    def to_yaml(self):
        """
        Returns YAML representation of the object.
        """
        return to_yaml(self)

    def __yaml__(self):
        # Override in subclasses.
        return []


class YAMLableDumper(yaml.SafeDumper):
    # Serializer for `YAMLable` instances.

    def represent_str(self, data):
        # Use block style for multiline strings.
        style = None
        if data.endswith('\n'):
            style = '|'
        return self.represent_scalar('tag:yaml.org,2002:str', data,
                                     style=style)

    def represent_yamlable(self, data):
        # Represent `YAMLable` objects.
        tag = '!'+data.__class__.__name__
        mapping = list(data.__yaml__())
        # Use block style if any field value is a multiline string.
        flow_style = None
        if any(isinstance(item, str) and '\n' in item
                for key, item in mapping):
            flow_style = False
        return self.represent_mapping(tag, mapping, flow_style=flow_style)

    def ignore_aliases(self, data):
        # Equal tokens are distinct lexemes; never collapse them into anchors.
        return True


YAMLableDumper.add_representer(str, YAMLableDumper.represent_str)
YAMLableDumper.add_multi_representer(YAMLable,
        YAMLableDumper.represent_yamlable)


def to_yaml(data):
    """
    Represents the value in YAML format.
    """
    return yaml.dump(data, Dumper=YAMLableDumper, sort_keys=False,
                     allow_unicode=True)


