r"""
Golf option specifications: value kinds, storage cells and options.

Overview
- Kind: the four value kinds an option can carry.
  • INTEGER  → signed 64-bit integer, decimal text with optional sign.
  • UNSIGNED → unsigned 64-bit integer, decimal text with optional '+'.
  • BOOLEAN  → presence-only switch, never decoded from text.
  • STRING   → any text, stored verbatim (empty allowed).
- Cell[_T]: the caller-owned storage of one option. Every write goes through
  the option kind, so a cell never holds a value of the wrong type.
- Option[_T]: one registered flag (short and/or long name, kind, cell, default,
  description). Attributes are read-only once built.

Names (validated on construction)
- short: None or one character other than '-', '=' or whitespace.
- long: None or a non-empty word without whitespace or '=', not starting with '-'.
- at least one of them must be given.

Quick example:
    >>> from golf.options import Kind, Option
    >>> limit = Option("l", "limit", Kind.INTEGER, 0, "limit results")
    >>> limit.names
    ('-l', '--limit')
    >>> limit.cell.value = Kind.INTEGER.decode("4")
    >>> limit.cell.value
    4
"""
import functools
import operator
import re
from enum import Enum

from rich.text import Text

from .utils import *

_INTEGER = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")

_BOUNDS = {
    "integer": (-2 ** 63, 2 ** 63 - 1),
    "unsigned integer": (0, 2 ** 64 - 1),
}


class Kind(Enum):
    """
    value kind of an option.

    each member knows
    - default: the zero value used when no default is supplied.
    - check(object): validate a Python value written into a cell.
    - decode(text): turn a raw command-line string into a Python value.
    """
    INTEGER = "integer"
    UNSIGNED = "unsigned integer"
    BOOLEAN = "boolean"
    STRING = "string"

    @property
    def default(self):
        match self:
            case Kind.INTEGER | Kind.UNSIGNED:
                return 0
            case Kind.BOOLEAN:
                return False
            case Kind.STRING:
                return ""

    def check(self, object, /):
        """
        validate a Python value for a cell of this kind and return it.

        raises
        - TypeError: wrong Python type (bool is never accepted as an integer).
        - ValueError: integer outside the kind's 64-bit range.
        """
        match self:
            case Kind.INTEGER | Kind.UNSIGNED:
                if not isinstance(object, int) or isinstance(object, bool):
                    raise TypeError("%s option value must be an int" % self.value)
                low, high = _BOUNDS[self.value]
                if not low <= object <= high:
                    raise ValueError("%s option value %d out of range" % (self.value, object))
            case Kind.BOOLEAN:
                if not isinstance(object, bool):
                    raise TypeError("boolean option value must be a bool")
            case Kind.STRING:
                if not isinstance(object, str):
                    raise TypeError("string option value must be a str")
        return object

    def decode(self, text, /):
        """
        decode a raw command-line string into a value of this kind.

        the ValueError message is the reason part of the public malformed-value
        message, e.g. "invalid integer value 'x4'" or
        "unsigned integer value '-1' out of range".
        """
        if not isinstance(text, str):
            raise TypeError("decode() argument must be a string")
        match self:
            case Kind.STRING:
                return text
            case Kind.BOOLEAN:
                raise ValueError("boolean option does not take a value")
            case Kind.INTEGER:
                if not _INTEGER.fullmatch(text):
                    raise ValueError("invalid %s value %r" % (self.value, text))
            case Kind.UNSIGNED:
                if _INTEGER.fullmatch(text) and not _UNSIGNED.fullmatch(text):
                    # well-formed but negative
                    raise ValueError("%s value %r out of range" % (self.value, text))
                if not _UNSIGNED.fullmatch(text):
                    raise ValueError("invalid %s value %r" % (self.value, text))
        low, high = _BOUNDS[self.value]
        if not low <= (value := int(text, 10)) <= high:
            raise ValueError("%s value %r out of range" % (self.value, text))
        return value


class Cell[_T]:
    """
    writable storage cell bound to one option.

    the registry hands a Cell back from every registration; the parser writes
    decoded values into it and the caller reads `value` at any time (the
    default before parsing, the parsed value afterwards).
    """
    __slots__ = ("_kind", "_value")

    def __init__(self, kind, value, /):
        if not isinstance(kind, Kind):
            raise TypeError("cell kind must be a Kind")
        self._kind = kind
        self.value = value

    @property
    def kind(self):
        return self._kind

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, object):
        self._value = self._kind.check(object)

    def __repr__(self):
        return "cell(%r)" % self._value

    def __rich_repr__(self):
        yield "kind", self._kind.value
        yield "value", self._value


def _sanitize_names(metadata, /):
    """
    Internal: validate the short/long spellings of an option.

    Raises
    - TypeError: a name that is neither None nor a string, or no name at all.
    - ValueError: a string that breaks the naming rules (see module docstring).
    """
    short, long = metadata["short"], metadata["long"]

    if not isinstance(short, str | None):
        raise TypeError("option short name must be a string")
    if not isinstance(long, str | None):
        raise TypeError("option long name must be a string")
    if short is None and long is None:
        raise TypeError("option must specify at least one name")

    if short is not None and (len(short) != 1 or short in "-=" or short.isspace()):
        raise ValueError("option short name must be a single character other than '-' or '='")
    if long is not None and (not long or long.startswith("-") or "=" in long or re.search(r"\s", long)):
        raise ValueError("option long name must be a non-empty word without '=' or a leading '-'")


def _sanitize_metadata(metadata, /):
    """
    Internal: validate kind, default and description.

    - kind: must be a Kind member.
    - default: Unset becomes the kind's zero value; anything else must pass
      kind.check (same rule as later cell writes).
    - descr: Unset/empty becomes None, strings are trimmed, rich Text is kept.
    """
    if not isinstance(kind := metadata["kind"], Kind):
        raise TypeError("option 'kind' must be a Kind")

    metadata["default"] = kind.check(coalesce(metadata["default"], kind.default))

    if not isinstance(descr := metadata["descr"], str | Text | Unset):
        raise TypeError("option 'descr' must be a string")
    if isinstance(descr, str):
        descr = descr.strip()
    metadata["descr"] = coalesce(descr) or None


class Option[_T]:
    """
    One registered flag.

    Properties
    - short, long: spellings without hyphens (either may be None).
    - names: the command-line spellings, e.g. ('-l', '--limit').
    - kind, default, descr: sanitized metadata.
    - cell: the storage the parser writes into.

    Equality is identity: two options with the same spellings are still
    different registrations.
    """

    __introspectable__ = (
        "short",
        "long",
        "kind",
        "default",
        "descr",
        "cell",
    )

    def __init__(self, short, long, /, kind=Kind.STRING, default=Unset, descr=Unset):
        metadata = {
            "short": short,
            "long": long,
            "kind": kind,
            "default": default,
            "descr": descr,
        }
        _sanitize_names(metadata)
        _sanitize_metadata(metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._cell = Cell(self._kind, self._default)

    short = mirror("short")
    long = mirror("long")
    kind = mirror("kind")
    default = mirror("default")
    descr = mirror("descr")
    cell = mirror("cell")

    @property
    def names(self):
        names = ()
        if self._short is not None:
            names += ("-" + self._short,)
        if self._long is not None:
            names += ("--" + self._long,)
        return names

    @property
    def boolean(self):
        return self._kind is Kind.BOOLEAN

    def __repr__(self):
        return f"option({
            ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
        })"

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)


__all__ = (
    "Kind",
    "Cell",
    "Option",
)
