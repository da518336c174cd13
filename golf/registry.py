"""
Golf option registry: the set of defined options and their lookup tables.

What this module provides
- Registry: holds every registered Option, enforces flag-name uniqueness and
  exposes lookup by short or long name.
  • register(short, long, kind, default, descr) -> Cell
  • integer/unsigned/boolean/string(short, long, default, descr) -> Cell
  • lookup_short(char) / lookup_long(name) -> Option | None
  • reset(): forget every option (isolates independent parsing scenarios).

Uniqueness
- no two options share a short name; no two options share a long name.
- the long name is checked first, then the short name; a violating
  registration raises DuplicatedLongFlagError / DuplicatedShortFlagError and
  leaves the registry untouched.

Quick example:
    >>> registry = Registry()
    >>> limit = registry.integer("l", "limit", 0, "limit results")
    >>> registry.lookup_long("limit").cell is limit
    True
"""
from .faults import *
from .options import *
from .utils import *


class Registry:
    """
    Mutable set of options with O(1) lookup by spelling.

    Iteration yields options in registration order; `"-l" in registry` and
    `"--limit" in registry` test command-line spellings.
    """

    def __init__(self):
        self._options = []
        self._shorts = {}
        self._longs = {}

    options = mirror("options")

    def register(self, short, long, /, kind=Kind.STRING, default=Unset, descr=Unset):
        """
        create an option, initialize its cell to `default` and index it.

        parameters
        - short: str | None
          one-character flag used as '-c' (None when the option has none).
        - long: str | None
          word flag used as '--name' (None when the option has none).
        - kind: Kind
          value kind, fixes the type of the cell and of the default.
        - default: Unset | value of the kind
          initial cell value; the kind's zero value when omitted.
        - descr: Unset | str
          short description, kept for introspection.

        returns
        - Cell: the storage the parser writes into.

        raises
        - TypeError / ValueError: malformed names, kind or default.
        - DuplicatedLongFlagError: long name already registered.
        - DuplicatedShortFlagError: short name already registered.
        """
        option = Option(short, long, kind, default, descr)

        if option.long is not None and option.long in self._longs:
            raise DuplicatedLongFlagError(
                'cannot add option that duplicates long flag: "%s"' % option.long,
                code=FaultCode.DUPLICATED_FLAG,
                option=option,
                existing=self._longs[option.long],
            )
        if option.short is not None and option.short in self._shorts:
            raise DuplicatedShortFlagError(
                "cannot add option that duplicates short flag: '%s'" % option.short,
                code=FaultCode.DUPLICATED_FLAG,
                option=option,
                existing=self._shorts[option.short],
            )

        self._options.append(option)
        if option.short is not None:
            self._shorts[option.short] = option
        if option.long is not None:
            self._longs[option.long] = option
        return option.cell

    def integer(self, short, long, /, default=0, descr=Unset):
        return self.register(short, long, Kind.INTEGER, default, descr)

    def unsigned(self, short, long, /, default=0, descr=Unset):
        return self.register(short, long, Kind.UNSIGNED, default, descr)

    def boolean(self, short, long, /, default=False, descr=Unset):
        return self.register(short, long, Kind.BOOLEAN, default, descr)

    def string(self, short, long, /, default="", descr=Unset):
        return self.register(short, long, Kind.STRING, default, descr)

    def lookup_short(self, char, /):
        """
        return the option registered under the short name `char`, or None.
        """
        return self._shorts.get(char)

    def lookup_long(self, name, /):
        """
        return the option registered under the long name `name`, or None.
        """
        return self._longs.get(name)

    def reset(self):
        """
        forget every registered option and both lookup tables.

        cells already handed out keep their last value; they are simply no
        longer reachable through this registry.
        """
        self._options.clear()
        self._shorts.clear()
        self._longs.clear()

    def __len__(self):
        return len(self._options)

    def __iter__(self):
        return iter(tuple(self._options))

    def __contains__(self, name, /):
        if not isinstance(name, str):
            return False
        if name.startswith("--"):
            return name[2:] in self._longs
        if name.startswith("-"):
            return name[1:] in self._shorts
        return False

    def __repr__(self):
        return "registry(%s)" % ", ".join("/".join(option.names) for option in self._options)

    def __rich_repr__(self):
        yield "options", tuple(self._options)


__all__ = (
    "Registry",
)
