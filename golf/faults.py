"""
Golf faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue
  (parse errors, configuration errors and warnings), grouped by domain.
- ParseError / ParseWarning: base types that carry message + options and know
  how to render themselves in a friendly, lowercased, and actionable way.
- ConfigurationError: programmer mistakes while registering options. These are
  raised straight away and never rendered; they are not user input.
- trigger(): central entry point to surface a fault (respecting shell/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Message contract
- str(fault) is exactly the message. Unknown options read
  unknown option: 'c'  /  unknown option: "name"
  and every value failure starts with "cannot parse argument for option ".
  Downstream code may match on these, so the wording is stable.

Integration
- The parser builds faults and calls trigger(fault, **context).
- In non-shell mode, exceptions are raised and warnings are emitted through the
  warnings module; in shell mode, both are rendered via rich on stderr and
  errors exit with status 1.
"""
import copy
import inspect
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping (by high-level domain)
    - options (2110x)
      • UNKNOWN_OPTION, MISSING_VALUE, MALFORMED_VALUE, FLAG_ASSIGNMENT,
        UNBALANCED_QUOTES
    - configuration (2120x)
      • DUPLICATED_FLAG
    - warnings (2210x)
      • EMPTY_INLINE_VALUE

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- option errors (2110x) ---
    UNKNOWN_OPTION      = 21101
    MISSING_VALUE       = 21102
    MALFORMED_VALUE     = 21103
    FLAG_ASSIGNMENT     = 21104
    UNBALANCED_QUOTES   = 21105

    # --- configuration errors (2120x) ---
    DUPLICATED_FLAG     = 21201

    # --- warnings (2210x) ---
    EMPTY_INLINE_VALUE  = 22101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette, /):
    """
    build the rich renderable shared by errors and warnings.

    layout
    - header: [ prog — code | Title ]
    - body:   the message, then " → hint" when a hint is known.
    - fancy:  the body goes into a Panel titled with the header.
    """
    main = __import__("__main__")
    options = fault.options

    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if options.get("colorful", False) else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not options.get("colorful", False):
            return Text(str(fragment))
        return Text(str(fragment), style)

    prog = text(getattr(main, "__prog__", options.get("prog", "golf")), styler("prog-name"))
    code = options.get("code")

    header = Text.assemble(
        "[ ",
        prog,
        " — ",
        text(code.normalize() if isinstance(code, FaultCode) else "?", styler("code")),
        " | ",
        text(str(options.get("title", type(fault).__name__)).title(), styler("title")),
        " ]"
    )
    body = [text(fault.message, styler("message"))]
    if hint := options.get("hint"):
        body.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

    if options.get("fancy", False):
        return Panel(Group(*body), title=header, title_align="left")

    return Group(header, *body)


class ParseError(Exception):
    """
    base type of every recoverable parse failure.

    attributes
    - message: the exact, stable message (also str(error)).
    - options: read-only context (code, title, hint, token, option, value, and
      the runtime flags shell/fancy/colorful/prog merged in by trigger()).
    """

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownOptionError(ParseError): ...
class MissingValueError(ParseError): ...
class MalformedValueError(ParseError): ...
class FlagAssignmentError(MalformedValueError): ...
class UnbalancedQuotesError(ParseError): ...


class ParseWarning(Warning):
    """
    base type of non-fatal parse diagnostics; parsing continues after it.
    """

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "title": "bold #FFC2E0",  # softer pinky title for warnings
            "message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        })

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class EmptyValueWarning(ParseWarning): ...


class ConfigurationError(Exception):
    """
    base type of option-setup mistakes (programmer errors, not user input).

    raised directly by the registry; trigger() is never involved, so shell
    mode cannot turn a broken setup into a rendered message and a silent exit.
    """

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)


class DuplicatedFlagError(ConfigurationError): ...
class DuplicatedShortFlagError(DuplicatedFlagError): ...
class DuplicatedLongFlagError(DuplicatedFlagError): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.
    - in shell mode, rendering happens via the rich console; otherwise, errors
      are raised and warnings are emitted.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    returns None when nothing is registered for the code.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ParseError",
    "UnknownOptionError",
    "MissingValueError",
    "MalformedValueError",
    "FlagAssignmentError",
    "UnbalancedQuotesError",
    "ParseWarning",
    "EmptyValueWarning",
    "ConfigurationError",
    "DuplicatedFlagError",
    "DuplicatedShortFlagError",
    "DuplicatedLongFlagError",
    "trigger",
    "getdoc",
)
