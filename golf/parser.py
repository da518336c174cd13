"""
Golf parser: turn a raw argument sequence into option values and positionals.

What this module provides
- Parser: runs the single left-to-right scan over a token sequence against a
  Registry, writes decoded values into the option cells and collects the
  positional residue (exposed as Parser.args and returned from parse()).

Token classification (one pass, two modes)
- scanning (default)
  • '--'            → enter literal mode (the token itself is dropped).
  • '--name[=val]'  → long option; the value is the inline part after the first
                      '=' when present (even empty), otherwise the next token.
  • '-abc'          → short options scanned one character at a time; booleans
                      bundle ('-vl'); a value-taking option takes the rest of
                      the token as its value ('-l4', '-vl4') or, when nothing
                      is left, the next token ('-l 4'), and the token ends there.
  • anything else   → positional (including a bare '-').
- literal (entered for good on '--')
  • every remaining token is a positional, option-like or not.

Failure policy
- the first fault stops the scan; cells written by earlier tokens keep their
  values (no rollback); Parser.args keeps the positionals met before the
  fault and the unscanned tokens are dropped.
- non-shell mode raises the fault; shell mode renders it on stderr and exits
  with status 1 (see faults.trigger).

Quick example:
    >>> registry = Registry()
    >>> limit = registry.integer("l", "limit", 0, "limit results")
    >>> verbose = registry.boolean("v", "verbose", False, "print verbose info")
    >>> Parser(registry).parse("-l4 -- --verbose some")
    ('--verbose', 'some')
    >>> limit.value, verbose.value
    (4, False)
"""
import difflib
import os.path
import shlex
import sys
from collections import deque
from collections.abc import Iterable

from .faults import *
from .options import *
from .registry import *
from .utils import *


def _tokenize(tokens, /):
    """
    normalize the parse() input into a list of tokens.

    - Unset: the current process arguments (sys.argv[1:]).
    - str: shell-like string, split via shlex.split ("" yields no tokens);
      quotes group words and a backslash escapes the next character, so
      pass a list to keep backslashes or stray quotes verbatim.
    - Iterable[str]: taken verbatim, in order (tokens are not trimmed).
    """
    if tokens is Unset:
        return sys.argv[1:]
    if isinstance(tokens, str):
        return shlex.split(tokens)
    if isinstance(tokens, Iterable):
        tokens = list(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("parse() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("parse() argument must be a string or an iterable of strings")


class Parser:
    """
    Option parser bound to one Registry.

    Parameters
    - registry: Registry
      the options to recognize; read at every parse() call, so options
      registered after the parser was built are honoured.
    - prog: Unset | str (keyword-only)
      program name shown in rendered faults (defaults to basename of sys.argv[0]).
    - shell: bool (keyword-only)
      render faults with rich on stderr and exit instead of raising.
    - fancy: bool (keyword-only)
      render faults inside a panel (shell mode only).
    - colorful: bool (keyword-only)
      colour rendered faults (shell mode only).

    State
    - args: positionals collected by the last parse() (reset at every call;
      after a fault, only those met before it).
    - literal: True once '--' was seen during the last parse().
    """

    def __init__(self, registry, /, *, prog=Unset, shell=False, fancy=False, colorful=False):
        if not isinstance(registry, Registry):
            raise TypeError("parser registry must be a Registry")
        if not isinstance(prog, str | Unset):
            raise TypeError("parser 'prog' must be a string")
        elif isinstance(prog, str) and not (prog := prog.strip()):
            raise ValueError("parser 'prog' cannot be empty")

        self._registry = registry
        self._prog = prog
        self._shell = bool(shell)
        self._fancy = bool(fancy)
        self._colorful = bool(colorful)

        self._args = []
        self._tokens = deque()
        self._literal = False

    registry = mirror("registry")
    args = mirror("args")
    literal = mirror("literal")
    shell = mirror("shell")
    fancy = mirror("fancy")
    colorful = mirror("colorful")

    @property
    def prog(self):
        return coalesce(self._prog, os.path.basename(sys.argv[0] if sys.argv else "") or "golf")

    def trigger(self, fault, /, **options):
        """
        surface a fault with this parser's runtime flags merged in.
        """
        trigger(fault, **options, prog=self.prog, shell=self._shell, fancy=self._fancy, colorful=self._colorful)

    def reset(self):
        """
        forget the positionals and the mode of the last parse() call.
        """
        self._args.clear()
        self._tokens.clear()
        self._literal = False

    def parse(self, tokens=Unset, /):
        """
        scan `tokens`, write option values into their cells, collect positionals.

        parameters
        - tokens: Unset | str | Iterable[str]
          see _tokenize(); Unset reads the current process arguments.

        returns
        - tuple[str, ...]: the positionals (same as self.args afterwards).

        raises (non-shell mode)
        - UnknownOptionError: unregistered short character or long name.
        - MissingValueError: value-taking option with nothing left to consume.
        - MalformedValueError: value that does not decode to the option kind
          (FlagAssignmentError for '--flag=value' on a boolean option).
        - UnbalancedQuotesError: a string input with an unclosed quote or a
          trailing backslash.
        """
        self.reset()
        try:
            self._tokens.extend(_tokenize(tokens))
        except ValueError as exception:
            self.trigger(UnbalancedQuotesError(
                "cannot split arguments: %s" % str(exception).lower(),
                title="unbalanced quotes",
                code=FaultCode.UNBALANCED_QUOTES,
                value=tokens,
                hint="close the quote, escape it with '\\', or pass the arguments as a list",
                docs=getdoc(FaultCode.UNBALANCED_QUOTES),
            ))

        try:
            while self._tokens:
                token = self._tokens.popleft()

                if self._literal:
                    self._args.append(token)
                elif token == "--":
                    self._literal = True
                elif token.startswith("--"):
                    self._parse_long(token)
                elif token.startswith("-") and len(token) > 1:
                    self._parse_short(token)
                else:
                    self._args.append(token)
        finally:
            # tokens left behind by a fault are never scanned
            self._tokens.clear()

        return self.args

    def _parse_long(self, token):
        """
        handle one '--name' or '--name=value' token.
        """
        name, separator, value = token[2:].partition("=")
        inline = bool(separator)

        if (option := self._registry.lookup_long(name)) is None:
            return self._unknown(token, name, short=False)

        if option.boolean:
            if inline:
                return self.trigger(FlagAssignmentError(
                    "cannot parse argument for option %s: boolean option does not take a value" % quote(name, short=False),
                    title="flag cannot take a value",
                    code=FaultCode.FLAG_ASSIGNMENT,
                    token=token,
                    option=option,
                    value=value,
                    hint="remove everything from '=' (for example: --%s)" % name,
                    docs=getdoc(FaultCode.FLAG_ASSIGNMENT),
                ))
            option.cell.value = True
            return

        if not inline:
            value = self._consume(option, token, name, short=False)
        elif not value and option.kind is Kind.STRING:
            self.trigger(EmptyValueWarning(
                "empty inline value for option %s" % quote(name, short=False),
                title="empty inline value",
                code=FaultCode.EMPTY_INLINE_VALUE,
                token=token,
                option=option,
                hint="add a value after '=' (for example: --%s=<value>) or pass it after a space" % name,
                docs=getdoc(FaultCode.EMPTY_INLINE_VALUE),
            ))

        self._store(option, token, name, value, short=False)

    def _parse_short(self, token):
        """
        handle one '-abc' token (bundled short options, possibly ending in a value).
        """
        for index, char in enumerate(token[1:], start=1):
            if (option := self._registry.lookup_short(char)) is None:
                return self._unknown(token, char, short=True)

            if option.boolean:
                option.cell.value = True
                continue

            # a value-taking option ends the token: whatever follows is its value
            value = token[index + 1:] or self._consume(option, token, char, short=True)
            return self._store(option, token, char, value, short=True)

    def _consume(self, option, token, name, *, short):
        """
        pop the next token as the value of `option`, or fault when none is left.
        """
        if not self._tokens:
            spelling = ("-%s" if short else "--%s") % name
            return self.trigger(MissingValueError(
                "cannot parse argument for option %s: missing value" % quote(name, short=short),
                title="missing option value",
                code=FaultCode.MISSING_VALUE,
                token=token,
                option=option,
                hint="provide a %s value (for example: %s <value>)" % (option.kind.value, spelling),
                docs=getdoc(FaultCode.MISSING_VALUE),
            ))
        return self._tokens.popleft()

    def _store(self, option, token, name, value, *, short):
        """
        decode `value` to the option kind and write it into the option cell.
        """
        try:
            option.cell.value = option.kind.decode(value)
        except ValueError as exception:
            self.trigger(MalformedValueError(
                "cannot parse argument for option %s: %s" % (quote(name, short=short), exception),
                title="malformed option value",
                code=FaultCode.MALFORMED_VALUE,
                token=token,
                option=option,
                value=value,
                hint="provide a valid %s value" % option.kind.value,
                docs=getdoc(FaultCode.MALFORMED_VALUE),
            ))

    def _unknown(self, token, name, *, short):
        spelling = ("-%s" if short else "--%s") % name
        names = [other for option in self._registry for other in option.names]
        suggestions = difflib.get_close_matches(spelling, names, 3)
        try:
            hint = "did you mean %r?" % suggestions[0]
        except IndexError:
            hint = "remove it, or pass it after '--' to keep it as a positional argument"
        self.trigger(UnknownOptionError(
            "unknown option: %s" % quote(name, short=short),
            title="unknown option",
            code=FaultCode.UNKNOWN_OPTION,
            token=token,
            name=name,
            suggestions=suggestions,
            hint=hint,
            docs=getdoc(FaultCode.UNKNOWN_OPTION),
        ))

    def __repr__(self):
        return "parser(registry=%r, args=%r)" % (self._registry, tuple(self._args))

    def __rich_repr__(self):
        yield "registry", self._registry
        yield "args", tuple(self._args)
        yield "shell", self._shell


__all__ = (
    "Parser",
)
