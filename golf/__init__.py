__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'golf'
__author__ = 'golf contributors'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .faults import *
from .options import *
from .parser import *
from .registry import *
from .utils import Unset

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

# Process-wide defaults behind the module-level shortcuts below.
default_registry = Registry()
default_parser = Parser(default_registry)


def integer(short, long, /, default=0, descr=Unset):
    """register a signed integer option on the default registry."""
    return default_registry.integer(short, long, default, descr)


def unsigned(short, long, /, default=0, descr=Unset):
    """register an unsigned integer option on the default registry."""
    return default_registry.unsigned(short, long, default, descr)


def boolean(short, long, /, default=False, descr=Unset):
    """register a boolean option on the default registry."""
    return default_registry.boolean(short, long, default, descr)


def string(short, long, /, default="", descr=Unset):
    """register a string option on the default registry."""
    return default_registry.string(short, long, default, descr)


def lookup_short(char, /):
    return default_registry.lookup_short(char)


def lookup_long(name, /):
    return default_registry.lookup_long(name)


def parse(tokens=Unset, /):
    """parse `tokens` (sys.argv[1:] when omitted) against the default registry."""
    return default_parser.parse(tokens)


def args():
    """positionals left over by the last module-level parse()."""
    return default_parser.args


def reset():
    """forget every option of the default registry and the last positionals."""
    default_registry.reset()
    default_parser.reset()


__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info",
    "default_registry",
    "default_parser",
    "integer",
    "unsigned",
    "boolean",
    "string",
    "lookup_short",
    "lookup_long",
    "parse",
    "args",
    "reset",
)

# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the options
__all__ += options.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser
__all__ += parser.__all__  # type: ignore[attr-defined]
# Load the exposed API of the registry
__all__ += registry.__all__  # type: ignore[attr-defined]
