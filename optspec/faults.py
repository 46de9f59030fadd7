"""
Optspec faults (configuration and parse errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault. Codes are
  grouped by domain so logs and searches stay predictable.
- ConfigurationError: raised while building the option registry. These are
  developer errors (duplicate names, unsupported kinds, bad defaults) and are
  never expected at parse time.
- ParseError: raised while matching user arguments. These are user errors and
  are always recoverable by the caller (print usage, exit non-zero).

Rendering
- Every fault carries a message plus read-only options (code, title, hint and
  any context such as token/index/field) and knows how to render itself via
  rich (`__rich__`), with or without colors.
- Hosts can relabel codes through a `__codes__` mapping, rename the program
  through `__prog__`, and restyle through `__styles__`, all looked up in
  `__main__`.

Policy
- The core only raises. Printing and exiting is the caller's decision (see
  OptionParser.parse_or_exit).
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - parse errors, names (1111x)
      • INVALID_OPTION, INVALID_SHORT_OPTION, EXPECTED_SEPARATOR, MISSING_VALUE
    - parse errors, values (1112x)
      • INVALID_BOOL_VALUE, INVALID_INT_VALUE, INVALID_FLOAT_VALUE, INVALID_ENUM_VALUE
    - configuration errors (2110x)
      • DUPLICATE_NAME, DUPLICATE_SHORT, UNSUPPORTED_KIND, NAME_TOO_LONG,
        INVALID_NAME, INVALID_DEFAULT
    """
    # --- parse errors: names and separators (111xx) ---
    INVALID_OPTION       = 11111
    INVALID_SHORT_OPTION = 11112
    EXPECTED_SEPARATOR   = 11113
    MISSING_VALUE        = 11114

    # --- parse errors: values (112xx) ---
    INVALID_BOOL_VALUE   = 11121
    INVALID_INT_VALUE    = 11122
    INVALID_FLOAT_VALUE  = 11123
    INVALID_ENUM_VALUE   = 11124

    # --- configuration errors (21xxx) ---
    DUPLICATE_NAME       = 21101
    DUPLICATE_SHORT      = 21102
    UNSUPPORTED_KIND     = 21103
    NAME_TOO_LONG        = 21104
    INVALID_NAME         = 21105
    INVALID_DEFAULT      = 21106

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class Fault:
    """
    Shared behavior of configuration and parse errors.

    Subclasses declare `__fault__ = (code, title)`; both can be overridden per
    instance through the `code`/`title` options.
    """
    __fault__ = (Unset, "fault")

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        code, title = type(self).__fault__
        self.message = message
        self.options = MappingProxyType({"code": code, "title": title} | options)

    @property
    def code(self):
        return self.options["code"]

    @property
    def title(self):
        return self.options["title"]

    @property
    def hint(self):
        return self.options.get("hint")

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog", "optspec")), styler("prog-name"))
        code = self.code.normalize() if isinstance(self.code, FaultCode) else "-"

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code, styler("code")),
            " | ",
            text(self.title.title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))

        if not self.hint:
            return Group(header, message)

        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.hint, styler("hint")))
        return Group(header, message, hint)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ConfigurationError(Fault, Exception):
    """
    A descriptor set that cannot be turned into a field table.

    Raised once, at registry build time, before any argument is parsed. It
    signals a programming error in the option declarations.
    """
    __fault__ = (Unset, "bad option declaration")


class DuplicateNameError(ConfigurationError):
    __fault__ = (FaultCode.DUPLICATE_NAME, "duplicate option name")


class DuplicateShortError(ConfigurationError):
    __fault__ = (FaultCode.DUPLICATE_SHORT, "duplicate short flag")


class UnsupportedKindError(ConfigurationError, TypeError):
    __fault__ = (FaultCode.UNSUPPORTED_KIND, "unsupported option type")


class NameTooLongError(ConfigurationError, ValueError):
    __fault__ = (FaultCode.NAME_TOO_LONG, "option name too long")


class InvalidNameError(ConfigurationError, ValueError):
    __fault__ = (FaultCode.INVALID_NAME, "invalid option name")


class InvalidDefaultError(ConfigurationError, ValueError):
    __fault__ = (FaultCode.INVALID_DEFAULT, "invalid default value")


class ParseError(Fault, Exception):
    """
    A user argument that could not be matched or converted.

    Common options
    - token: the offending raw text (name or value).
    - index: 1-based position of the raw argument it came from.
    - field: the resolved Field, when the name was recognized.
    - hint: one actionable sentence.
    """
    __fault__ = (Unset, "bad argument")

    @property
    def token(self):
        return self.options.get("token")

    @property
    def index(self):
        return self.options.get("index")

    @property
    def field(self):
        return self.options.get("field")


class InvalidOptionError(ParseError):
    __fault__ = (FaultCode.INVALID_OPTION, "invalid option")

    @property
    def suggestions(self):
        return self.options.get("suggestions", ())


class ExpectedSeparatorError(InvalidOptionError):
    __fault__ = (FaultCode.EXPECTED_SEPARATOR, "expected separator")


class InvalidShortOptionError(ParseError):
    __fault__ = (FaultCode.INVALID_SHORT_OPTION, "invalid short option")


class MissingValueError(ParseError):
    __fault__ = (FaultCode.MISSING_VALUE, "missing value")


class InvalidValueError(ParseError):
    __fault__ = (Unset, "invalid value")


class InvalidBoolValueError(InvalidValueError):
    __fault__ = (FaultCode.INVALID_BOOL_VALUE, "invalid bool value")


class InvalidIntValueError(InvalidValueError):
    __fault__ = (FaultCode.INVALID_INT_VALUE, "invalid int value")


class InvalidFloatValueError(InvalidValueError):
    __fault__ = (FaultCode.INVALID_FLOAT_VALUE, "invalid float value")


class InvalidEnumValueError(InvalidValueError):
    __fault__ = (FaultCode.INVALID_ENUM_VALUE, "invalid enum value")


__all__ = (
    "FaultCode",
    "Fault",
    "ConfigurationError",
    "DuplicateNameError",
    "DuplicateShortError",
    "UnsupportedKindError",
    "NameTooLongError",
    "InvalidNameError",
    "InvalidDefaultError",
    "ParseError",
    "InvalidOptionError",
    "ExpectedSeparatorError",
    "InvalidShortOptionError",
    "MissingValueError",
    "InvalidValueError",
    "InvalidBoolValueError",
    "InvalidIntValueError",
    "InvalidFloatValueError",
    "InvalidEnumValueError",
)
