r"""
Optspec value kinds: the closed set of semantic types an option can carry.

Cases
- Bool            → bool, literals true/TRUE and false/FALSE.
- Int(bits=64)    → signed two's complement integer of the given width.
- Uint(bits=64)   → unsigned integer of the given width.
- Float()         → float (decimal, exponential, inf, nan).
- String()        → str.
- Enum(type)      → a member of an enum.Enum subclass, matched by name.

The set is sealed: Kind cannot be subclassed outside this module, and every
consumer dispatches with `match` over the cases above.

Helpers
- resolve(declared): map a declared type (Kind, bool, int, float, str, or an
  Enum subclass) to a Kind.
- infer(default): resolve the kind of a default value.
- zero(kind): the value used when no default is declared.
- conform(kind, value): validate and normalize a default value.
- coerce(kind, token): convert raw argument text (raises ValueError).
- unparse(kind, value): the inverse of coerce.
"""
import builtins
import enum
import re

from .faults import (
    UnsupportedKindError,
    InvalidBoolValueError,
    InvalidIntValueError,
    InvalidFloatValueError,
    InvalidEnumValueError,
    InvalidValueError,
)

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT = re.compile(r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf(?:inity)?|nan)", re.ASCII | re.IGNORECASE)
_BOOLEANS = {"true": True, "TRUE": True, "false": False, "FALSE": False}


class Kind:
    """
    Base of the kind variant.

    Each case exposes
    - tag: short label used in usage text (e.g. "i64", "string").
    - error: the InvalidValueError subclass raised when coercion fails.
    """
    __slots__ = ()
    __match_args__ = ()
    error = InvalidValueError

    def __init_subclass__(cls, **options):
        if cls.__module__ != __name__:
            raise TypeError(f"type {Kind.__name__!r} is sealed and cannot be extended")
        super().__init_subclass__(**options)

    @property
    def tag(self):
        raise NotImplementedError

    def __key(self):
        return tuple(getattr(self, name) for name in self.__match_args__)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__key() == other.__key()

    def __hash__(self):
        return hash((type(self), self.__key()))

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join(
            "%s=%r" % (name, getattr(self, name)) for name in self.__match_args__
        ))

    def __rich_repr__(self):
        for name in self.__match_args__:
            yield name, getattr(self, name)


class Bool(Kind):
    __slots__ = ()
    error = InvalidBoolValueError

    @property
    def tag(self):
        return "bool"


class _Integer(Kind):
    __slots__ = ("bits",)
    __match_args__ = ("bits",)
    error = InvalidIntValueError

    def __init__(self, bits=64):
        if not isinstance(bits, int) or isinstance(bits, bool):
            raise TypeError(f"{type(self).__name__} 'bits' must be an integer")
        if bits < 1:
            raise ValueError(f"{type(self).__name__} 'bits' must be a positive integer")
        object.__setattr__(self, "bits", bits)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def bounds(self):
        raise NotImplementedError


class Int(_Integer):
    __slots__ = ()

    @property
    def tag(self):
        return f"i{self.bits}"

    @property
    def bounds(self):
        return -(1 << (self.bits - 1)), (1 << (self.bits - 1)) - 1


class Uint(_Integer):
    __slots__ = ()

    @property
    def tag(self):
        return f"u{self.bits}"

    @property
    def bounds(self):
        return 0, (1 << self.bits) - 1


class Float(Kind):
    __slots__ = ()
    error = InvalidFloatValueError

    @property
    def tag(self):
        return "float"


class String(Kind):
    __slots__ = ()

    @property
    def tag(self):
        return "string"


class Enum(Kind):
    __slots__ = ("type",)
    __match_args__ = ("type",)
    error = InvalidEnumValueError

    def __init__(self, type):
        if not isinstance(type, builtins.type) or not issubclass(type, enum.Enum):
            raise UnsupportedKindError(f"enum kind requires an enum.Enum subclass, got {type!r}")
        if not type.__members__:
            raise UnsupportedKindError(f"enum {type.__name__!r} has no members")
        object.__setattr__(self, "type", type)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def tag(self):
        return "enum"

    @property
    def choices(self):
        """Member names accepted on the command line, in declaration order."""
        return tuple(self.type.__members__)


def resolve(declared, /):
    """
    Map a declared option type to its Kind.

    Accepted
    - a Kind instance (returned as-is)
    - bool, int, float, str
    - an enum.Enum subclass

    Raises
    - UnsupportedKindError for anything else.
    """
    if isinstance(declared, Bool | Int | Uint | Float | String | Enum):
        return declared
    if isinstance(declared, Kind):
        raise UnsupportedKindError(
            f"unsupported option kind {declared!r}",
            hint="use one of Bool(), Int(bits), Uint(bits), Float(), String(), Enum(type)",
        )
    # bool must be tested by identity first: it is an int subclass
    if declared is bool:
        return Bool()
    if declared is int:
        return Int()
    if declared is float:
        return Float()
    if declared is str:
        return String()
    if isinstance(declared, type) and issubclass(declared, enum.Enum):
        return Enum(declared)
    raise UnsupportedKindError(
        f"unsupported option type {declared!r}",
        hint="use bool, int, float, str, an enum.Enum subclass, or a Kind (Int(bits=8), Uint(), ...)",
    )


def infer(default, /):
    """
    Resolve the kind of a default value (bool, int, float, str or enum member).
    """
    if isinstance(default, enum.Enum):
        return Enum(type(default))
    return resolve(type(default))


def zero(kind, /):
    """
    Value of an option declared without a default.
    """
    match kind:
        case Bool():
            return False
        case Int() | Uint():
            return 0
        case Float():
            return 0.0
        case String():
            return ""
        case Enum(type=enumeration):
            return next(iter(enumeration))
        case _:
            raise TypeError(f"zero() argument must be a kind, not {kind!r}")


def conform(kind, value, /):
    """
    Validate a declared default against its kind and normalize it.

    Raises
    - TypeError when the value has the wrong type.
    - ValueError when an integer is outside the kind's bounds.
    """
    match kind:
        case Bool():
            if not isinstance(value, bool):
                raise TypeError(f"expected a bool, got {value!r}")
            return value
        case Int() | Uint():
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"expected an integer, got {value!r}")
            low, high = kind.bounds
            if not low <= value <= high:
                raise ValueError(f"{value!r} is out of range for {kind.tag} ({low}..{high})")
            return value
        case Float():
            if not isinstance(value, int | float) or isinstance(value, bool):
                raise TypeError(f"expected a float, got {value!r}")
            return float(value)
        case String():
            if not isinstance(value, str):
                raise TypeError(f"expected a string, got {value!r}")
            return value
        case Enum(type=enumeration):
            if not isinstance(value, enumeration):
                raise TypeError(f"expected a {enumeration.__name__} member, got {value!r}")
            return value
        case _:
            raise TypeError(f"conform() argument must be a kind, not {kind!r}")


def coerce(kind, token, /):
    """
    Convert raw argument text to the kind's semantic value.

    Rules
    - Bool: true/TRUE → True, false/FALSE → False.
    - Int/Uint: ASCII base-10 digits with an optional sign, within bounds.
    - Float: decimal or exponential literal, inf/infinity/nan.
    - Enum: case-sensitive member name.
    - String: a fresh copy of the token.

    Raises
    - ValueError describing why the token was rejected.
    """
    match kind:
        case Bool():
            try:
                return _BOOLEANS[token]
            except KeyError:
                raise ValueError("expected true/TRUE or false/FALSE") from None
        case Int() | Uint():
            if not _INTEGER.fullmatch(token):
                raise ValueError("expected a base-10 integer")
            value = int(token, 10)
            low, high = kind.bounds
            if not low <= value <= high:
                raise ValueError(f"out of range for {kind.tag} ({low}..{high})")
            return value
        case Float():
            if not _FLOAT.fullmatch(token):
                raise ValueError("expected a decimal or exponential number")
            return float(token)
        case String():
            return str(token)
        case Enum(type=enumeration):
            try:
                return enumeration.__members__[token]
            except KeyError:
                raise ValueError("expected one of %s" % ", ".join(kind.choices)) from None
        case _:
            raise TypeError(f"coerce() argument must be a kind, not {kind!r}")


def unparse(kind, value, /):
    """
    Format a semantic value back into text that coerce() accepts.
    """
    match kind:
        case Bool():
            return "true" if value else "false"
        case Int() | Uint():
            return str(value)
        case Float():
            return repr(value)
        case String():
            return value
        case Enum():
            return value.name
        case _:
            raise TypeError(f"unparse() argument must be a kind, not {kind!r}")


__all__ = (
    "Kind",
    "Bool",
    "Int",
    "Uint",
    "Float",
    "String",
    "Enum",
    "resolve",
    "infer",
    "zero",
    "conform",
    "coerce",
    "unparse",
)
