"""
Optspec option registry: turn descriptors into a validated field table.

What this module provides
- Field: one materialized row (name, kind, array, short, default, descr) with
  a resolved Kind and a validated default.
- FieldTable: ordered, name-indexed and short-indexed collection of fields.
  It is read-only after build and can be shared by any number of parses.
- build(descriptors): validate a descriptor sequence and produce a FieldTable.

Validation (in descriptor order, first failure wins)
- name longer than MAX_NAME_LENGTH → NameTooLongError
- name starting with "_" or taken by an OptionsResult attribute → InvalidNameError
- name already used by an earlier descriptor → DuplicateNameError
- short flag already used by an earlier descriptor → DuplicateShortError
- declared type (or default, when no type) not a supported kind → UnsupportedKindError
- default of the wrong type or out of range, or non-empty array default → InvalidDefaultError

All of these are ConfigurationError: they are programming errors, found once,
before any argument is parsed.
"""
import logging
from collections.abc import Iterable, Sized
from types import MappingProxyType

from . import kinds
from .descriptors import Option
from .faults import (
    DuplicateNameError,
    DuplicateShortError,
    InvalidDefaultError,
    InvalidNameError,
    NameTooLongError,
    UnsupportedKindError,
)
from .result import OptionsResult
from .utils import *

log = logging.getLogger(__name__)

MAX_NAME_LENGTH = 64


class Field:
    """
    One row of the field table.

    Scalars carry their (validated) default; arrays carry an empty tuple and
    get a fresh list on every parse (see Field.initial).
    """
    __slots__ = ("_name", "_kind", "_array", "_short", "_default", "_descr")

    name = mirror("name")
    kind = mirror("kind")
    array = mirror("array")
    short = mirror("short")
    default = mirror("default")
    descr = mirror("descr")

    def __init__(self, name, kind, array, short, default, descr):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_array", array)
        object.__setattr__(self, "_short", short)
        object.__setattr__(self, "_default", default)
        object.__setattr__(self, "_descr", descr)

    def __setattr__(self, name, value, /):
        raise AttributeError("field is immutable")

    @property
    def tag(self):
        """Type tag as shown in usage text; arrays are bracketed."""
        return f"[{self._kind.tag}]" if self._array else self._kind.tag

    def initial(self):
        """Value a result slot holds before any argument is applied."""
        return [] if self._array else self._default

    def __rich_repr__(self):
        yield "name", self._name
        yield "kind", self._kind
        yield "array", self._array
        yield "short", self._short
        yield "default", self._default
        yield "descr", self._descr

    def __repr__(self):
        return "field(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented
        return tuple(self.__rich_repr__()) == tuple(other.__rich_repr__())

    def __hash__(self):
        return hash((self._name, self._kind, self._array, self._short))


class FieldTable(Sized, Iterable):
    """
    Ordered, read-only table of fields.

    Lookups
    - table[name] / table.get(name): by long name.
    - table.find_short(char): by short flag, or None.
    - iter(table): fields in declaration order.
    """
    __slots__ = ("_fields", "_names", "_shorts")

    def __init__(self, fields, /):
        fields = tuple(fields)
        object.__setattr__(self, "_fields", fields)
        object.__setattr__(self, "_names", MappingProxyType({field.name: field for field in fields}))
        object.__setattr__(self, "_shorts", MappingProxyType({
            field.short: field for field in fields if field.short is not None
        }))

    def __setattr__(self, name, value, /):
        raise AttributeError("field table is immutable")

    @property
    def names(self):
        return tuple(self._names)

    @property
    def shorts(self):
        return self._shorts

    def __len__(self):
        return len(self._fields)

    def __iter__(self):
        return iter(self._fields)

    def __contains__(self, name):
        return name in self._names

    def __getitem__(self, name):
        return self._names[name]

    def get(self, name, default=None, /):
        return self._names.get(name, default)

    def find_short(self, short, /):
        return self._shorts.get(short)

    def defaults(self):
        """Mapping of every field to its initial value (fresh lists for arrays)."""
        return {field.name: field.initial() for field in self._fields}

    def __rich_repr__(self):
        for field in self._fields:
            yield field

    def __repr__(self):
        return "field-table(%s)" % ", ".join(map(repr, self._fields))


def _materialize(descriptor, position, /):
    declared, default = descriptor.declared

    if declared is Unset and default is Unset:
        raise UnsupportedKindError(
            f"option {descriptor.name!r} ({ordinal(position)} declaration) has neither a type nor a default",
            hint="pass type=... or a default value to infer it from",
            descriptor=descriptor,
        )

    try:
        kind = kinds.resolve(declared) if declared is not Unset else kinds.infer(default)
    except UnsupportedKindError as fault:
        raise UnsupportedKindError(
            f"option {descriptor.name!r} ({ordinal(position)} declaration): {fault.message}",
            hint=fault.hint,
            descriptor=descriptor,
        ) from fault

    if descriptor.array:
        if default is not Unset and (not isinstance(default, Iterable) or isinstance(default, str) or list(default)):
            raise InvalidDefaultError(
                f"array option {descriptor.name!r} ({ordinal(position)} declaration) must default to an empty sequence",
                hint="drop the default; array options always start empty",
                descriptor=descriptor,
            )
        default = ()
    elif default is Unset:
        default = kinds.zero(kind)
    else:
        try:
            default = kinds.conform(kind, default)
        except (TypeError, ValueError) as error:
            raise InvalidDefaultError(
                f"option {descriptor.name!r} ({ordinal(position)} declaration) has an invalid default: {error}",
                hint=f"use a {kind.tag} value",
                descriptor=descriptor,
            ) from error

    return Field(descriptor.name, kind, descriptor.array, descriptor.short, default, descriptor.descr)


def build(descriptors, /):
    """
    Validate descriptors and materialize the field table.

    Parameters
    - descriptors: Iterable[Option]
      The declared options, in the order they should appear in results and
      usage text.

    Returns
    - FieldTable

    Raises
    - TypeError: an item is not an Option descriptor.
    - ConfigurationError (subclasses): see module docstring. Duplicate errors
      name both the offending and the original descriptor.
    """
    names = {}
    shorts = {}
    fields = []

    for position, descriptor in enumerate(descriptors, start=1):
        if not isinstance(descriptor, Option):
            raise TypeError(f"build() expects option descriptors, got {descriptor!r} at {ordinal(position)} position")

        if len(descriptor.name) > MAX_NAME_LENGTH:
            raise NameTooLongError(
                f"option name {descriptor.name[:16]!r}... ({ordinal(position)} declaration) is longer "
                f"than {MAX_NAME_LENGTH} characters",
                hint="shorten the option name",
                descriptor=descriptor,
            )

        if descriptor.name.startswith("_") or hasattr(OptionsResult, descriptor.name):
            raise InvalidNameError(
                f"option {descriptor.name!r} ({ordinal(position)} declaration) clashes with an attribute "
                f"of the options result",
                hint="rename the option; names like 'release', 'values' or '_x' are reserved",
                descriptor=descriptor,
            )

        if (original := names.get(descriptor.name)) is not None:
            raise DuplicateNameError(
                f"option {descriptor.name!r} ({ordinal(position)} declaration) repeats the name of "
                f"option {original[1].name!r} ({ordinal(original[0])} declaration)",
                hint="give every option a distinct name",
                descriptor=descriptor,
                original=original[1],
            )

        if descriptor.short is not None and (original := shorts.get(descriptor.short)) is not None:
            raise DuplicateShortError(
                f"option {descriptor.name!r} ({ordinal(position)} declaration) repeats the short flag "
                f"'-{descriptor.short}' of option {original[1].name!r} ({ordinal(original[0])} declaration)",
                hint="give every short flag to at most one option",
                descriptor=descriptor,
                original=original[1],
            )

        names[descriptor.name] = (position, descriptor)
        if descriptor.short is not None:
            shorts[descriptor.short] = (position, descriptor)

        fields.append(_materialize(descriptor, position))

    table = FieldTable(fields)
    log.debug("built field table with %d fields: %s", len(table), ", ".join(table.names))
    return table


__all__ = (
    "MAX_NAME_LENGTH",
    "Field",
    "FieldTable",
    "build",
)
