r"""
Optspec option descriptors.

Overview
- Option: static declaration of one option (name, short flag, type, array-ness,
  default value, help text). Declared once at program setup and immutable
  afterwards.
- option(default, name, short): shorthand for scalar options whose type is
  inferred from the default value.

- Introspection & representation
  • DescriptorType metaclass provides stable __repr__/__rich_repr__ and exposes
    the fields listed in __introspectable__ via read-only properties.

Metadata (sanitized on construction)
- name: str, non-empty, no whitespace and no '=', must not start with '-'.
- short: Unset | str of exactly one character other than '-' and '='.
- type: Unset | Kind | bool | int | float | str | enum.Enum subclass.
  Resolution to a Kind (and rejection of anything else) happens when the
  registry is built, see optspec.registry.build.
- array: bool, repeated occurrences accumulate instead of overwrite.
- default: Unset | value of the semantic type (arrays: Unset or empty).
- descr: Unset | str (short help), trimmed, non-empty when provided.

Quick example:
    >>> from optspec import Option, option, Uint
    >>> verbose = option(False, "verbose", "v", descr="print more")
    >>> threads = Option("threads", "t", type=Uint(bits=8), default=4)
    >>> include = Option("include", "I", type=str, array=True)
"""
import builtins
import functools
import operator
import re

from .faults import InvalidNameError
from .utils import *


class DescriptorType(type):
    """
    Metaclass that gives descriptor classes read-only, introspectable fields.

    Responsibilities
    - Expose every name in __introspectable__ as a read-only property backed
      by "_{name}" (see utils.mirror).
    - Provide stable, readable __repr__/__rich_repr__ implementations for
      diagnostics and pretty printers.

    Conventions
    - __typename__ is derived from the class name (camel-case split with
      hyphens) and used in messages.
    - __displayable__ (if set) narrows which properties are shown by
      __rich_repr__; otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - option(name='verbose', short='v', type=<class 'bool'>, ...)
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers.
            """
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate descriptor metadata in place.

    Raises
    - TypeError: when a field has the wrong Python type.
    - InvalidNameError: when name/short are empty or malformed.
    - ValueError: when descr is empty after trimming.

    Notes
    - Name length, uniqueness, type support and defaults are checked by the
      registry, across the whole descriptor set.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not name:
        raise InvalidNameError(f"{cls.__typename__} 'name' cannot be empty")
    elif name.startswith("-") or re.search(r"[\s=]", name):
        raise InvalidNameError(
            f"{cls.__typename__} name {name!r} must not start with '-' or contain '=' or whitespace",
            hint="declare the bare name (for example: 'verbose', not '--verbose')",
        )

    if not isinstance(short := metadata["short"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'short' must be a string")
    elif isinstance(short, str) and (len(short) != 1 or short in "-=" or short.isspace()):
        raise InvalidNameError(
            f"{cls.__typename__} {name!r} short flag {short!r} must be a single character other than '-' and '='",
        )
    metadata["short"] = coalesce(short)

    if not isinstance(metadata["array"], bool):
        raise TypeError(f"{cls.__typename__} 'array' must be a bool")

    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    elif isinstance(descr, str) and not (descr := descr.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    metadata["descr"] = coalesce(descr)


class Option(metaclass=DescriptorType):
    """
    Declaration of one command-line option.

    Highlights
    - Long form is always available as `--name`; `short` adds `-c`.
    - `type` is resolved to a Kind by the registry; when Unset it is inferred
      from `default`.
    - Array options start empty on every parse and append each occurrence.

    Properties
    - The names listed in __introspectable__ are exposed as read-only
      attributes mirroring the sanitized metadata. Omitted short and descr
      read as None; omitted type and default read as Unset.
    """

    __introspectable__ = (
        "name",
        "short",
        "type",
        "array",
        "default",
        "descr",
    )

    def __init__(
            self,
            name,
            short=Unset,
            /,
            type=Unset,
            default=Unset,
            array=False,
            descr=Unset,
    ):
        """
        Construct an Option descriptor.

        Parameters
        - name: str
          Long name, used as `--name` and as the result field name.
        - short: Unset | str
          Single-character short flag, used as `-c`.
        - type: Unset | Kind | bool | int | float | str | enum.Enum subclass
          Declared value type. Inferred from `default` when Unset.
        - default: Any
          Default value of the semantic type. Omitted scalars take the kind's
          zero value; arrays always start empty.
        - array: bool
          Accumulate repeated occurrences into a list.
        - descr: Unset | str
          Help text shown in usage output.
        """
        metadata = {
            "name": name,
            "short": short,
            "type": type,
            "default": default,
            "array": array,
            "descr": descr,
        }
        _sanitize_metadata(builtins.type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    def __setattr__(self, name, value, /):
        if not name.startswith("_") or hasattr(self, name):
            raise AttributeError(f"{type(self).__typename__} is immutable")
        object.__setattr__(self, name, value)

    @property
    def declared(self):
        """
        Raw declaration as (type, default); Unset marks omitted entries.
        """
        return self._type, self._default


def option(default, name, short=Unset, /, *, descr=Unset):
    """
    Declare a scalar option whose type is inferred from its default value.

    Example
        >>> option(8080, "port", "p", descr="listen port")
        option(name='port', short='p', type=Unset, array=False, default=8080, descr='listen port')
    """
    return Option(name, short, default=default, descr=descr)


__all__ = (
    "Option",
    "option",
)
