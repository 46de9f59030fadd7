"""
Parse results: one name-indexed, order-preserving table of typed slots.

An OptionsResult is created from a FieldTable with every slot set to its
field's default, then filled in by the engine. After a successful parse the
caller owns it, including every string value and every array list.

Ownership
- release() drops all values, clears and detaches array lists, and closes
  the result; any later access raises ValueError (like a closed file).
- The result is a context manager that releases on exit:

    with parser.parse(sys.argv) as options:
        serve(options.port)
"""
from collections.abc import Mapping

from rich.pretty import Pretty


class OptionsResult(Mapping):
    __slots__ = ("_table", "_values", "_released")

    def __init__(self, table, /):
        object.__setattr__(self, "_table", table)
        object.__setattr__(self, "_values", table.defaults())
        object.__setattr__(self, "_released", False)

    def _check(self):
        if self._released:
            raise ValueError("options result has been released")

    @property
    def table(self):
        return self._table

    @property
    def released(self):
        return self._released

    def __getitem__(self, name):
        self._check()
        return self._values[name]

    def __getattr__(self, name):
        # only reached for names that are not slots, methods or properties
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"options result has no field {name!r}") from None

    def __setattr__(self, name, value, /):
        raise AttributeError("options result fields are set by parsing only")

    def __iter__(self):
        self._check()
        return iter(self._values)

    def __len__(self):
        self._check()
        return len(self._values)

    def __dir__(self):
        return [*super().__dir__(), *(() if self._released else self._values)]

    def store(self, field, value, /):
        """Overwrite a scalar slot, or append to an array slot."""
        self._check()
        if field.array:
            self._values[field.name].append(value)
        else:
            self._values[field.name] = value

    def release(self):
        """
        Drop every value owned by this result.

        Array lists are cleared before being detached, so aliases the caller
        kept are emptied too. Calling release() twice is harmless.
        """
        if self._released:
            return
        for field in self._table:
            if field.array:
                self._values[field.name].clear()
        self._values.clear()
        object.__setattr__(self, "_released", True)

    def __enter__(self):
        self._check()
        return self

    def __exit__(self, *unused):
        self.release()

    def __rich__(self):
        if self._released:
            return Pretty("options(released)")
        return Pretty(dict(self._values))

    def __repr__(self):
        if self._released:
            return "options(released)"
        return "options(%s)" % ", ".join("%s=%r" % pair for pair in self._values.items())


__all__ = (
    "OptionsResult",
)
