"""
OptionParser: a field table bound to a program name.

    from optspec import OptionParser, Option, option, Uint

    parser = OptionParser(
        option(False, "help", "h", descr="show this help"),
        option(8080, "port", "p", descr="listen port"),
        Option("include", "I", type=str, array=True, descr="search path"),
    )

    with parser.parse_or_exit() as options:
        ...

The registry is built once, in the constructor; configuration errors surface
there. parse() may be called any number of times with the same parser.
"""
import copy
import os.path
import sys

from rich.console import Console

from . import engine, registry, usage
from .faults import ParseError
from .utils import *


class OptionParser:
    """
    Parameters
    - *descriptors: Option
      Declared options, in result and usage order.
    - program: Unset | str
      Name shown in usage and faults. Defaults to `__prog__` in __main__, then
      to the basename of sys.argv[0].
    - colorful: bool
      Style usage and faults when written to a console.
    """
    __slots__ = ("_table", "_program", "_colorful")

    table = mirror("table")
    colorful = mirror("colorful")

    def __init__(self, *descriptors, program=Unset, colorful=True):
        if not isinstance(program, str | Unset):
            raise TypeError("OptionParser 'program' must be a string")
        elif isinstance(program, str) and not (program := program.strip()):
            raise ValueError("OptionParser 'program' cannot be empty")
        self._table = registry.build(descriptors)
        self._program = program
        self._colorful = bool(colorful)

    @property
    def program(self):
        if self._program is not Unset:
            return self._program
        try:
            return getattr(__import__("__main__"), "__prog__")
        except AttributeError:
            pass
        return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "optspec"

    def parse(self, arguments=Unset, /):
        """
        Parse `arguments` (default: sys.argv; the first element is skipped).

        Raises ParseError on the first faulty argument.
        """
        return engine.parse(self._table, coalesce(arguments, sys.argv))

    def usage(self):
        return usage.format_usage(self._table, self.program)

    def write_usage(self, console=Unset, /):
        usage.write_usage(self._table, self.program, console, colorful=self._colorful)

    def parse_or_exit(self, arguments=Unset, /, console=Unset):
        """
        Caller-side policy: parse, or report the fault with usage and exit(1).

        The fault and the usage text are written to `console` (stderr by
        default).
        """
        try:
            return self.parse(arguments)
        except ParseError as fault:
            if console is Unset:
                console = Console(stderr=True)
            console.print(copy.replace(fault, prog=self.program, colorful=self._colorful))
            self.write_usage(console)
            sys.exit(1)

    def __rich_repr__(self):
        yield "program", self.program
        yield "table", self._table

    def __repr__(self):
        return "option-parser(program=%r, table=%r)" % (self.program, self._table)


__all__ = (
    "OptionParser",
)
