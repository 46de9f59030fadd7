import enum

from rich.pretty import pprint

from optspec import *


class Level(enum.Enum):
    debug = 10
    info = 20
    warning = 30


parser = OptionParser(
    option(False, "help", "h", descr="show this help and exit"),
    option(Level.info, "level", "l", descr="log level"),
    Option("threads", "t", type=Uint(bits=8), default=4, descr="worker threads"),
    Option("include", "I", type=str, array=True, descr="search path (repeatable)"),
)


if __name__ == '__main__':
    with parser.parse_or_exit() as options:
        if options.help:
            parser.write_usage()
        else:
            pprint(options)
