"""
Usage text for a field table.

Layout (one line per option, declaration order):

    Usage: <program> [OPTION]...
      -c, --name                 tag        description
          --other                [tag]      description

- 2-space indent, then '-c, ' or 4 spaces.
- '--' + name padded to NAME_WIDTH.
- type tag padded to TAG_WIDTH, bracketed for array options.
- description when present; trailing spaces are stripped.

format_usage() returns plain text; render_usage() returns the same layout as
a styled rich Text; write_usage() hands it to a rich console. Formatting is
separate from writing so callers choose the sink.
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .utils import Unset

NAME_WIDTH = 20
TAG_WIDTH = 10


def _columns(field):
    short = f"-{field.short}, " if field.short is not None else " " * 4
    name = "--" + field.name.ljust(NAME_WIDTH)
    return short, name, field.tag.ljust(TAG_WIDTH), field.descr or ""


def format_usage(table, program, /):
    """
    Return usage text for `table` as a single string (lines joined by '\\n').
    """
    lines = [f"Usage: {program} [OPTION]..."]
    for field in table:
        short, name, tag, descr = _columns(field)
        lines.append(f"  {short}{name} {tag} {descr}".rstrip())
    return "\n".join(lines)


def render_usage(table, program, /, *, colorful=True):
    """
    Return usage as a rich Text with the same layout as format_usage().

    Palette keys
    - usage-label, program-name, usage-section
    - short-name, option-name, tag, array-tag, description

    Customization
    - Define a mapping named __styles__ in __main__ to override any entry.
    - When colorful is False, styling is suppressed.
    """
    styles = defaultdict(str, {
        "usage-label": "bold #00E6FF",  # cyan
        "program-name": "bold #FF4D94",  # magenta-pink
        "usage-section": "bold #36C5F0",  # sky-blue
        "short-name": "bold #22C55E",  # green
        "option-name": "bold #00E6FF",  # cyan
        "tag": "bold #FFD600",  # amber
        "array-tag": "bold italic #FFD600",
        "description": "#9CA3AF",  # muted gray
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    lines = [Text.assemble(
        ("Usage:", styler("usage-label")),
        " ",
        (str(program), styler("program-name")),
        " ",
        ("[OPTION]...", styler("usage-section")),
    )]
    for field in table:
        short, name, tag, descr = _columns(field)
        line = Text.assemble(
            "  ",
            (short, styler("short-name") if field.short is not None else ""),
            (name, styler("option-name")),
            " ",
            (tag, styler("array-tag" if field.array else "tag")),
            " ",
            (descr, styler("description")),
        )
        line.rstrip()
        lines.append(line)
    return Text("\n").join(lines)


def write_usage(table, program, /, console=Unset, *, colorful=True):
    """
    Write usage to a rich console (stderr when none is given).
    """
    if console is Unset:
        console = Console(stderr=True)
    console.print(render_usage(table, program, colorful=colorful), highlight=False, soft_wrap=True)


__all__ = (
    "NAME_WIDTH",
    "TAG_WIDTH",
    "format_usage",
    "render_usage",
    "write_usage",
)
