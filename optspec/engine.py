r"""
Optspec match & coerce engine.

For every argument the engine walks the same states:

    ExpectDash → ResolveName → ExpectSeparator → ResolveValue → Coerce → Store

- ExpectDash / ResolveName
  • '--name[=...]' resolves a long name (everything up to '=').
  • '-c...' resolves the single character after the dash as a short flag.
  • anything else, an empty name, or an unknown name is a fault.
- ExpectSeparator
  • long non-boolean options require '=' right after the name.
  • short options accept an optional '='.
- ResolveValue
  • the whole remaining lookahead is the value, whether it is glued to the
    name ('-i5', '--n=5') or is the next raw argument ('-i 5', '--n= 5').
  • booleans without '=' follow the inversion rule: at end of input or when
    the next token looks like an option, the field becomes the negation of
    its declared default; otherwise the next token is a boolean literal.
- Coerce: optspec.kinds.coerce.
- Store: arrays append, scalars overwrite (last occurrence wins).

The first fault stops the parse. The partially filled result is released
before the fault propagates, so a failed parse leaves nothing behind.
"""
import difflib
import logging

from . import kinds
from .faults import (
    ExpectedSeparatorError,
    InvalidOptionError,
    InvalidShortOptionError,
    MissingValueError,
)
from .result import OptionsResult
from .tokenizer import Tokenizer
from .utils import ordinal

log = logging.getLogger(__name__)


def _suggest(word, candidates):
    return difflib.get_close_matches(word, candidates, 3)


def _resolve_long(table, tokens):
    token = tokens.current()
    index = tokens.index
    name = token[2:].partition("=")[0]

    if not name:
        raise InvalidOptionError(
            "option %r at %s position has no name" % (token, ordinal(index)),
            hint="write long options as --name=value",
            token=token,
            index=index,
        )

    if (field := table.get(name)) is None:
        suggestions = tuple("--" + match for match in _suggest(name, table.names))
        try:
            hint = "did you mean %r?" % suggestions[0]
        except IndexError:
            hint = "check the usage text for the available options"
        raise InvalidOptionError(
            "unknown option '--%s' at %s position" % (name, ordinal(index)),
            hint=hint,
            token=token,
            index=index,
            suggestions=suggestions,
        )

    tokens.eat("--")
    tokens.eat(name)
    return field, "--" + name, index


def _resolve_short(table, tokens):
    token = tokens.current()
    index = tokens.index

    if len(token) < 2:
        raise InvalidOptionError(
            "lone dash at %s position is not an option" % ordinal(index),
            hint="write short options as -c value",
            token=token,
            index=index,
        )

    short = token[1]
    if (field := table.find_short(short)) is None:
        suggestions = tuple("-" + match for match in _suggest(short, tuple(table.shorts)))
        raise InvalidShortOptionError(
            "unknown short option '-%s' at %s position" % (short, ordinal(index)),
            hint="check the usage text for the available short options",
            token=token,
            index=index,
            suggestions=suggestions,
        )

    tokens.eat("-")
    tokens.eat(short)
    return field, "-" + short, index


def _take_value(field, spelling, index, tokens):
    if tokens.eof:
        raise MissingValueError(
            "option %r at %s position is missing its value" % (spelling, ordinal(index)),
            hint="pass a %s value (for example: %s)" % (field.kind.tag, _example(field, spelling)),
            token=spelling,
            index=index,
            field=field,
        )
    return tokens.next()


def _example(field, spelling):
    separator = "=" if spelling.startswith("--") else " "
    match field.kind:
        case kinds.Enum() as kind:
            sample = kind.choices[0]
        case kinds.Bool():
            sample = "true"
        case kinds.String():
            sample = "text"
        case kind:
            sample = kinds.unparse(kind, kinds.zero(kind))
    return spelling + separator + sample


def _coerce(field, spelling, token, index):
    try:
        return kinds.coerce(field.kind, token)
    except ValueError as error:
        raise field.kind.error(
            "invalid %s value %r for option %r at %s position" % (field.kind.tag, token, spelling, ordinal(index)),
            hint=str(error),
            token=token,
            index=index,
            field=field,
        ) from error


def _match(table, tokens, result):
    token = tokens.current()

    # ExpectDash / ResolveName
    if token.startswith("--"):
        field, spelling, index = _resolve_long(table, tokens)
    elif token.startswith("-"):
        field, spelling, index = _resolve_short(table, tokens)
    else:
        raise InvalidOptionError(
            "unexpected argument %r at %s position" % (token, ordinal(tokens.index)),
            hint="positional arguments are not accepted; options start with '-' or '--'",
            token=token,
            index=tokens.index,
        )

    log.debug("field_name: %r (%s)", field.name, spelling)

    # ExpectSeparator
    if isinstance(field.kind, kinds.Bool):
        if tokens.eat("=") is None and (tokens.eof or tokens.current().startswith("-")):
            value = not field.default
            log.debug("inverted %r to %r", field.name, value)
            result.store(field, value)
            return
    elif spelling.startswith("--"):
        if not tokens.eof and tokens.eat("=") is None:
            raise ExpectedSeparatorError(
                "option %r at %s position expects '=' before its value" % (spelling, ordinal(index)),
                hint="write it as %s" % _example(field, spelling),
                token=spelling,
                index=index,
                field=field,
            )
    else:
        tokens.eat("=")

    # ResolveValue / Coerce / Store
    index = tokens.index
    raw = _take_value(field, spelling, index, tokens)
    log.debug("token: %r", raw)
    result.store(field, _coerce(field, spelling, raw, index))


def parse(table, arguments, /, *, skip=True):
    """
    Match raw arguments against a field table.

    Parameters
    - table: FieldTable
    - arguments: Iterable[str]
      Raw arguments; the first one (program path) is skipped unless skip=False.

    Returns
    - OptionsResult owned by the caller.

    Raises
    - ParseError (subclasses), for the first faulty argument.
    """
    result = OptionsResult(table)
    tokens = Tokenizer(arguments, skip=skip)
    try:
        while not tokens.eof:
            _match(table, tokens, result)
    except BaseException:
        result.release()
        raise
    return result


__all__ = (
    "parse",
)
