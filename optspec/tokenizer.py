"""
Pull-based tokenizer over a raw argument sequence.

The tokenizer never splits whole tokens. Instead it exposes a lookahead that
callers consume prefix by prefix, so `--name=value`, `--name= value`,
`-nvalue`, `-n=value` and `-n value` all reduce to the same sequence of
`eat` calls: when a prefix empties the lookahead, the next raw argument
slides in transparently.

Operations
- current(): lookahead, pulling the next raw argument when empty ("" at end).
- eat(prefix): strip `prefix` when the lookahead starts with it.
- next(): hand out the whole lookahead and advance.
- eof: the sequence is exhausted and the lookahead is empty.
- index: 1-based position of the raw argument the lookahead came from.
"""


class Tokenizer:
    __slots__ = ("_arguments", "_lookahead", "_exhausted", "_index")

    def __init__(self, arguments, /, *, skip=True):
        """
        Parameters
        - arguments: Iterable[str]
          Raw process arguments.
        - skip: bool
          Drop the first element (the program path), as found in sys.argv.
        """
        self._arguments = iter(arguments)
        self._lookahead = ""
        self._exhausted = False
        self._index = 0
        if skip:
            next(self._arguments, None)

    def _pull(self):
        # empty raw arguments carry nothing to match and are skipped
        while not self._lookahead and not self._exhausted:
            try:
                argument = next(self._arguments)
            except StopIteration:
                self._exhausted = True
                break
            if not isinstance(argument, str):
                raise TypeError(f"arguments must be strings, not {type(argument).__name__}")
            self._index += 1
            self._lookahead = argument

    @property
    def eof(self):
        self._pull()
        return self._exhausted and not self._lookahead

    @property
    def index(self):
        return self._index

    def current(self):
        self._pull()
        return self._lookahead

    def eat(self, prefix, /):
        """
        Strip `prefix` from the lookahead and return it, or return None.

        When the lookahead becomes empty it is refilled from the next raw
        argument. An empty prefix never matches.
        """
        if not prefix or not self.current().startswith(prefix):
            return None
        self._lookahead = self._lookahead[len(prefix):]
        self._pull()
        return prefix

    def next(self):
        token = self.current()
        self._lookahead = ""
        self._pull()
        return token

    def __iter__(self):
        while not self.eof:
            yield self.next()

    def __repr__(self):
        return "tokenizer(lookahead=%r, index=%d, eof=%r)" % (self._lookahead, self._index, self._exhausted and not self._lookahead)


__all__ = (
    "Tokenizer",
)
