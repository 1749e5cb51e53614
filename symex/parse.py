# This library is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation; either version 3 of the
# License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, see
# <http://www.gnu.org/licenses/>.


"""
symex.parse

The symex reader. A single forward pass over the source text both
tokenizes atoms and assembles lists. Atoms are classified by a small
state machine, and list nesting is tracked with an explicit stack
rather than recursion, so nesting depth is limited by memory alone.

`parse` reports malformed input by returning a `ParseResult` holding
a `ParseError`. `read` is the raising counterpart, for callers that
would rather catch a `SyntaxError`.

license: LGPL v.3
"""


from enum import Enum

from .ast import Number, Symbol, List
from .lib import SymexSyntaxError


__all__ = (
    "CharClass", "State", "ErrorKind",
    "ParseError", "ParseResult", "ReaderSyntaxError",
    "classify", "transition", "finalize_atom",
    "parse", "read", "read_file",
)


class CharClass(Enum):
    WHITESPACE = "whitespace"
    OPEN = "open-paren"
    CLOSE = "close-paren"
    DIGIT = "digit"
    OTHER = "other"


class State(Enum):
    START = "start"
    SYMBOL = "symbol"
    INTEGER = "integer"
    INCOMPLETE_FLOAT = "incomplete-float"
    FLOAT = "float"


class ErrorKind(Enum):
    INVALID_NUMBER = "Invalid number"
    INVALID_ATOM = "Invalid atom"
    NUMBER_PARSE_FAILURE = "Cannot parse number"
    MISSING_OPEN_PAREN = "Missing '('"
    UNMATCHED_OPEN_PAREN = "Unmatched '('"


_char_classes = {
    " ": CharClass.WHITESPACE,
    "\t": CharClass.WHITESPACE,
    "\n": CharClass.WHITESPACE,
    "\r": CharClass.WHITESPACE,
    "(": CharClass.OPEN,
    ")": CharClass.CLOSE,
}
_char_classes.update(dict.fromkeys("0123456789", CharClass.DIGIT))


_TERMINATORS = (CharClass.WHITESPACE, CharClass.OPEN, CharClass.CLOSE)

_DOT = "."


# (state, input) -> next state. None means the character cannot
# continue a numeric atom. Inputs are DIGIT, _DOT, or OTHER; the
# terminators are handled by the reader loop itself.
_transitions = {
    (State.START, CharClass.DIGIT): State.INTEGER,
    (State.START, _DOT): State.SYMBOL,
    (State.START, CharClass.OTHER): State.SYMBOL,

    (State.SYMBOL, CharClass.DIGIT): State.SYMBOL,
    (State.SYMBOL, _DOT): State.SYMBOL,
    (State.SYMBOL, CharClass.OTHER): State.SYMBOL,

    (State.INTEGER, CharClass.DIGIT): State.INTEGER,
    (State.INTEGER, _DOT): State.INCOMPLETE_FLOAT,
    (State.INTEGER, CharClass.OTHER): None,

    (State.INCOMPLETE_FLOAT, CharClass.DIGIT): State.FLOAT,
    (State.INCOMPLETE_FLOAT, _DOT): None,
    (State.INCOMPLETE_FLOAT, CharClass.OTHER): None,

    (State.FLOAT, CharClass.DIGIT): State.FLOAT,
    (State.FLOAT, _DOT): None,
    (State.FLOAT, CharClass.OTHER): None,
}


def classify(char):
    """
    Returns the `CharClass` of a single character
    """

    return _char_classes.get(char, CharClass.OTHER)


def transition(state, char):
    """
    Returns the state the atom state machine moves to when `char` is
    appended to an atom currently in `state`, or None if `char` makes
    a numeric atom invalid. Raises ValueError if `char` is whitespace
    or a parenthesis, since those end an atom rather than extend it.
    """

    charclass = classify(char)
    if charclass in _TERMINATORS:
        raise ValueError("%r terminates atoms" % char)

    return _next_state(state, char, charclass)


def _next_state(state, char, charclass):
    return _transitions[(state, _DOT if char == _DOT else charclass)]


def finalize_atom(state, text):
    """
    Converts the text of a completed atom into a node, according to
    the state the atom ended in. Returns an `ErrorKind` instead of a
    node when the atom cannot produce a value.
    """

    if state is State.SYMBOL:
        return Symbol(text)

    elif state in (State.INTEGER, State.FLOAT):
        try:
            return Number(float(text))
        except ValueError:
            return ErrorKind.NUMBER_PARSE_FAILURE

    else:
        # START with nothing accumulated, or a trailing decimal point
        return ErrorKind.INVALID_ATOM


class ParseError(object):
    """
    The first problem found in a source text, and the (line, column)
    at which it was found. Lines start from 1, columns from 0.
    """

    __slots__ = ("kind", "position")


    def __init__(self, kind, position=(1, 0)):
        self.kind = kind
        self.position = position


    @property
    def message(self):
        return self.kind.value


    def exception(self, filename=None, text=None):
        """
        Creates a `ReaderSyntaxError` describing this error
        """

        return ReaderSyntaxError(self.kind, self.position,
                                 filename=filename, text=text)


    def __eq__(self, other):
        return ((type(self) is type(other)) and
                (self.kind is other.kind) and
                (self.position == other.position))


    def __ne__(self, other):
        return not (self == other)


    def __hash__(self):
        return hash((self.kind, self.position))


    def __repr__(self):
        return "ParseError(%s, position=%r)" % (self.kind.name,
                                                self.position)


    def __str__(self):
        return "%s at line %i, column %i" % (self.message, *self.position)


class ParseResult(object):
    """
    The outcome of `parse`. Exactly one of `value` (the list of
    top-level nodes) and `error` (a `ParseError`) is set.
    """

    __slots__ = ("value", "error")


    def __init__(self, value=None, error=None):
        if (value is None) == (error is None):
            raise ValueError("exactly one of value or error is required")

        self.value = value
        self.error = error


    @property
    def ok(self):
        return self.error is None


    def unwrap(self, filename=None, source=None):
        """
        Returns the parsed nodes, or raises the `ReaderSyntaxError`
        for the error. When `source` is given, the offending line is
        attached to the exception.
        """

        error = self.error
        if error is None:
            return self.value

        text = None
        if source is not None:
            text = _source_line(source, error.position[0])

        raise error.exception(filename, text)


    def __eq__(self, other):
        return ((type(self) is type(other)) and
                (self.value == other.value) and
                (self.error == other.error))


    def __ne__(self, other):
        return not (self == other)


    def __repr__(self):
        if self.error is None:
            return "ParseResult(value=%r)" % (self.value, )
        else:
            return "ParseResult(error=%r)" % (self.error, )


class ReaderSyntaxError(SymexSyntaxError):
    """
    An error in s-expression syntax during read time
    """

    def __init__(self, kind, location=None, filename=None, text=None):
        super().__init__(kind.value, location, filename=filename, text=text)
        self.kind = kind


def _source_line(source, lineno):
    lines = source.split("\n")
    if 0 < lineno <= len(lines):
        return lines[lineno - 1]
    else:
        return None


def _failure(kind, position):
    return ParseResult(error=ParseError(kind, position))


def _close_atom(state, accum, atom_position, position):
    """
    Finalizes the accumulated atom. Returns a (node, error) pair, one
    of which is None. `position` is where the terminator was found.
    """

    atom = finalize_atom(state, "".join(accum))

    if atom is ErrorKind.NUMBER_PARSE_FAILURE:
        return None, ParseError(atom, atom_position)
    elif atom is ErrorKind.INVALID_ATOM:
        return None, ParseError(atom, position)
    else:
        return atom, None


def parse(source):
    """
    Reads every top-level expression in the string `source`.

    Returns a `ParseResult` whose value is a list of nodes (possibly
    empty) on success. On failure the result carries only the first
    error found; nothing read before the error is kept.
    """

    accum = []
    exprs = []
    stack = []
    state = State.START
    atom_position = None

    lin, col = 1, 0

    for c in source:
        position = lin, col

        if c == "\n":
            lin += 1
            col = 0
        elif c == "\r":
            col = 0
        else:
            col += 1

        charclass = classify(c)

        if charclass not in _TERMINATORS:
            if state is State.START:
                atom_position = position

            state = _next_state(state, c, charclass)
            if state is None:
                return _failure(ErrorKind.INVALID_NUMBER, position)

            accum.append(c)
            continue

        if state is not State.START:
            atom, error = _close_atom(state, accum, atom_position, position)
            if error is not None:
                return ParseResult(error=error)

            exprs.append(atom)
            accum.clear()
            state = State.START

        if charclass is CharClass.OPEN:
            # suspend the current list and begin collecting a new one
            stack.append((position, exprs))
            exprs = []

        elif charclass is CharClass.CLOSE:
            if not stack:
                return _failure(ErrorKind.MISSING_OPEN_PAREN, position)

            _opened, parent = stack.pop()
            parent.append(List(exprs))
            exprs = parent

    if state is not State.START:
        atom, error = _close_atom(state, accum, atom_position, (lin, col))
        if error is not None:
            return ParseResult(error=error)

        exprs.append(atom)

    if stack:
        opened, _parent = stack[-1]
        return _failure(ErrorKind.UNMATCHED_OPEN_PAREN, opened)

    return ParseResult(exprs)


def read(source, filename=None):
    """
    Returns the list of top-level nodes in `source`. Raises
    `ReaderSyntaxError` to complain about syntactic difficulties.
    """

    return parse(source).unwrap(filename, source)


def read_file(filename):
    """
    Reads the entire contents of `filename` and returns its top-level
    nodes, as `read`
    """

    with open(filename, "rt") as fin:
        source = fin.read()

    return read(source, filename)


#
# The end.
