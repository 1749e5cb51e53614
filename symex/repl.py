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
Read-Print-Loop for symex

license: LGPL v.3
"""


import sys

from os import makedirs
from os.path import dirname, exists
from traceback import format_exception_only

from .parse import read


PROMPT = "symex > "


def repl(stdin=sys.stdin, stdout=sys.stdout, stderr=sys.stderr,
         histfile=None):
    """
    enter into a read-print-loop, using stdin, stdout, and stderr for
    user I/O. Each line is read on its own, and the repr of every
    top-level expression in it is printed.

    returns the list of expressions read by the final successful line.
    """

    if histfile:
        load_history(histfile)

    try:
        result = read_print_loop(stdin, stdout, stderr)

    finally:
        if histfile:
            save_history(histfile)

    print(file=stdout)
    return result


def read_print_loop(stdin, stdout, stderr):
    result = []

    while True:
        try:
            line = read_line(stdin, stdout)
            result = read(line, "<stdin>")
            for expr in result:
                print(repr(expr), file=stdout)

        except KeyboardInterrupt as ki:
            print(ki, file=stderr)
            stderr.flush()
            break

        except EOFError:
            print(file=stderr)
            stderr.flush()
            break

        except SyntaxError:
            show_syntaxerr(file=stderr)
            stderr.flush()

        stdout.flush()

    return result


def read_line(stdin, stdout, prompt=PROMPT):
    """
    Reads a single line of input, raising EOFError when stdin is
    exhausted
    """

    if stdin is sys.stdin:
        return input(prompt)

    stdout.write(prompt)
    stdout.flush()

    line = stdin.readline()
    if not line:
        raise EOFError()

    return line.rstrip("\n")


def load_history(histfile):
    import readline

    if exists(histfile):
        readline.read_history_file(histfile)


def save_history(histfile):
    import readline

    dirpath = dirname(histfile)
    if dirpath:
        makedirs(dirpath, exist_ok=True)

    readline.write_history_file(histfile)


def show_syntaxerr(file=sys.stderr):
    type_, value, tb = sys.exc_info()
    sys.last_type = type_
    sys.last_value = value
    sys.last_traceback = tb

    lines = format_exception_only(type_, value)
    print(''.join(lines), file=file)


#
# The end.
