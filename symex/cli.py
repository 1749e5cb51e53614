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
symex.cli

Command-line interface for reading s-expressions from a file, from
an argument, or interactively

license: LGPL v.3
"""


import sys

from appdirs import AppDirs
from argparse import ArgumentParser
from os.path import basename, join

from .lib import SymexException
from .parse import read, read_file
from .repl import repl, show_syntaxerr


_APPDIR = AppDirs("symex")

DEFAULT_HISTFILE = join(_APPDIR.user_config_dir, "history")


class CLIException(SymexException):
    pass


def cli_read(options):
    """
    Reads the expressions named by the options, either from the
    `--eval` text or from the file
    """

    if options.expression is not None:
        if options.filename:
            raise CLIException("--eval cannot be combined with FILENAME")
        return read(options.expression, "<eval>")

    else:
        return read_file(options.filename)


def cli(options):
    """
    Run as from the command line, with the given options. Returns the
    process exit status.
    """

    stdout = sys.stdout

    if options.filename or options.expression is not None:
        try:
            exprs = cli_read(options)

        except SyntaxError:
            show_syntaxerr(file=sys.stderr)
            return 1

        except OSError as ose:
            print(ose, file=sys.stderr)
            return 1

        for expr in exprs:
            print(repr(expr), file=stdout)

        if not options.interactive:
            return 0

    histfile = options.histfile if options.history else None
    repl(sys.stdin, stdout, sys.stderr, histfile=histfile)

    return 0


def cli_option_parser(name):
    """
    Create an `ArgumentParser` instance with the options requested by
    the `cli` function
    """

    parser = ArgumentParser(prog=basename(name))

    parser.add_argument("filename", nargs="?", default=None)

    parser.add_argument("-e", "--eval", dest="expression",
                        action="store", default=None,
                        help="Read the given text instead of a file")

    parser.add_argument("-i", "--interactive", dest="interactive",
                        action="store_true", default=False,
                        help="Enter interactive mode after reading the"
                        " given file or text")

    parser.add_argument("--histfile", dest="histfile",
                        action="store", default=DEFAULT_HISTFILE,
                        help="REPL history file")

    parser.add_argument("--no-history", dest="history",
                        action="store_false", default=True,
                        help="Do not load or save REPL history")

    return parser


def main(args=sys.argv):
    """
    Entry point for the symex command
    """

    name, *args = args

    parser = cli_option_parser(name)
    options = parser.parse_args(args)

    try:
        return cli(options)

    except CLIException as ce:
        parser.error(str(ce))

    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())


#
# The end.
