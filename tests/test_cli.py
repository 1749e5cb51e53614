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
unittest for symex.cli and symex.repl

license: LGPL v.3
"""


import sys

from io import StringIO
from os.path import exists, isdir, join
from tempfile import TemporaryDirectory
from unittest import TestCase
from unittest.mock import patch

from symex.ast import Number, Symbol, List
from symex.cli import DEFAULT_HISTFILE, cli_option_parser, main
from symex.repl import PROMPT, repl

from . import captured_output


class CLI(TestCase):

    def test_options(self):
        parser = cli_option_parser("/usr/bin/symex")
        self.assertEqual(parser.prog, "symex")

        options = parser.parse_args([])
        self.assertIs(options.filename, None)
        self.assertIs(options.expression, None)
        self.assertFalse(options.interactive)
        self.assertTrue(options.history)
        self.assertEqual(options.histfile, DEFAULT_HISTFILE)


    def test_eval(self):
        with captured_output() as (out, err):
            status = main(["symex", "-e", "(+ 1 2) x"])

        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(),
                         "List([Symbol('+'), Number(1.0), Number(2.0)])\n"
                         "Symbol('x')\n")
        self.assertEqual(err.getvalue(), "")


    def test_eval_error(self):
        with captured_output() as (out, err):
            status = main(["symex", "--eval", "(a))"])

        self.assertEqual(status, 1)
        self.assertEqual(out.getvalue(), "")
        self.assertIn("Missing '('", err.getvalue())
        self.assertIn("<eval>", err.getvalue())


    def test_file(self):
        with TemporaryDirectory() as tmpdir:
            filename = join(tmpdir, "sample.sexp")
            with open(filename, "wt") as fout:
                fout.write("12.3\n(* (+ 1 2) (+ 3 4))\n")

            with captured_output() as (out, err):
                status = main(["symex", filename])

        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue().splitlines(), [
            "Number(12.3)",
            "List([Symbol('*'), "
            "List([Symbol('+'), Number(1.0), Number(2.0)]), "
            "List([Symbol('+'), Number(3.0), Number(4.0)])])",
        ])


    def test_file_error(self):
        with TemporaryDirectory() as tmpdir:
            filename = join(tmpdir, "broken.sexp")
            with open(filename, "wt") as fout:
                fout.write("(1 2\n")

            with captured_output() as (out, err):
                status = main(["symex", filename])

        self.assertEqual(status, 1)
        self.assertIn("Unmatched '('", err.getvalue())


    def test_missing_file(self):
        with TemporaryDirectory() as tmpdir:
            filename = join(tmpdir, "absent.sexp")

            with captured_output() as (out, err):
                status = main(["symex", filename])

        self.assertEqual(status, 1)
        self.assertEqual(out.getvalue(), "")
        self.assertIn("No such file", err.getvalue())
        self.assertIn("absent.sexp", err.getvalue())


    def test_deep_eval(self):
        depth = sys.getrecursionlimit() * 5
        src = ("(" * depth) + "x" + (")" * depth)

        with captured_output() as (out, err):
            status = main(["symex", "-e", src])

        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(),
                         ("List([" * depth) + "Symbol('x')" +
                         ("])" * depth) + "\n")


    def test_eval_and_filename(self):
        with captured_output():
            with self.assertRaises(SystemExit) as cm:
                main(["symex", "-e", "x", "some-file.sexp"])

        self.assertEqual(cm.exception.code, 2)


    def test_interactive_after_eval(self):
        stdin = StringIO("(b)\n")
        with patch("sys.stdin", stdin), captured_output() as (out, err):
            status = main(["symex", "--no-history", "-i", "-e", "a"])

        self.assertEqual(status, 0)
        lines = out.getvalue()
        self.assertIn("Symbol('a')\n", lines)
        self.assertIn("List([Symbol('b')])\n", lines)


class REPL(TestCase):

    def test_repl(self):
        stdin = StringIO("(a b)\n)\n1 2\n")
        stdout = StringIO()
        stderr = StringIO()

        result = repl(stdin, stdout, stderr)

        self.assertEqual(result, [Number(1.0), Number(2.0)])

        out = stdout.getvalue()
        self.assertIn(PROMPT, out)
        self.assertIn("List([Symbol('a'), Symbol('b')])\n", out)
        self.assertIn("Number(1.0)\nNumber(2.0)\n", out)
        self.assertIn("Missing '('", stderr.getvalue())


    def test_repl_eof(self):
        stdout = StringIO()
        stderr = StringIO()

        result = repl(StringIO(""), stdout, stderr)

        self.assertEqual(result, [])
        self.assertEqual(stdout.getvalue(), PROMPT + "\n")


    def test_repl_keeps_going(self):
        stdin = StringIO("1x\n(\n(ok)\n")
        stdout = StringIO()
        stderr = StringIO()

        result = repl(stdin, stdout, stderr)

        self.assertEqual(result, [List([Symbol("ok")])])
        errors = stderr.getvalue()
        self.assertIn("Invalid number", errors)
        self.assertIn("Unmatched '('", errors)


    def test_repl_deep(self):
        depth = sys.getrecursionlimit() * 5
        src = ("(" * depth) + "x" + (")" * depth)
        stdout = StringIO()
        stderr = StringIO()

        result = repl(StringIO(src + "\n(ok)\n"), stdout, stderr)

        self.assertEqual(result, [List([Symbol("ok")])])
        self.assertIn(("List([" * depth) + "Symbol('x')",
                      stdout.getvalue())
        self.assertEqual(stderr.getvalue(), "\n")


    def test_repl_history(self):
        with TemporaryDirectory() as tmpdir:
            histfile = join(tmpdir, "config", "symex", "history")

            repl(StringIO("(a)\n"), StringIO(), StringIO(),
                 histfile=histfile)

            self.assertTrue(isdir(join(tmpdir, "config", "symex")))
            self.assertTrue(exists(histfile))

            result = repl(StringIO("(b)\n"), StringIO(), StringIO(),
                          histfile=histfile)
            self.assertEqual(result, [List([Symbol("b")])])


    def test_repl_history_saved_on_error(self):
        with TemporaryDirectory() as tmpdir:
            histfile = join(tmpdir, "nested", "history")

            failing = patch("symex.repl.read", side_effect=RuntimeError)
            with failing:
                with self.assertRaises(RuntimeError):
                    repl(StringIO("(a)\n"), StringIO(), StringIO(),
                         histfile=histfile)

            self.assertTrue(exists(histfile))


#
# The end.
