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


from contextlib import contextmanager, redirect_stderr, redirect_stdout
from io import StringIO

from symex.ast import List


def list_depth(node):
    """
    Nesting depth of a chain of first-children, counted without
    recursion
    """

    depth = 0
    while isinstance(node, List):
        depth += 1
        node = node[0] if len(node) else None
    return depth


@contextmanager
def captured_output():
    out, err = StringIO(), StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        yield out, err


#
# The end.
