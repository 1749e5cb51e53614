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
symex.lib

Exception types shared across symex

license: LGPL v.3
"""


__all__ = (
    "SymexException", "SymexSyntaxError",
)


class SymexException(Exception):
    """
    Base class for error-driven Exceptions raised by symex
    """
    pass


class SymexSyntaxError(SyntaxError):
    """
    An error in s-expression syntax, found while reading source text.
    """

    def __init__(self, message, location=None, filename=None, text=None):
        if not location:
            location = (1, 0)

        # SyntaxError columns are 1-based, ours are 0-based
        line, col = location
        super().__init__(message, (filename or "<string>", line,
                                   col + 1, text))
        self.location = location
        self.print_file_and_line = bool(filename)


#
# The end.
