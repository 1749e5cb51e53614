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
symex, a non-recursive s-expression reader

license: LGPL v.3
"""


from .lib import SymexException, SymexSyntaxError
from .ast import Node, Number, Symbol, List, is_number, is_symbol, is_list
from .parse import (
    ErrorKind, ParseError, ParseResult, ReaderSyntaxError,
    parse, read, read_file,
)


__all__ = (
    "SymexException", "SymexSyntaxError",
    "Node", "Number", "Symbol", "List",
    "is_number", "is_symbol", "is_list",
    "ErrorKind", "ParseError", "ParseResult", "ReaderSyntaxError",
    "parse", "read", "read_file",
)


#
# The end.
