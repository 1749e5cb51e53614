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
Abstract Syntax Tree for symex

Every expression read is exactly one of `Number`, `Symbol`, or
`List`. Nodes are sealed once built; a `List` keeps its children in a
tuple and nothing in symex mutates a node after construction.

license: LGPL v.3
"""


from abc import ABCMeta


__all__ = (
    "Node", "Number", "Symbol", "List",
    "is_number", "is_symbol", "is_list",
)


class Node(metaclass=ABCMeta):
    """
    Base class for all AST node types
    """

    __slots__ = ()


    def __init__(self):
        raise TypeError("Node cannot be instantiated directly")


    def __ne__(self, other):
        return not (self == other)


    def __str__(self):
        return repr(self)


class Number(Node):
    """
    A numeric literal, always held as a float
    """

    __slots__ = ("value", )


    def __init__(self, value):
        self.value = float(value)


    def __eq__(self, other):
        return ((type(self) is type(other)) and
                (self.value == other.value))


    def __hash__(self):
        return hash((Number, self.value))


    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.value)


class Symbol(Node):
    """
    An identifier, kept exactly as it appeared in the source
    """

    __slots__ = ("name", )


    def __init__(self, name):
        self.name = str(name)


    def __eq__(self, other):
        return ((type(self) is type(other)) and
                (self.name == other.name))


    def __hash__(self):
        return hash((Symbol, self.name))


    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.name)


class List(Node):
    """
    A parenthesized, possibly empty, sequence of sub-expressions
    """

    __slots__ = ("children", )


    def __init__(self, children=()):
        self.children = tuple(children)


    def __len__(self):
        return len(self.children)


    def __iter__(self):
        return iter(self.children)


    def __getitem__(self, index):
        return self.children[index]


    def __eq__(self, other):
        # compare pairwise with a work list, so that trees of any depth
        # compare without recursion
        pending = [(self, other)]

        while pending:
            left, right = pending.pop()

            if type(left) is not type(right):
                return False

            elif isinstance(left, List):
                if len(left.children) != len(right.children):
                    return False
                pending.extend(zip(left.children, right.children))

            elif left != right:
                return False

        return True


    def __hash__(self):
        # a pre-order walk recording each list's length identifies the
        # tree shape
        flat = []
        pending = [self]

        while pending:
            node = pending.pop()
            if isinstance(node, List):
                flat.append((List, len(node.children)))
                pending.extend(reversed(node.children))
            else:
                flat.append(node)

        return hash(tuple(flat))


    def __repr__(self):
        parts = ["%s([" % type(self).__name__]
        pending = [iter(self.children)]
        separate = False

        while pending:
            child = next(pending[-1], None)

            if child is None:
                pending.pop()
                parts.append("])")
                separate = True
                continue

            if separate:
                parts.append(", ")

            if isinstance(child, List):
                parts.append("%s([" % type(child).__name__)
                pending.append(iter(child.children))
                separate = False
            else:
                parts.append(repr(child))
                separate = True

        return "".join(parts)


def _type_predicate(name, typeobj):
    def check(value):
        return isinstance(value, typeobj)
    check.__name__ = name
    check.__qualname__ = name
    return check


is_number = _type_predicate("is_number", Number)
is_symbol = _type_predicate("is_symbol", Symbol)
is_list = _type_predicate("is_list", List)


#
# The end.
