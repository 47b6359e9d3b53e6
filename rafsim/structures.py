# Copyright 2018 Harold Fellermann
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""Collection of useful data structures"""

from collections.abc import Mapping
from numbers import Number


class multiset(dict):
    """A multiset implementation

    Maps items to positive integer counts. Reactions use multisets for
    their reactants and products, and compositions of polymers are
    multisets of monomers.
    (c.f. https://en.wikipedia.org/wiki/Multiset)
    """
    def __init__(self, *args, **opts):
        if len(args) > 1:
            raise TypeError("multiset expects at most 1 argument, got %d" % len(args))
        arg = args[0] if args else {}
        if isinstance(arg, Mapping):
            super(multiset, self).__init__(arg, **opts)
        else:
            arg = list(arg)
            items = {item: arg.count(item) for item in set(arg)}
            super(multiset, self).__init__(items, **opts)
        if not all(isinstance(value, Number) for value in self.values()):
            raise TypeError("multiset values must be numbers.")
        for item in [item for item, count in self.items() if not count]:
            del self[item]

    @property
    def domain(self):
        """The underlying domain (set)"""
        return set(self)

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, super(multiset, self).__repr__())

    def __eq__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        other = other if isinstance(other, multiset) else multiset(other)
        return (all(other[item] == count for item, count in self.items())
                and all(self[item] == count for item, count in other.items()))

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __le__(self, other):
        return all(other.get(item, 0) >= count for item, count in self.items())

    def __len__(self):
        return sum(self.values())

    def __contains__(self, item):
        if isinstance(item, multiset):
            return item <= self
        else:
            return super(multiset, self).__contains__(item)

    def __getitem__(self, item):
        return self.get(item, 0)

    def __setitem__(self, item, count):
        if count:
            super(multiset, self).__setitem__(item, count)
        else:
            del self[item]

    def __delitem__(self, item):
        if super(multiset, self).__contains__(item):
            super(multiset, self).__delitem__(item)

    def __add__(self, other):
        result = type(self)(self)
        result += other
        return result

    def __iadd__(self, other):
        for item, count in other.items():
            self[item] += count
        return self

    def __sub__(self, other):
        result = type(self)(self)
        for item, count in other.items():
            if result[item] > count:
                result[item] -= count
            else:
                del result[item]
        return result

    def union(self, *mappings):
        """The union (sum) of self and all other multisets"""
        result = type(self)(self)
        for mapping in mappings:
            result += mapping
        return result

    def sorted_items(self):
        """Items as a sorted tuple of (item, count) pairs.

        Two equal multisets have equal sorted items, which makes the
        tuple usable as a hash key."""
        return tuple(sorted(self.items()))


def composition(polymers):
    """Multiset of monomers contained in a sequence of polymers.

    The argument may be a plain sequence of strings or a multiset
    mapping polymers to their stoichiometric factors:

    >>> composition(['AB', 'A']) == multiset({'A': 2, 'B': 1})
    True
    """
    counts = polymers.items() if isinstance(polymers, Mapping) else ((p, 1) for p in polymers)
    result = multiset()
    for polymer, n in counts:
        for monomer in polymer:
            result[monomer] += n
    return result
