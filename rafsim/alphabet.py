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
"""Monomer alphabets

An Alphabet is the ordered set of monomer symbols from which polymers
are drawn. The order in which symbols are declared determines the
order in which polymers are enumerated.
"""


class Alphabet(object):
    """Ordered, de-duplicated set of monomer symbols

    Alphabets are immutable values. They can be constructed from any
    iterable of single-character strings:

    >>> Alphabet('AB') == Alphabet(['A', 'B', 'A'])
    True

    The first occurrence of a symbol determines its position.
    """
    def __init__(self, symbols):
        if symbols is None:
            raise ValueError("alphabet symbols must not be None.")
        letters = []
        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValueError(
                    "alphabet symbols must be single characters, got %r."
                    % (symbol,)
                )
            if symbol not in letters:
                letters.append(symbol)
        self._letters = tuple(letters)
        self._positions = {symbol: i for i, symbol in enumerate(letters)}

    @property
    def letters(self):
        """Tuple of monomer symbols in declaration order"""
        return self._letters

    def __len__(self):
        return len(self._letters)

    def __iter__(self):
        return iter(self._letters)

    def __getitem__(self, position):
        return self._letters[position]

    def __contains__(self, symbol):
        return symbol in self._positions

    def index(self, symbol):
        """Position of symbol in the alphabet"""
        try:
            return self._positions[symbol]
        except KeyError:
            raise ValueError("%r is not in %r" % (symbol, self))

    def is_word(self, string):
        """True if string is a non-empty word over the alphabet"""
        return bool(string) and all(c in self._positions for c in string)

    def __eq__(self, other):
        return isinstance(other, Alphabet) and self._letters == other._letters

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self._letters)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, ''.join(self._letters))
