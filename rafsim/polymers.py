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
"""Exhaustive polymer enumeration

This module provides the PolymerEnumerator, which generates every
polymer up to a given length that can be drawn from an Alphabet.
"""

import logging

from .alphabet import Alphabet


class PolymerEnumerator(object):
    """Generate every polymer over an alphabet up to a maximum length

    For an alphabet of k symbols and maximum length L, the enumerator
    produces exactly k + k**2 + ... + k**L distinct polymers. Polymers
    are ordered by length and, within one length, lexicographically
    with respect to the order of the alphabet:

    >>> PolymerEnumerator(2, Alphabet('BA')).generate()
    ['B', 'A', 'BB', 'BA', 'AB', 'AA']
    """
    def __init__(self, max_length, alphabet):
        if max_length <= 0:
            raise ValueError("max_length must be greater than 0.")
        if alphabet is None:
            raise ValueError("alphabet must not be None.")
        self.max_length = max_length
        self.alphabet = alphabet if isinstance(alphabet, Alphabet) else Alphabet(alphabet)

    def count(self):
        """Number of polymers generated by self.generate()"""
        k = len(self.alphabet)
        return sum(k**n for n in range(1, self.max_length+1))

    def generate(self):
        """List of all polymers of length 1 to self.max_length"""
        polymers = []
        for length in range(1, self.max_length+1):
            polymers.extend(self.words(length))
        logging.debug("Enumerated %d polymers over %r up to length %d",
                      len(polymers), self.alphabet, self.max_length)
        return polymers

    def words(self, length):
        """Yield all polymers of the given length in odometer order

        The first word consists of the first letter only. Each
        subsequent word increments the rightmost position to the next
        letter; positions that wrap around are reset to the first
        letter and carry over to their left neighbour. Enumeration
        ends when the leftmost position would wrap.
        """
        letters = self.alphabet.letters
        if not letters or length <= 0:
            return
        digits = [0]*length
        while True:
            yield ''.join(letters[d] for d in digits)
            position = length-1
            while digits[position] == len(letters)-1:
                digits[position] = 0
                position -= 1
                if position < 0:
                    return
            digits[position] += 1
