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
"""Splice reactions between polymers

This module provides the Reaction class together with the two
reaction types of the splice chemistry: Decomposition, which breaks
a polymer into two nonempty parts, and Composition, which joins two
parts into their concatenation. The ReactionEnumerator generates every
such reaction for a given polymer set.
"""

import logging

from .structures import multiset, composition


class Reaction(object):
    """Transformation of reactants into products

    Reactions define reactants and products, which are multisets that
    give the stoichiometric factor of each involved polymer. Instances
    also provide the attributes self.true_reactants and
    self.true_products, which exclude polymers that appear both as
    reactants and products.

    Every reaction carries an index that identifies it within the
    reaction set it belongs to. The splice chemistry can generate
    reactions with identical reactants and products (e.g. AAA --> A + AA
    at both splice points), so catalysis and closure computations refer
    to reactions by index rather than by structure.

    Catalysts are not part of a reaction. They are assigned by a
    CatalysisSampler and stored separately (see rafsim.catalysis).

    Modifying any of these attributes after initialization is an error
    and leads to undefined behavior.
    """
    def __init__(self, reactants, products, index=None):
        """Initialization

        reactants and products are either mappings that give the
        stoichiometric factor of each involved polymer, or sequences
        which are interpreted as unordered lists.
        """
        reactants = multiset(reactants)
        products = multiset(products)

        if not all(n > 0 for n in reactants.values()):
            raise ValueError("reactant stoichiometries must be positive.")
        if not all(n > 0 for n in products.values()):
            raise ValueError("product stoichiometries must be positive.")
        if not reactants or not products:
            raise ValueError(
                "%s must have both reactants and products."
                % type(self).__name__
            )

        self.reactants = reactants
        self.products = products
        self.index = index

        self.true_reactants = reactants - products
        self.true_products = products - reactants
        self._hash = 0

    @property
    def is_balanced(self):
        """True if reactants and products contain the same monomers"""
        return composition(self.reactants) == composition(self.products)

    def __eq__(self, other):
        """Structural congruence

        Reactions are equal if they are of the same type, have the
        same index, and their reactants and products are equal.
        """
        return (
            type(self) == type(other) and
            self.index == other.index and
            self.reactants == other.reactants and
            self.products == other.products
        )

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        if not self._hash:
            self._hash = hash((
                type(self).__name__,
                self.index,
                self.reactants.sorted_items(),
                self.products.sorted_items(),
            ))
        return self._hash

    def __repr__(self):
        return '<%s #%s %s>' % (type(self).__name__, self.index, self)

    def __str__(self):
        def dct2str(dct):
            """render multiset as sum of elements"""
            return ' + '.join(
                str(s) if n == 1 else '%s*%s' % (n, s)
                for s, n in sorted(dct.items())
            )
        return '%s --> %s' % (dct2str(self.reactants), dct2str(self.products))


class SpliceReaction(Reaction):
    """Base class for reactions that cut or join a polymer at one position

    A splice reaction is defined by the whole polymer and the splice
    position, i.e. the length of its left part. Subclasses decide the
    direction of the reaction.
    """
    def __init__(self, whole, splice, index=None):
        if not 1 <= splice < len(whole):
            raise ValueError(
                "splice position %r is not inside polymer %r." % (splice, whole)
            )
        self.whole = whole
        self.splice = splice
        self.left = whole[:splice]
        self.right = whole[splice:]
        super(SpliceReaction, self).__init__(*self._sides(), index=index)

    def _sides(self):
        raise NotImplementedError


class Decomposition(SpliceReaction):
    """Break a polymer into two nonempty parts: kl --> k + l"""
    def _sides(self):
        return [self.whole], [self.left, self.right]

    def reverse(self, index=None):
        """The Composition that joins the parts back together"""
        return Composition(self.whole, self.splice, index)


class Composition(SpliceReaction):
    """Join two polymers into their concatenation: k + l --> kl"""
    def _sides(self):
        return [self.left, self.right], [self.whole]

    def reverse(self, index=None):
        """The Decomposition that breaks the product apart again"""
        return Decomposition(self.whole, self.splice, index)


class ReactionEnumerator(object):
    """Generate every splice reaction among a set of polymers

    For each polymer of length n >= 2, and each splice position
    1 <= i < n, the enumerator generates the decomposition of the
    polymer into its left and right part, followed by the reverse
    composition. Reactions are emitted by decreasing polymer length,
    then in the order of the given polymer set, then by splice
    position, and are indexed consecutively from 0.

    The enumerator does not check whether the parts of a polymer are
    contained in the polymer set. For sets produced by the
    PolymerEnumerator they always are.
    """
    def __init__(self, polymers):
        if not polymers:
            raise ValueError("polymer set must not be None or empty.")
        self.polymers = list(polymers)
        self.max_length = max(len(p) for p in self.polymers)

    def count(self):
        """Number of reactions generated by self.generate()"""
        return sum(2*(len(p)-1) for p in self.polymers if len(p) > 1)

    def generate(self):
        """List of all decomposition and composition reactions"""
        reactions = []
        for length in range(self.max_length, 1, -1):
            for polymer in self.polymers:
                if len(polymer) != length:
                    continue
                for splice in range(1, length):
                    decomposition = Decomposition(polymer, splice, len(reactions))
                    reactions.append(decomposition)
                    reactions.append(decomposition.reverse(len(reactions)))
        logging.debug("Enumerated %d reactions among %d polymers",
                      len(reactions), len(self.polymers))
        return reactions
