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
"""Catalyzed reaction graphs and their RAF sets

This module provides the CatalyzedReactionGraph, which groups a
polymer set, a food set, a reaction set and the catalysis of these
reactions, and computes the maximal reflexively autocatalytic and
food-generated (RAF) subset of the reactions.

A set of reactions is a RAF if

  * every reactant of every reaction can be produced from the food set
    by repeated application of reactions of the set (food-generated)

  * every reaction is catalyzed by at least one polymer that is in the
    food set or produced by the set (reflexively autocatalytic)

The maximal RAF is found by iterated pruning: compute the closure of
the food set under the remaining reactions, remove every reaction
that lacks a reactant or a catalyst in that closure, and repeat
until nothing is removed. The maximal RAF is the union of all RAFs
and may be empty.
"""

import logging


class DependencyGraph(dict):
    """Polymer-reaction dependency graph

    A mapping from polymers to the indices of reactions that consume
    them as reactants. It gives quick access to the reactions affected
    by a polymer becoming available.
    """
    def add_reaction(self, reaction):
        """Add reaction to dependencies"""
        for reactant in reaction.reactants:
            self.setdefault(reactant, set()).add(reaction.index)


class CatalyzedReactionGraph(object):
    """Polymers, food, reactions and catalysis of one scenario

    The graph holds read-only collections: self.polymers and
    self.reactions are tuples, self.food is a frozenset, and
    self.catalysis maps every reaction index to the frozenset of its
    catalysts. The food set must be a subset of the polymer set, and
    reactions must be indexed consecutively from 0.

    Querying the graph never modifies it. Every call to raf computes
    its result afresh.
    """
    def __init__(self, polymers, food, reactions, catalysis):
        self.polymers = tuple(polymers)
        self.food = frozenset(food)
        if not self.food <= frozenset(self.polymers):
            raise ValueError("food set must be a subset of the polymer set.")
        self.reactions = tuple(reactions)
        if any(reaction.index != i for i, reaction in enumerate(self.reactions)):
            raise ValueError("reactions must be indexed consecutively from 0.")
        if len(catalysis) != len(self.reactions):
            raise ValueError("catalysis must cover every reaction.")
        self.catalysis = catalysis

        self.dependencies = DependencyGraph()
        for reaction in self.reactions:
            self.dependencies.add_reaction(reaction)

    def __repr__(self):
        return '<%s %d polymers, %d food, %d reactions>' % (
            type(self).__name__, len(self.polymers),
            len(self.food), len(self.reactions))

    def _indices(self, reactions):
        """Sorted reaction indices for a collection of graph reactions"""
        if reactions is None:
            return list(range(len(self.reactions)))
        indices = set()
        for reaction in reactions:
            index = reaction.index
            if (index is None or not 0 <= index < len(self.reactions)
                    or self.reactions[index] != reaction):
                raise ValueError("%r is not a reaction of this graph." % reaction)
            indices.add(index)
        return sorted(indices)

    def _closure(self, indices):
        """Polymers producible from food by the reactions with given indices

        Every reaction keeps a count of its distinct reactants that are
        not yet available. A reaction fires once its count drops to
        zero, which happens at most once per reaction, so the closure
        is linear in the number of reactant links.
        """
        available = set(self.food)
        missing = {
            index: len(self.reactions[index].reactants.domain - available)
            for index in indices
        }
        ready = [index for index in indices if not missing[index]]
        while ready:
            index = ready.pop()
            for product in self.reactions[index].products:
                if product in available:
                    continue
                available.add(product)
                for consumer in self.dependencies.get(product, ()):
                    if consumer in missing:
                        missing[consumer] -= 1
                        if not missing[consumer]:
                            ready.append(consumer)
        return available

    def _is_supported(self, index, available):
        """True if reactants and at least one catalyst are available"""
        reaction = self.reactions[index]
        return (
            all(reactant in available for reactant in reaction.reactants)
            and any(catalyst in available for catalyst in self.catalysis[index])
        )

    def closure(self, reactions=None):
        """Closure of the food set under the given reactions

        Returns the frozenset of polymers that can be produced from
        the food set by repeated application of the given reactions
        (by default all reactions of the graph). Catalysis is ignored.
        """
        return frozenset(self._closure(self._indices(reactions)))

    def iter_raf(self, reactions=None):
        """Iterate over the pruning passes of the RAF computation

        Starting from the given reactions (by default all reactions of
        the graph), each pass computes the closure of the food set
        under the remaining reactions and keeps only the reactions
        whose reactants and at least one catalyst lie in the closure.
        All removals of a pass are decided against the same closure.

        Yields the list of reactions retained by each pass. The last
        list yielded is the maximal RAF. Since reactions are never
        re-added, the iteration ends after at most len(reactions)+1
        passes.
        """
        working = self._indices(reactions)
        passes = 0
        while True:
            passes += 1
            available = self._closure(working)
            retained = [index for index in working
                        if self._is_supported(index, available)]
            logging.debug("RAF pass %d: %d of %d reactions retained, "
                          "%d polymers available",
                          passes, len(retained), len(working), len(available))
            yield [self.reactions[index] for index in retained]
            if len(retained) == len(working):
                break
            working = retained

    def raf(self, reactions=None):
        """Maximal RAF subset of the given reactions

        Returns a new list of reactions in index order, which is empty
        if the reactions contain no RAF. See iter_raf for the details
        of the algorithm.
        """
        result = []
        for result in self.iter_raf(reactions):
            pass
        logging.debug("Maximal RAF contains %d reactions", len(result))
        return result

    def is_raf(self, reactions):
        """True if the given reactions form a nonempty RAF"""
        indices = self._indices(reactions)
        return bool(indices) and len(self.raf(reactions)) == len(indices)
