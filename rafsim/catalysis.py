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
"""Random assignment of catalysts to reactions

A CatalysisSampler decides, for every pair of polymer and reaction,
whether the polymer catalyzes the reaction. The decision is random
with a probability given by a user supplied function

    probability(polymer, reaction) -> float in [0, 1]

The result is a Catalysis mapping from reaction indices to sets of
catalysts. Reactions themselves are never modified, so the same
reaction set can be catalyzed any number of times, each time yielding
an independent Catalysis.
"""

import logging
import warnings
from collections.abc import Mapping
from numbers import Integral, Number

import numpy as np


def constant(p):
    """Probability function that returns p for every polymer and reaction"""
    if not 0 <= p <= 1:
        raise ValueError("probability must be in [0, 1], got %r." % p)

    def probability(polymer, reaction):
        return p
    probability.constant = p
    return probability


class Catalysis(Mapping):
    """Read-only mapping from reaction index to a frozenset of catalysts

    Every reaction of the sampled reaction set has an entry, which is
    the empty frozenset for uncatalyzed reactions.
    """
    def __init__(self, catalysts):
        self._catalysts = tuple(frozenset(c) for c in catalysts)

    def __getitem__(self, index):
        if not isinstance(index, Integral) or not 0 <= index < len(self._catalysts):
            raise KeyError(index)
        return self._catalysts[index]

    def __iter__(self):
        return iter(range(len(self._catalysts)))

    def __len__(self):
        return len(self._catalysts)

    def catalysts(self, reaction):
        """Catalysts of the given reaction"""
        return self[reaction.index]

    def count(self):
        """Total number of catalysis links"""
        return sum(len(c) for c in self._catalysts)

    def catalyzed(self):
        """Indices of all reactions with at least one catalyst"""
        return [i for i, c in enumerate(self._catalysts) if c]

    def __repr__(self):
        return '<%s %d reactions, %d links>' % (
            type(self).__name__, len(self), self.count())


class CatalysisSampler(object):
    """Sample catalysts for a reaction set

    For every reaction (in index order) and every polymer (in polymer
    order), the sampler draws one uniform random number in [0, 1) and
    assigns the polymer as catalyst of the reaction if the number is
    smaller than probability(polymer, reaction). In total,
    len(polymers)*len(reactions) random numbers are drawn.

    probability is either a callable or a number, which is shorthand
    for constant(number). Values returned by probability that lie
    outside [0, 1] trigger a RuntimeWarning; they never (< 0) or always
    (> 1) lead to catalysis.

    Random numbers are exclusively drawn from self.rng, which is the
    numpy.random.RandomState given as rng, or a new one initialized
    with seed. Identical seeds and probability functions yield
    identical catalysis.
    """
    def __init__(self, polymers, reactions, probability, seed=None, rng=None):
        if probability is None:
            raise ValueError("probability function must not be None.")
        if isinstance(probability, Number):
            probability = constant(probability)
        elif not callable(probability):
            raise ValueError("probability must be callable or a number.")
        if any(reaction.index != i for i, reaction in enumerate(reactions)):
            raise ValueError("reactions must be indexed consecutively from 0.")

        self.polymers = tuple(polymers)
        self.reactions = tuple(reactions)
        self.probability = probability
        self.rng = rng if rng is not None else np.random.RandomState(seed)

    def probabilities(self, reaction):
        """Array of catalysis probabilities of all polymers for reaction"""
        p = getattr(self.probability, 'constant', None)
        if p is not None:
            return np.full(len(self.polymers), p, dtype=float)
        return np.fromiter(
            (self.probability(polymer, reaction) for polymer in self.polymers),
            dtype=float, count=len(self.polymers)
        )

    def sample(self):
        """Draw catalysts for every reaction and return a Catalysis"""
        catalysts = []
        out_of_range = False
        for reaction in self.reactions:
            draws = self.rng.random_sample(len(self.polymers))
            probabilities = self.probabilities(reaction)
            if not out_of_range and len(probabilities) and (
                    probabilities.min() < 0 or probabilities.max() > 1):
                warnings.warn("catalysis probability outside [0, 1] for %r."
                              % reaction, RuntimeWarning)
                out_of_range = True
            hits = np.flatnonzero(draws < probabilities)
            catalysts.append(frozenset(self.polymers[i] for i in hits))
        catalysis = Catalysis(catalysts)
        logging.debug("Sampled %d catalysis links for %d reactions",
                      catalysis.count(), len(catalysis))
        return catalysis
