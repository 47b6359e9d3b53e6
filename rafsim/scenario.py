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
"""Scenarios of catalyzed splice chemistries

A Scenario bundles the polymers and reactions that follow from an
alphabet and a maximum polymer length. Both are enumerated once, when
the scenario is built, and can then be catalyzed any number of times:

>>> scenario = build('AB', 3)
>>> graph = scenario.catalyze(0.05, ['A', 'B', 'AA', 'AB', 'BA', 'BB'], seed=42)
>>> closure = graph.raf()

generate combines the last two steps for drivers that are only
interested in the RAF.
"""

import logging
from numbers import Number

from .alphabet import Alphabet
from .polymers import PolymerEnumerator
from .reactions import ReactionEnumerator
from .catalysis import CatalysisSampler
from .graph import CatalyzedReactionGraph


class Scenario(object):
    """Polymers and reactions over an alphabet up to a maximum length

    Scenarios do not hold catalysis. Each call to Scenario.catalyze
    samples a new, independent CatalyzedReactionGraph.
    """
    def __init__(self, alphabet, max_length):
        if alphabet is None:
            raise ValueError("alphabet must not be None.")
        alphabet = alphabet if isinstance(alphabet, Alphabet) else Alphabet(alphabet)
        if not len(alphabet):
            raise ValueError("alphabet must not be empty.")
        if max_length <= 0:
            raise ValueError("max_length must be greater than 0.")

        self.alphabet = alphabet
        self.max_length = max_length
        self.polymers = tuple(PolymerEnumerator(max_length, alphabet).generate())
        self.reactions = tuple(ReactionEnumerator(self.polymers).generate())
        self._polymer_set = frozenset(self.polymers)

    def __repr__(self):
        return '<%s %r, max_length=%d: %d polymers, %d reactions>' % (
            type(self).__name__, self.alphabet, self.max_length,
            len(self.polymers), len(self.reactions))

    def catalyze(self, probability, food, seed=None, rng=None):
        """Sample catalysis and return a CatalyzedReactionGraph

        probability is a function probability(polymer, reaction) that
        returns the probability with which polymer catalyzes reaction,
        or a number for a constant probability. food is a collection of
        polymers that must be a subset of self.polymers. Random numbers
        are drawn from rng, or from a new generator seeded with seed
        (see CatalysisSampler).

        Both arguments are validated before any random number is drawn.
        """
        if probability is None:
            raise ValueError("probability function must not be None.")
        if not (callable(probability) or isinstance(probability, Number)):
            raise ValueError("probability must be callable or a number.")
        if food is None:
            raise ValueError("food set must not be None.")
        food = frozenset(food)
        strangers = food - self._polymer_set
        if strangers:
            raise ValueError("food set must be a subset of the polymer set, "
                             "but contains %s." % ', '.join(sorted(map(repr, strangers))))

        sampler = CatalysisSampler(self.polymers, self.reactions, probability,
                                   seed=seed, rng=rng)
        return CatalyzedReactionGraph(self.polymers, food, self.reactions,
                                      sampler.sample())


def build(alphabet, max_length):
    """Enumerate polymers and reactions and return a Scenario

    alphabet is an Alphabet or an iterable of single character monomer
    symbols. Raises ValueError if the alphabet is None or empty, or if
    max_length is not positive.
    """
    scenario = Scenario(alphabet, max_length)
    logging.debug("Built %r", scenario)
    return scenario


def generate(scenario, probability, food, seed=None, rng=None):
    """Catalyze the scenario and return its maximal RAF

    The result is a list of reactions, which is empty if the catalyzed
    reaction graph does not contain a RAF. See Scenario.catalyze for
    the arguments.
    """
    return scenario.catalyze(probability, food, seed=seed, rng=rng).raf()
