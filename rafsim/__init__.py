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
"""Emergence of reflexively autocatalytic food-generated sets

This package studies the emergence of self-sustaining chemistries in
a simple splice chemistry. Given an alphabet of monomers and a maximum
length, it enumerates every polymer and every reaction that cuts a
polymer into two parts or joins two parts into one. Catalysts are
then assigned at random, and the maximal reflexively autocatalytic
and food-generated (RAF) subset of the reactions is computed.

A typical use builds a Scenario once and samples catalyzed reaction
graphs from it:

>>> import rafsim
>>> scenario = rafsim.build('AB', 4)
>>> food = [p for p in scenario.polymers if len(p) <= 2]
>>> raf = rafsim.generate(scenario, 0.01, food, seed=1)
>>> closed = bool(raf)

Example drivers can be found in the rafsim.examples package.
"""

from .structures import multiset
from .alphabet import Alphabet
from .polymers import PolymerEnumerator
from .reactions import Reaction, Decomposition, Composition, ReactionEnumerator
from .catalysis import Catalysis, CatalysisSampler, constant
from .graph import CatalyzedReactionGraph, DependencyGraph
from .scenario import Scenario, build, generate

__version__ = '1.0.0'
