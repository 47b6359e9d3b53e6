"""Tests for the rafsim package

The behaviour of rafsim is specified via tests. Each rafsim module
has an associated test module and each rafsim class an associated
TestCase. Test cases for base classes expose the tested class as a
class attribute, so that subclasses can be tested by overriding it.
For example,

>>> class TestDecomposition(TestReaction):
...     Reaction = Decomposition

would run the Reaction tests for the Decomposition class.
"""
