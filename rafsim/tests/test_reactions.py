"""Tests for the rafsim.reactions module"""
import unittest

from rafsim.alphabet import Alphabet
from rafsim.polymers import PolymerEnumerator
from rafsim.reactions import Reaction, Decomposition, Composition, ReactionEnumerator
from rafsim.structures import composition


class TestReaction(unittest.TestCase):
    """Reaction specification

    To test a custom reaction subclass, derive from TestReaction and
    overload the class attribute Reaction with the class to be tested.
    """
    Reaction = Reaction

    def make(self, index=None):
        """A reaction of the tested class"""
        return self.Reaction(['A', 'B'], ['AB'], index)

    def test_init_sequences(self):
        """Reactants and products can be given as unordered lists"""
        reaction = self.make(0)
        self.assertEqual(reaction.index, 0)
        self.assertEqual(sum(reaction.reactants.values()) + sum(reaction.products.values()), 3)

    def test_is_balanced(self):
        """splice reactions conserve monomers"""
        self.assertTrue(self.make().is_balanced)

    def test_eq_and_hash(self):
        """Reactions with equal structure and index are equal"""
        self.assertEqual(self.make(1), self.make(1))
        self.assertEqual(hash(self.make(1)), hash(self.make(1)))
        self.assertNotEqual(self.make(1), self.make(2))

    def test_str(self):
        """String representation lists reactants and products"""
        self.assertIn('-->', str(self.make()))
        self.assertIn(type(self.make()).__name__, repr(self.make()))


class TestGenericReaction(TestReaction):
    """Tests specific to the Reaction base class"""
    def test_init_empty_sides(self):
        """Reactions need reactants and products"""
        with self.assertRaises(ValueError):
            Reaction([], ['A'])
        with self.assertRaises(ValueError):
            Reaction(['A'], [])

    def test_init_negative_stoichiometry(self):
        """Stoichiometric factors must be positive"""
        with self.assertRaises(ValueError):
            Reaction({'A': -1}, {'B': 1})

    def test_init_mapping(self):
        """Reactants and products can be given as mappings"""
        reaction = Reaction({'A': 2}, {'AA': 1})
        self.assertEqual(reaction.reactants['A'], 2)
        self.assertTrue(reaction.is_balanced)

    def test_unbalanced(self):
        """Reactions that create monomers are not balanced"""
        self.assertFalse(Reaction(['A'], ['AB']).is_balanced)

    def test_true_reactants(self):
        """true reactants exclude polymers on both sides"""
        reaction = Reaction(['A', 'B', 'AB'], ['AB', 'AB'])
        self.assertEqual(reaction.true_reactants, {'A': 1, 'B': 1})
        self.assertEqual(reaction.true_products, {'AB': 1})

    def test_str_stoichiometry(self):
        """Stoichiometric factors are rendered as prefixes"""
        self.assertEqual(str(Reaction({'A': 2}, {'AA': 1})), '2*A --> AA')

    def test_ne_other_types(self):
        """Reactions differ from objects of other types"""
        self.assertNotEqual(Reaction(['A'], ['A']), 'A --> A')


class TestComposition(TestReaction):
    """Tests for the Composition reaction"""
    class Reaction(Composition):
        """Provides the reactant/product signature for Reaction tests"""
        def __init__(self, reactants, products, index=None):
            super(TestComposition.Reaction, self).__init__(products[0], len(reactants[0]), index)

    def test_parts(self):
        """compositions join left and right into whole"""
        reaction = Composition('ABB', 1)
        self.assertEqual((reaction.left, reaction.right), ('A', 'BB'))
        self.assertEqual(reaction.reactants, {'A': 1, 'BB': 1})
        self.assertEqual(reaction.products, {'ABB': 1})

    def test_reverse(self):
        """the reverse of a composition is the matching decomposition"""
        reverse = Composition('ABB', 2, 3).reverse(4)
        self.assertIsInstance(reverse, Decomposition)
        self.assertEqual(reverse.index, 4)
        self.assertEqual(reverse.reactants, {'ABB': 1})
        self.assertEqual(reverse.products, {'AB': 1, 'B': 1})

    def test_invalid_splice(self):
        """splice positions must lie inside the polymer"""
        for splice in (0, 3, -1):
            with self.assertRaises(ValueError):
                Composition('ABB', splice)
        with self.assertRaises(ValueError):
            Composition('A', 1)

    def test_homodimer(self):
        """joining two identical parts has stoichiometry two"""
        self.assertEqual(Composition('AA', 1).reactants, {'A': 2})


class TestDecomposition(TestReaction):
    """Tests for the Decomposition reaction"""
    class Reaction(Decomposition):
        """Provides the reactant/product signature for Reaction tests"""
        def __init__(self, reactants, products, index=None):
            super(TestDecomposition.Reaction, self).__init__(products[0], len(reactants[0]), index)

    def test_parts(self):
        """decompositions break whole into left and right"""
        reaction = Decomposition('ABB', 2)
        self.assertEqual(reaction.reactants, {'ABB': 1})
        self.assertEqual(reaction.products, {'AB': 1, 'B': 1})

    def test_reverse_roundtrip(self):
        """reversing twice restores the reaction"""
        reaction = Decomposition('ABAB', 3, 7)
        self.assertEqual(reaction.reverse(8).reverse(7), reaction)

    def test_congruent_splices_differ_by_index(self):
        """identical sides at different splice points are told apart by index"""
        first = Decomposition('AAA', 1, 0)
        second = Decomposition('AAA', 2, 1)
        self.assertEqual(first.products, second.products)
        self.assertNotEqual(first, second)


class TestReactionEnumerator(unittest.TestCase):
    """ReactionEnumerator specification"""
    def polymers(self, letters='AB', max_length=4):
        return PolymerEnumerator(max_length, Alphabet(letters)).generate()

    def test_init_empty(self):
        """polymer set must not be empty"""
        with self.assertRaises(ValueError):
            ReactionEnumerator([])
        with self.assertRaises(ValueError):
            ReactionEnumerator(None)

    def test_number_of_reactions(self):
        """n-1 decompositions and n-1 compositions per polymer of length n"""
        polymers = self.polymers()
        enumerator = ReactionEnumerator(polymers)
        reactions = enumerator.generate()
        self.assertEqual(len(reactions), enumerator.count())
        for polymer in polymers:
            decompositions = [r for r in reactions
                              if isinstance(r, Decomposition) and r.whole == polymer]
            compositions = [r for r in reactions
                            if isinstance(r, Composition) and r.whole == polymer]
            self.assertEqual(len(decompositions), max(len(polymer)-1, 0))
            self.assertEqual(len(compositions), max(len(polymer)-1, 0))

    def test_compositions_reverse_decompositions(self):
        """every decomposition is followed by its exact reverse"""
        reactions = ReactionEnumerator(self.polymers()).generate()
        for decomposition, composition_ in zip(reactions[::2], reactions[1::2]):
            self.assertIsInstance(decomposition, Decomposition)
            self.assertIsInstance(composition_, Composition)
            self.assertEqual(decomposition.reactants, composition_.products)
            self.assertEqual(decomposition.products, composition_.reactants)

    def test_mass_conservation(self):
        """reactants and products of every reaction have equal monomers"""
        for reaction in ReactionEnumerator(self.polymers('ABC', 3)).generate():
            self.assertEqual(composition(reaction.reactants),
                             composition(reaction.products))
            self.assertTrue(reaction.is_balanced)

    def test_indices(self):
        """reactions are indexed consecutively from 0"""
        reactions = ReactionEnumerator(self.polymers()).generate()
        self.assertEqual([r.index for r in reactions], list(range(len(reactions))))

    def test_emission_order(self):
        """reactions are ordered by decreasing length, polymer, splice"""
        reactions = ReactionEnumerator(self.polymers('AB', 3)).generate()
        lengths = [len(r.whole) for r in reactions]
        self.assertEqual(lengths, sorted(lengths, reverse=True))
        self.assertEqual(str(reactions[0]), 'AAA --> A + AA')
        self.assertEqual(str(reactions[1]), 'A + AA --> AAA')
        self.assertEqual(reactions[2].splice, 2)
        self.assertEqual(str(reactions[-2]), 'BB --> 2*B')

    def test_monomers_only(self):
        """monomers never decompose"""
        self.assertEqual(ReactionEnumerator(['A', 'B']).generate(), [])

    def test_parts_in_polymer_set(self):
        """all parts of enumerated polymers are polymers themselves"""
        polymers = set(self.polymers())
        for reaction in ReactionEnumerator(list(polymers)).generate():
            self.assertTrue(reaction.reactants.domain <= polymers)
            self.assertTrue(reaction.products.domain <= polymers)


if __name__ == '__main__':
    unittest.main()
