#!/usr/bin/env python3

"""
Unit tests for core data structures.

Tests the nucleotide alphabet, the DNA/RNA sequence invariants and
rendering.
"""

import dataclasses
import unittest
import sys
import os

# Add the parent directory to the path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from rosalind_toolkit.core.data_structures import (
    Dna, Nucleotide, NucleotideCounts, Rna, StrandKind, render, resolve
)
from rosalind_toolkit.core.exceptions import InvariantViolation, RosalindError

A, C, G, T, U = (Nucleotide.ADENINE, Nucleotide.CYTOSINE, Nucleotide.GUANINE,
                 Nucleotide.THYMINE, Nucleotide.URACIL)


class TestAlphabet(unittest.TestCase):
    """Test nucleotide resolution."""

    def test_resolves_uppercase_letters(self):
        """Test each recognized character maps to its nucleotide."""
        self.assertIs(resolve('A'), A)
        self.assertIs(resolve('C'), C)
        self.assertIs(resolve('G'), G)
        self.assertIs(resolve('T'), T)
        self.assertIs(resolve('U'), U)

    def test_unrecognized_characters(self):
        """Test lowercase, ambiguity codes and noise are not recognized."""
        for character in ('a', 't', 'N', 'X', '!', ' ', '\n', ''):
            self.assertIsNone(resolve(character))

    def test_symbol_round_trip(self):
        """Test each nucleotide resolves back from its symbol."""
        for nucleotide in Nucleotide:
            self.assertIs(resolve(nucleotide.symbol), nucleotide)

    def test_strand_alphabets(self):
        """Test strand alphabets differ only in T/U."""
        self.assertEqual(StrandKind.DNA.alphabet, {A, C, G, T})
        self.assertEqual(StrandKind.RNA.alphabet, {A, C, G, U})


class TestDna(unittest.TestCase):
    """Test the Dna sequence type."""

    def test_valid_dna_creation(self):
        """Test creating a DNA sequence."""
        dna = Dna((A, C, G, T))
        self.assertEqual(len(dna), 4)
        self.assertEqual(dna.length, 4)
        self.assertEqual(list(dna), [A, C, G, T])

    def test_empty_dna(self):
        """Test empty sequences are allowed."""
        dna = Dna()
        self.assertEqual(len(dna), 0)
        self.assertEqual(render(dna), "")

    def test_list_input_is_frozen(self):
        """Test list input is stored as a tuple."""
        dna = Dna([A, C])
        self.assertIsInstance(dna.nucleotides, tuple)

    def test_uracil_rejected(self):
        """Test that uracil breaks the DNA invariant."""
        with self.assertRaises(InvariantViolation) as ctx:
            Dna((A, U, G))
        self.assertEqual(ctx.exception.strand, "DNA")
        self.assertEqual(ctx.exception.position, 1)

    def test_invariant_violation_is_not_recoverable(self):
        """Test invariant violations sit outside the RosalindError hierarchy."""
        self.assertFalse(issubclass(InvariantViolation, RosalindError))
        self.assertTrue(issubclass(InvariantViolation, AssertionError))

    def test_immutable(self):
        """Test sequences cannot be reassigned."""
        dna = Dna((A,))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            dna.nucleotides = (C,)

    def test_count(self):
        """Test counting one nucleotide."""
        dna = Dna((A, A, C, T))
        self.assertEqual(dna.count(A), 2)
        self.assertEqual(dna.count(G), 0)
        self.assertEqual(dna.count(U), 0)

    def test_equality_and_hash(self):
        """Test equal sequences hash alike."""
        self.assertEqual(Dna((A, C)), Dna((A, C)))
        self.assertNotEqual(Dna((A, C)), Dna((C, A)))
        self.assertEqual(hash(Dna((A, C))), hash(Dna((A, C))))


class TestRna(unittest.TestCase):
    """Test the Rna sequence type."""

    def test_valid_rna_creation(self):
        """Test creating an RNA sequence."""
        rna = Rna((A, C, G, U))
        self.assertEqual(str(rna), "ACGU")

    def test_thymine_rejected(self):
        """Test that thymine breaks the RNA invariant."""
        with self.assertRaises(InvariantViolation) as ctx:
            Rna((T,))
        self.assertEqual(ctx.exception.strand, "RNA")
        self.assertEqual(ctx.exception.position, 0)

    def test_dna_and_rna_never_equal(self):
        """Test sequences of different strand kinds compare unequal."""
        self.assertNotEqual(Dna((A, C, G)), Rna((A, C, G)))


class TestRendering(unittest.TestCase):
    """Test sequence rendering."""

    def test_render_preserves_order(self):
        """Test rendering keeps nucleotide order."""
        self.assertEqual(render(Dna((G, A, T, C))), "GATC")
        self.assertEqual(render(Rna((G, A, U, C))), "GAUC")

    def test_str_matches_render(self):
        """Test str() renders the sequence."""
        dna = Dna((T, T, A))
        self.assertEqual(str(dna), render(dna))


class TestNucleotideCounts(unittest.TestCase):
    """Test the NucleotideCounts data structure."""

    def test_default_counts(self):
        """Test counts start at zero."""
        counts = NucleotideCounts()
        self.assertEqual(counts.as_tuple(), (0, 0, 0, 0))
        self.assertEqual(counts.total, 0)

    def test_str_format(self):
        """Test counts render as space separated A C G T."""
        counts = NucleotideCounts(adenine=20, cytosine=12, guanine=17, thymine=21)
        self.assertEqual(str(counts), "20 12 17 21")
        self.assertEqual(counts.total, 70)


if __name__ == '__main__':
    unittest.main()
