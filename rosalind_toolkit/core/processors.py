#!/usr/bin/env python3

"""
Sequence transforms.

Every transform is a pure function returning a new sequence or value.
The mapping tables cover only the valid strand alphabet, since a Dna
can never hold uracil.
"""

from typing import Dict, TypeVar

from .data_structures import Dna, Nucleotide, NucleicAcid, NucleotideCounts, Rna, StrandKind

S = TypeVar('S', bound=NucleicAcid)

DNA_COMPLEMENTS: Dict[Nucleotide, Nucleotide] = {
    Nucleotide.ADENINE: Nucleotide.THYMINE,
    Nucleotide.THYMINE: Nucleotide.ADENINE,
    Nucleotide.CYTOSINE: Nucleotide.GUANINE,
    Nucleotide.GUANINE: Nucleotide.CYTOSINE,
}

TRANSCRIPTION_TABLE: Dict[Nucleotide, Nucleotide] = {
    Nucleotide.ADENINE: Nucleotide.ADENINE,
    Nucleotide.CYTOSINE: Nucleotide.CYTOSINE,
    Nucleotide.GUANINE: Nucleotide.GUANINE,
    Nucleotide.THYMINE: Nucleotide.URACIL,
}


def count(sequence: NucleicAcid, nucleotide: Nucleotide) -> int:
    """Count occurrences of a nucleotide in a sequence."""
    return sequence.count(nucleotide)


def count_dna_nucleotides(dna: Dna) -> NucleotideCounts:
    """Count the four DNA nucleotides in a single pass."""
    tally = {nucleotide: 0 for nucleotide in StrandKind.DNA.alphabet}
    for nucleotide in dna:
        tally[nucleotide] += 1

    return NucleotideCounts(
        adenine=tally[Nucleotide.ADENINE],
        cytosine=tally[Nucleotide.CYTOSINE],
        guanine=tally[Nucleotide.GUANINE],
        thymine=tally[Nucleotide.THYMINE]
    )


def complement(dna: Dna) -> Dna:
    """Pair each nucleotide with its partner (A-T, C-G), keeping order."""
    return Dna(tuple(DNA_COMPLEMENTS[n] for n in dna))


def reverse(sequence: S) -> S:
    """Reverse nucleotide order, keeping the sequence type."""
    return type(sequence)(tuple(reversed(sequence.nucleotides)))


def reverse_complement(dna: Dna) -> Dna:
    """
    Get the opposite strand read 5' to 3'.

    Reverses first and then complements. The two steps commute, so
    complement(reverse(d)) == reverse(complement(d)).
    """
    return complement(reverse(dna))


def transcribe(dna: Dna) -> Rna:
    """Transcribe DNA into RNA (T -> U), keeping order."""
    return Rna(tuple(TRANSCRIPTION_TABLE[n] for n in dna))
