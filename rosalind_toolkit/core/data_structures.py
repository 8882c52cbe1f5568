#!/usr/bin/env python3

"""
Core data structures for the Rosalind toolkit.

Defines the nucleotide alphabet and the immutable DNA and RNA sequence
types. The strand alphabets are enforced once, when a sequence is built,
so every transform can assume them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, FrozenSet, Iterator, Optional, Tuple

from .exceptions import InvariantViolation


class Nucleotide(Enum):
    """A single nucleotide identity."""
    ADENINE = 'A'
    CYTOSINE = 'C'
    GUANINE = 'G'
    THYMINE = 'T'
    URACIL = 'U'

    @property
    def symbol(self) -> str:
        """Get the canonical one-letter code."""
        return self.value


class StrandKind(Enum):
    """Kind of nucleic acid strand."""
    DNA = "DNA"
    RNA = "RNA"

    @property
    def alphabet(self) -> FrozenSet[Nucleotide]:
        """Get the nucleotides allowed on this kind of strand."""
        return STRAND_ALPHABETS[self]


STRAND_ALPHABETS: Dict[StrandKind, FrozenSet[Nucleotide]] = {
    StrandKind.DNA: frozenset({Nucleotide.ADENINE, Nucleotide.CYTOSINE,
                               Nucleotide.GUANINE, Nucleotide.THYMINE}),
    StrandKind.RNA: frozenset({Nucleotide.ADENINE, Nucleotide.CYTOSINE,
                               Nucleotide.GUANINE, Nucleotide.URACIL}),
}

_SYMBOL_LOOKUP: Dict[str, Nucleotide] = {n.symbol: n for n in Nucleotide}


def resolve(character: str) -> Optional[Nucleotide]:
    """
    Map an input character to its nucleotide.

    Only the uppercase letters A, C, G, T and U are recognized; every
    other character (lowercase included) returns None.
    """
    return _SYMBOL_LOOKUP.get(character)


@dataclass(frozen=True)
class NucleicAcid:
    """Ordered, validated run of nucleotides from a single strand alphabet."""
    nucleotides: Tuple[Nucleotide, ...] = ()

    kind: ClassVar[StrandKind]

    def __post_init__(self):
        """Freeze the nucleotides and enforce the strand alphabet."""
        nucleotides = tuple(self.nucleotides)
        object.__setattr__(self, 'nucleotides', nucleotides)

        alphabet = self.kind.alphabet
        for position, nucleotide in enumerate(nucleotides):
            if nucleotide not in alphabet:
                raise InvariantViolation(
                    f"{nucleotide.name.lower()} is not allowed",
                    strand=self.kind.value,
                    position=position
                )

    def __len__(self) -> int:
        return len(self.nucleotides)

    def __iter__(self) -> Iterator[Nucleotide]:
        return iter(self.nucleotides)

    def __str__(self) -> str:
        return render(self)

    @property
    def length(self) -> int:
        """Get sequence length."""
        return len(self.nucleotides)

    def count(self, nucleotide: Nucleotide) -> int:
        """Count occurrences of a nucleotide."""
        return self.nucleotides.count(nucleotide)


@dataclass(frozen=True)
class Dna(NucleicAcid):
    """DNA sequence; never contains uracil."""
    kind: ClassVar[StrandKind] = StrandKind.DNA


@dataclass(frozen=True)
class Rna(NucleicAcid):
    """RNA sequence; never contains thymine."""
    kind: ClassVar[StrandKind] = StrandKind.RNA


SEQUENCE_TYPES = {
    StrandKind.DNA: Dna,
    StrandKind.RNA: Rna,
}


@dataclass(frozen=True)
class NucleotideCounts:
    """Counts of the four DNA nucleotides."""
    adenine: int = 0
    cytosine: int = 0
    guanine: int = 0
    thymine: int = 0

    @property
    def total(self) -> int:
        """Get the sum of all four counts."""
        return self.adenine + self.cytosine + self.guanine + self.thymine

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Get counts in canonical A, C, G, T order."""
        return (self.adenine, self.cytosine, self.guanine, self.thymine)

    def __str__(self) -> str:
        return " ".join(str(count) for count in self.as_tuple())


def render(sequence: NucleicAcid) -> str:
    """Convert a sequence back to its canonical text."""
    return "".join(nucleotide.symbol for nucleotide in sequence.nucleotides)
