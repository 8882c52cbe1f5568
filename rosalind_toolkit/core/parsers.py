#!/usr/bin/env python3

"""
Parsers turning raw problem input into validated sequences.

Parsing never fails: characters that are not nucleotides, or that belong
to the other strand's alphabet, are dropped and reported as diagnostics
returned next to the parsed sequence.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from .data_structures import (
    Nucleotide, NucleicAcid, NucleotideCounts, SEQUENCE_TYPES, StrandKind,
    resolve
)

# Below DEBUG; registered under the name "TRACE" by the CLI.
TRACE = 5

_RAW_DNA_SYMBOLS = frozenset(n.symbol for n in StrandKind.DNA.alphabet)


@dataclass(frozen=True)
class ParseDiagnostic:
    """A character dropped while parsing."""
    position: int
    character: str
    level: int
    reason: str

    @property
    def message(self) -> str:
        """Get a human readable description."""
        return (f"Skipping {self.reason} {self.character!r} "
                f"(code: U+{ord(self.character):04X}) at position {self.position}")


@dataclass
class ParseResult:
    """Parsed sequence plus the diagnostics collected while parsing."""
    sequence: NucleicAcid
    diagnostics: List[ParseDiagnostic] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        """Get the number of input characters that were dropped."""
        return len(self.diagnostics)

    @property
    def strand_mismatches(self) -> List[ParseDiagnostic]:
        """Get diagnostics for nucleotides belonging to the other strand."""
        return [d for d in self.diagnostics if d.level >= logging.WARNING]


def parse_sequence(text: str, strand_kind: StrandKind) -> ParseResult:
    """
    Parse raw text into a sequence of the given strand kind.

    Args:
        text: Raw input, possibly with whitespace or other noise
        strand_kind: Target strand alphabet

    Returns:
        ParseResult holding the sequence and any diagnostics
    """
    alphabet = strand_kind.alphabet
    nucleotides: List[Nucleotide] = []
    diagnostics: List[ParseDiagnostic] = []

    for position, character in enumerate(text):
        nucleotide = resolve(character)

        if nucleotide is None:
            diagnostics.append(ParseDiagnostic(
                position=position,
                character=character,
                level=TRACE,
                reason="unrecognized character"
            ))
        elif nucleotide not in alphabet:
            diagnostics.append(ParseDiagnostic(
                position=position,
                character=character,
                level=logging.WARNING,
                reason=f"{nucleotide.name.lower()} in {strand_kind.value} input"
            ))
        else:
            nucleotides.append(nucleotide)

    sequence = SEQUENCE_TYPES[strand_kind](tuple(nucleotides))
    return ParseResult(sequence=sequence, diagnostics=diagnostics)


def parse_dna(text: str) -> ParseResult:
    """Parse raw text as DNA."""
    return parse_sequence(text, StrandKind.DNA)


def parse_rna(text: str) -> ParseResult:
    """Parse raw text as RNA."""
    return parse_sequence(text, StrandKind.RNA)


def log_diagnostics(diagnostics: List[ParseDiagnostic],
                    logger: logging.Logger) -> None:
    """Emit each diagnostic on the given logger at its recorded level."""
    for diagnostic in diagnostics:
        logger.log(diagnostic.level, diagnostic.message)


def count_characters(text: str) -> Counter:
    """Count every character of the raw input, recognized or not."""
    return Counter(text)


def count_nucleotides(text: str,
                      diagnostics: Optional[List[ParseDiagnostic]] = None) -> NucleotideCounts:
    """
    Count A, C, G and T straight from raw text.

    Any other character, uracil included, is skipped. When a diagnostics
    list is given, each skipped character is appended to it at TRACE level.
    """
    counts = count_characters(text)

    if diagnostics is not None:
        for position, character in enumerate(text):
            if character not in _RAW_DNA_SYMBOLS:
                diagnostics.append(ParseDiagnostic(
                    position=position,
                    character=character,
                    level=TRACE,
                    reason="unrecognized character"
                ))

    return NucleotideCounts(
        adenine=counts['A'],
        cytosine=counts['C'],
        guanine=counts['G'],
        thymine=counts['T']
    )
