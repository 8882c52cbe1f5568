#!/usr/bin/env python3

"""
Rosalind Toolkit

Typed DNA/RNA sequence model with the transforms needed by the first
Rosalind problems: nucleotide counting, transcription and reverse
complementation.

Modules:
- core: Sequence model, parsers, transforms, problems, configuration
- utils: Performance monitoring
- tests: Unit test suite
"""

__version__ = "0.1.0"

from .core.data_structures import (
    Nucleotide, StrandKind, Dna, Rna, NucleotideCounts, resolve, render
)
from .core.parsers import ParseResult, ParseDiagnostic, parse_sequence, parse_dna, parse_rna
from .core.processors import (
    count, count_dna_nucleotides, complement, reverse, reverse_complement, transcribe
)
from .core.exceptions import (
    RosalindError, ProblemError, InputError, ConfigurationError,
    MemoryLimitError, InvariantViolation
)
from .core.config import RosalindConfig, load_config
from .core.pipeline import RosalindPipeline

__all__ = [
    # Pipeline
    'RosalindPipeline',
    # Sequence model
    'Nucleotide', 'StrandKind', 'Dna', 'Rna', 'NucleotideCounts', 'resolve', 'render',
    # Parsing
    'ParseResult', 'ParseDiagnostic', 'parse_sequence', 'parse_dna', 'parse_rna',
    # Transforms
    'count', 'count_dna_nucleotides', 'complement', 'reverse',
    'reverse_complement', 'transcribe',
    # Exceptions
    'RosalindError', 'ProblemError', 'InputError', 'ConfigurationError',
    'MemoryLimitError', 'InvariantViolation',
    # Configuration
    'RosalindConfig', 'load_config'
]
