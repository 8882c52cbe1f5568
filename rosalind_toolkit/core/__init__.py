#!/usr/bin/env python3

"""
Core module for the Rosalind toolkit.

Contains the sequence model, parsers, transforms, problem registry,
exception types and configuration management.
"""

from .data_structures import Nucleotide, StrandKind, Dna, Rna, NucleotideCounts
from .exceptions import (
    RosalindError, ProblemError, InputError, ConfigurationError,
    MemoryLimitError, InvariantViolation
)
from .config import RosalindConfig, load_config

__all__ = [
    'Nucleotide', 'StrandKind', 'Dna', 'Rna', 'NucleotideCounts',
    'RosalindError', 'ProblemError', 'InputError', 'ConfigurationError',
    'MemoryLimitError', 'InvariantViolation',
    'RosalindConfig', 'load_config'
]
