#!/usr/bin/env python3

"""
Test suite for the Rosalind toolkit.

Unit tests covering:
- Nucleotide alphabet and sequence invariants
- Parsing with diagnostics
- Sequence transforms and their properties
- Problem solvers and aliases
- Configuration, pipeline and command-line interface
"""
