#!/usr/bin/env python3

"""
Rosalind problem solvers and the problem name registry.

Each solver takes the raw input text, prints its answer to the output
stream (standard output by default) and logs any parse diagnostics.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from .exceptions import ProblemError
from .parsers import log_diagnostics, parse_dna
from .processors import count_dna_nucleotides, reverse_complement, transcribe

logger = logging.getLogger(__name__)


def _emit(text: str, output: Optional[TextIO]) -> None:
    stream = output if output is not None else sys.stdout
    stream.write(text + "\n")


def counting_dna_nucleotides(input_text: str, output: Optional[TextIO] = None,
                             report_diagnostics: bool = True) -> None:
    """
    Solve problem counting_dna_nucleotides.

    Prints the A, C, G and T counts of the input, space separated.
    """
    result = parse_dna(input_text)
    if report_diagnostics:
        log_diagnostics(result.diagnostics, logger)

    counts = count_dna_nucleotides(result.sequence)
    _emit(str(counts), output)


def transcribing_dna_into_rna(input_text: str, output: Optional[TextIO] = None,
                              report_diagnostics: bool = True) -> None:
    """Solve problem transcribing_dna_into_rna."""
    result = parse_dna(input_text)
    if report_diagnostics:
        log_diagnostics(result.diagnostics, logger)

    _emit(str(transcribe(result.sequence)), output)


def complementing_a_strand_of_dna(input_text: str, output: Optional[TextIO] = None,
                                  report_diagnostics: bool = True) -> None:
    """Solve problem complementing_a_strand_of_dna (reverse complement)."""
    result = parse_dna(input_text)
    if report_diagnostics:
        log_diagnostics(result.diagnostics, logger)

    _emit(str(reverse_complement(result.sequence)), output)


@dataclass(frozen=True)
class Problem:
    """A solvable problem with its accepted aliases."""
    name: str
    solver: Callable[..., None]
    description: str = ""
    aliases: Tuple[str, ...] = field(default_factory=tuple)


PROBLEMS: Dict[str, Problem] = {
    problem.name: problem for problem in (
        Problem(
            name="counting_dna_nucleotides",
            solver=counting_dna_nucleotides,
            description="Count A, C, G and T in a DNA string",
            aliases=("0", "counting-nucleotides", "dna")
        ),
        Problem(
            name="transcribing_dna_into_rna",
            solver=transcribing_dna_into_rna,
            description="Transcribe a DNA string into RNA",
            aliases=("1", "transcribing-dna", "rna")
        ),
        Problem(
            name="complementing_a_strand_of_dna",
            solver=complementing_a_strand_of_dna,
            description="Reverse complement a DNA string",
            aliases=("2", "complementing-strand", "revc")
        ),
    )
}

_ALIASES: Dict[str, str] = {
    alias: problem.name
    for problem in PROBLEMS.values()
    for alias in problem.aliases
}


def normalize_problem_alias(problem: str) -> str:
    """Map an alias to its canonical problem name; other names pass through."""
    return _ALIASES.get(problem, problem)


def resolve_problem(problem: str) -> Problem:
    """Look up a problem by canonical name or alias."""
    name = normalize_problem_alias(problem)
    if name not in PROBLEMS:
        raise ProblemError("Unknown problem description", problem)
    return PROBLEMS[name]


def list_problems() -> List[str]:
    """Get one display line per known problem."""
    lines = []
    for problem in PROBLEMS.values():
        line = problem.name
        if problem.aliases:
            line += f" (AKA {', '.join(problem.aliases)})"
        lines.append(line)
    return lines


def solve(problem: str, input_text: str, output: Optional[TextIO] = None,
          report_diagnostics: bool = True) -> None:
    """Resolve a problem name and run its solver on the input."""
    resolved = resolve_problem(problem)
    logger.info(f"Solving {resolved.name}")
    resolved.solver(input_text, output=output, report_diagnostics=report_diagnostics)
