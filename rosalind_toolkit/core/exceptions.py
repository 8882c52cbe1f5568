#!/usr/bin/env python3

"""
Custom exceptions for the Rosalind toolkit.

Recoverable errors derive from RosalindError and belong to the problem,
input and configuration layers. InvariantViolation signals corrupted
sequence state and is never caught.
"""

class RosalindError(Exception):
    """Base exception for all recoverable toolkit errors."""
    pass


class ProblemError(RosalindError):
    """Unknown or unsupported problem name."""

    def __init__(self, message: str, problem: str = ""):
        super().__init__(message)
        self.problem = problem

    def __str__(self):
        if self.problem:
            return f"Problem error for '{self.problem}': {super().__str__()}"
        return super().__str__()


class InputError(RosalindError):
    """Error occurred while reading problem input."""

    def __init__(self, message: str, filename: str = ""):
        super().__init__(message)
        self.filename = filename

    def __str__(self):
        if self.filename:
            return f"Input error in {self.filename}: {super().__str__()}"
        return super().__str__()


class ConfigurationError(RosalindError):
    """Error in toolkit configuration."""
    pass


class MemoryLimitError(RosalindError):
    """Memory usage exceeded the configured limit."""

    def __init__(self, message: str, current_usage: float, limit: float):
        super().__init__(message)
        self.current_usage = current_usage
        self.limit = limit

    def __str__(self):
        return f"Memory error: {super().__str__()} (current: {self.current_usage:.1f}MB, limit: {self.limit:.1f}MB)"


class InvariantViolation(AssertionError):
    """A sequence holds a nucleotide outside its strand alphabet."""

    def __init__(self, message: str, strand: str = "", position: int = -1):
        super().__init__(message)
        self.strand = strand
        self.position = position

    def __str__(self):
        if self.strand and self.position >= 0:
            return f"{self.strand} invariant violated at position {self.position}: {super().__str__()}"
        return super().__str__()
