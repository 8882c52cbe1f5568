#!/usr/bin/env python3

"""
Main pipeline class for running a Rosalind problem.

Reads the input file, dispatches to the problem solver and records
per-phase performance.
"""

import io
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .config import RosalindConfig
from .exceptions import InputError, RosalindError
from .problems import Problem, resolve_problem
from ..utils.performance_monitor import PerformanceMonitor


class RosalindPipeline:
    """Coordinates input reading and problem solving."""

    def __init__(self, config: Optional[RosalindConfig] = None):
        self.config = config if config is not None else RosalindConfig()
        self.monitor = PerformanceMonitor(memory_limit_mb=self.config.memory_limit_mb)
        self.problem: Optional[Problem] = None
        self.input_text: str = ""

    def run(self, problem: str, input_path: str,
            output: Optional[TextIO] = None) -> bool:
        """
        Run a problem on the contents of an input file.

        Args:
            problem: Problem name or alias
            input_path: Path to the problem input
            output: Stream receiving the answer (standard output if None)

        Returns:
            True if the problem was solved
        """
        try:
            self.problem = resolve_problem(problem)
            logging.info(f"Problem: {self.problem.name}")
            logging.info(f"Input file: {input_path}")

            self._read_input(input_path)
            answer = self._solve()

            stream = output if output is not None else sys.stdout
            stream.write(answer)

            if self.config.enable_performance_monitoring:
                self.monitor.log_performance_report()

            return True

        except RosalindError as e:
            logging.error(f"{e}")
            logging.debug("Full traceback:", exc_info=True)
            return False

    def _read_input(self, input_path: str) -> None:
        """Read the whole input file."""
        with self.monitor.phase_context("input_reading"):
            try:
                self.input_text = Path(input_path).read_text()
            except FileNotFoundError:
                raise InputError("Input file not found", input_path)
            except (OSError, UnicodeDecodeError) as e:
                raise InputError(f"Failed to read input: {e}", input_path)

            self.monitor.record_operations(len(self.input_text))
            logging.debug(f"Read {len(self.input_text)} characters from {input_path}")

    def _solve(self) -> str:
        """
        Run the resolved problem solver and return its answer.

        The answer is buffered so nothing is written when the run fails
        the memory limit check.
        """
        buffer = io.StringIO()
        with self.monitor.phase_context("problem_solving"):
            self.problem.solver(
                self.input_text,
                output=buffer,
                report_diagnostics=self.config.report_diagnostics
            )
            self.monitor.record_operations(len(self.input_text))

            if self.config.enable_performance_monitoring:
                self.monitor.check_memory_limit()

        return buffer.getvalue()
