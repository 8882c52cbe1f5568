#!/usr/bin/env python3

"""
Performance monitoring for toolkit runs.

Tracks wall time and resident memory per processing phase.
"""

import time
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, Dict, Any

import psutil

from ..core.exceptions import MemoryLimitError


@dataclass
class PerformanceMetrics:
    """Container for performance metrics."""
    start_time: float
    end_time: Optional[float] = None
    peak_memory_mb: float = 0.0
    current_memory_mb: float = 0.0
    operations_count: int = 0
    phase_name: str = ""

    @property
    def elapsed_time(self) -> float:
        """Get elapsed time in seconds."""
        if self.end_time is None:
            return time.time() - self.start_time
        return self.end_time - self.start_time

    @property
    def operations_per_second(self) -> float:
        """Get operations per second."""
        elapsed = self.elapsed_time
        if elapsed > 0 and self.operations_count > 0:
            return self.operations_count / elapsed
        return 0.0


class PerformanceMonitor:
    """Per-phase timing and memory tracking."""

    def __init__(self, memory_limit_mb: int = 1024):
        self.memory_limit_mb = memory_limit_mb
        self.start_time = time.time()
        self.phase_metrics: Dict[str, PerformanceMetrics] = {}
        self.current_phase: Optional[str] = None
        self.process = psutil.Process()

    def get_memory_usage(self) -> float:
        """Get current memory usage in MB."""
        try:
            memory_mb = self.process.memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            logging.warning(f"Error getting memory usage: {e}")
            return 0.0

        # Update peak memory for current phase
        if self.current_phase and self.current_phase in self.phase_metrics:
            metrics = self.phase_metrics[self.current_phase]
            metrics.current_memory_mb = memory_mb
            metrics.peak_memory_mb = max(metrics.peak_memory_mb, memory_mb)

        return memory_mb

    def check_memory_limit(self) -> bool:
        """Check if memory usage exceeds limit."""
        current_memory = self.get_memory_usage()

        if current_memory > self.memory_limit_mb:
            error_msg = "Memory usage exceeded limit"
            logging.warning(f"{error_msg}: {current_memory:.1f}MB > {self.memory_limit_mb}MB")
            raise MemoryLimitError(error_msg, current_memory, self.memory_limit_mb)

        return True

    def start_phase(self, phase_name: str) -> None:
        """Start monitoring a processing phase."""
        if self.current_phase:
            self.end_phase()

        self.current_phase = phase_name
        self.phase_metrics[phase_name] = PerformanceMetrics(
            start_time=time.time(),
            phase_name=phase_name
        )
        self.get_memory_usage()

        logging.debug(f"Started phase: {phase_name}")

    def end_phase(self) -> Optional[PerformanceMetrics]:
        """End the current phase and return metrics."""
        if not self.current_phase:
            return None

        metrics = self.phase_metrics[self.current_phase]
        self.get_memory_usage()
        metrics.end_time = time.time()

        logging.debug(f"Completed phase {self.current_phase} in {metrics.elapsed_time:.4f}s "
                      f"(peak memory: {metrics.peak_memory_mb:.1f}MB)")

        self.current_phase = None
        return metrics

    def record_operations(self, count: int) -> None:
        """Record the number of operations performed in current phase."""
        if self.current_phase and self.current_phase in self.phase_metrics:
            self.phase_metrics[self.current_phase].operations_count += count

    @contextmanager
    def phase_context(self, phase_name: str):
        """Context manager for monitoring a phase."""
        self.start_phase(phase_name)
        try:
            yield self.phase_metrics[phase_name]
        finally:
            self.end_phase()

    def get_total_elapsed_time(self) -> float:
        """Get total elapsed time since monitor creation."""
        return time.time() - self.start_time

    def get_peak_memory(self) -> float:
        """Get peak memory usage across all phases."""
        if not self.phase_metrics:
            return self.get_memory_usage()

        return max(metrics.peak_memory_mb for metrics in self.phase_metrics.values())

    def get_performance_summary(self) -> Dict[str, Any]:
        """Get performance summary."""
        summary = {
            "total_elapsed_time": self.get_total_elapsed_time(),
            "peak_memory_mb": self.get_peak_memory(),
            "memory_limit_mb": self.memory_limit_mb,
            "phases": {}
        }

        for phase_name, metrics in self.phase_metrics.items():
            summary["phases"][phase_name] = {
                "elapsed_time": metrics.elapsed_time,
                "operations_count": metrics.operations_count,
                "operations_per_second": metrics.operations_per_second,
                "peak_memory_mb": metrics.peak_memory_mb
            }

        return summary

    def log_performance_report(self) -> None:
        """Log performance report."""
        summary = self.get_performance_summary()

        logging.info("PERFORMANCE REPORT")
        logging.info(f"Total time: {summary['total_elapsed_time']:.4f} seconds")
        logging.info(f"Peak memory: {summary['peak_memory_mb']:.1f} MB "
                     f"(limit {summary['memory_limit_mb']} MB)")

        for phase_name, phase_data in summary['phases'].items():
            logging.info(f"  {phase_name}: {phase_data['elapsed_time']:.4f}s "
                         f"({phase_data['operations_count']} ops, "
                         f"{phase_data['operations_per_second']:.1f} ops/s, "
                         f"{phase_data['peak_memory_mb']:.1f}MB)")
