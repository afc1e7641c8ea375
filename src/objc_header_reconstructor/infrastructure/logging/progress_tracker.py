#!/usr/bin/env python3

"""Progress tracking for header generation runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time

import psutil


class ProgressTracker:
    """
    Track and report header generation progress.

    Provides contextual timing for each processed module and counts the
    headers written, for the end-of-run summary.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.module_count = 0
        self.header_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    @contextmanager
    def track_module(self, module_name: str) -> Iterator[None]:
        """
        Track one module's header generation.

        Args:
            module_name: Name of the module (binary) being processed
        """
        self.module_count += 1
        module_start = time()
        initial_header_count = self.header_count

        self.logger.debug(f"Processing module #{self.module_count}: {module_name}")

        try:
            yield
        except Exception as e:
            elapsed = time() - module_start
            self.logger.error(f"Module {module_name} failed after {elapsed:.3f}s: {e}")
            raise

        elapsed = time() - module_start
        written = self.header_count - initial_header_count
        self.logger.info(f"{module_name}: {written} headers written in {elapsed:.3f}s")

    def count_header(self) -> None:
        """Increment header counter for statistics."""
        self.header_count += 1

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time
        self.logger.info(
            f"Processing complete: {self.module_count} modules, "
            f"{self.header_count} headers in {total_time:.2f}s"
        )
        self.log_memory_usage()

    def log_memory_usage(self) -> None:
        """Log the resident memory of the current process."""
        memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.module_count = 0
        self.header_count = 0
        self.operation_stack.clear()
