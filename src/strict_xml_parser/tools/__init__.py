"""Developer tools for the strict XML parser."""

from .profiling import PerformanceProfiler, PerformanceReport, ProfilingSession

__all__ = [
    "PerformanceProfiler",
    "PerformanceReport",
    "ProfilingSession",
]
