"""Performance profiling tools for the strict XML parser.

Times parse operations and samples the resident memory of the current process
before and after each one.
"""

import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

import psutil

from strict_xml_parser.api import XMLParser
from strict_xml_parser.shared.logging import get_logger
from strict_xml_parser.tree import ParseResult


@dataclass
class ProfilingSession:
    """Measurements for one profiled operation."""

    session_id: str
    input_size: int  # characters
    start_time: float
    end_time: float = 0.0
    memory_start: int = 0  # bytes
    memory_end: int = 0  # bytes
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        """Processing duration in milliseconds."""
        return max(0.0, (self.end_time - self.start_time) * 1000)

    @property
    def memory_delta(self) -> int:
        """Memory usage change in bytes."""
        return self.memory_end - self.memory_start

    @property
    def throughput_chars_per_s(self) -> float:
        duration_s = self.end_time - self.start_time
        if duration_s <= 0:
            return 0.0
        return self.input_size / duration_s

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "input_size": self.input_size,
            "duration_ms": self.duration_ms,
            "memory_delta_bytes": self.memory_delta,
            "throughput_chars_per_s": self.throughput_chars_per_s,
            **self.metadata,
        }


@dataclass
class PerformanceReport:
    """Aggregate over several profiling sessions."""

    sessions: List[ProfilingSession]

    @property
    def session_count(self) -> int:
        return len(self.sessions)

    @property
    def average_duration_ms(self) -> float:
        """Average processing duration across sessions."""
        if not self.sessions:
            return 0.0
        return sum(s.duration_ms for s in self.sessions) / len(self.sessions)

    @property
    def peak_memory_delta(self) -> int:
        return max((s.memory_delta for s in self.sessions), default=0)


class PerformanceProfiler:
    """Profiler for XML parsing operations.

    Examples:
        >>> profiler = PerformanceProfiler()
        >>> result, session = profiler.profile_parse(xml_text)
        >>> session.duration_ms >= 0
        True
    """

    def __init__(
        self,
        enable_memory_tracking: bool = True,
        max_sessions: Optional[int] = None
    ) -> None:
        """Initialize performance profiler.

        Args:
            enable_memory_tracking: Whether to sample process memory
            max_sessions: Keep at most this many of the latest sessions
                (unbounded when None)
        """
        if max_sessions is not None and max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self.enable_memory_tracking = enable_memory_tracking
        self.max_sessions = max_sessions
        self.sessions: List[ProfilingSession] = []
        self.logger = get_logger(__name__, None, "performance_profiler")
        self._process = psutil.Process() if enable_memory_tracking else None

    def _memory_usage(self) -> int:
        if self._process is None:
            return 0
        return self._process.memory_info().rss

    @contextmanager
    def profile(
        self, session_id: Optional[str] = None, input_size: int = 0
    ) -> Iterator[ProfilingSession]:
        """Measure the enclosed block as one session."""
        session = ProfilingSession(
            session_id=session_id or uuid.uuid4().hex[:8],
            input_size=input_size,
            start_time=time.time(),
            memory_start=self._memory_usage(),
        )
        try:
            yield session
        finally:
            session.end_time = time.time()
            session.memory_end = self._memory_usage()
            self.sessions.append(session)
            if self.max_sessions is not None and len(self.sessions) > self.max_sessions:
                del self.sessions[:-self.max_sessions]
            self.logger.debug(
                "Profiling session finished",
                extra={
                    "session_id": session.session_id,
                    "duration_ms": session.duration_ms,
                    "memory_delta": session.memory_delta,
                }
            )

    def profile_parse(
        self,
        text: str,
        parser: Optional[XMLParser] = None,
        session_id: Optional[str] = None
    ) -> Tuple[ParseResult, ProfilingSession]:
        """Parse ``text`` inside a profiling session.

        Returns:
            The parse result (never raises for XML errors) and its session
        """
        parser = parser or XMLParser()
        with self.profile(session_id, input_size=len(text)) as session:
            result = parser.try_parse(text)
        session.metadata["success"] = result.success
        session.metadata["elements_created"] = result.performance.elements_created
        return result, session

    def generate_report(self) -> PerformanceReport:
        return PerformanceReport(sessions=list(self.sessions))

    def clear_sessions(self) -> None:
        """Clear all stored profiling sessions."""
        session_count = len(self.sessions)
        self.sessions.clear()

        self.logger.debug(
            "Cleared profiling sessions",
            extra={"cleared_count": session_count}
        )
