"""Timestamped trace log written by the algorithms while they run."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TRACE_FILE = "output.txt"


@dataclass
class Trace:
    """Appends ``<seconds since start>: <text>`` lines to a log file.

    With ``path`` set to ``None`` nothing is written to disk; the messages are
    still collected in :attr:`messages`.
    """

    path: Path | str | None = DEFAULT_TRACE_FILE
    start: float = field(default_factory=time.perf_counter)
    messages: list[str] = field(default_factory=list, init=False)

    def clear(self) -> None:
        """Empty the log file and the collected messages."""
        self.messages.clear()
        if self.path is not None:
            Path(self.path).write_text("", encoding="utf-8")

    def write(self, text: str) -> str:
        """Record ``text`` with the elapsed time and return the written line.

        Raises ``OSError`` if the log file cannot be opened.
        """
        elapsed = time.perf_counter() - self.start
        line = f"{elapsed:g}: {text}"
        if self.path is not None:
            with open(self.path, "a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        self.messages.append(text)
        return line