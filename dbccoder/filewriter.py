"""Line-oriented text accumulator for generated files."""

from __future__ import annotations

import io
import os


class FileWriter:
    """Collects generated text and writes it out to a file."""

    def __init__(self) -> None:
        self._buf = io.StringIO()

    def append(self, line: str = "") -> None:
        """Append *line* and end it with a newline unless it already has one."""
        self._buf.write(line)
        if not line.endswith("\n"):
            self._buf.write("\n")

    def append_text(self, text: str) -> None:
        """Append *text* as is."""
        self._buf.write(text)

    def blank(self, count: int = 1) -> None:
        """Append *count* newlines."""
        self._buf.write("\n" * count)

    def getvalue(self) -> str:
        """Return the text collected so far."""
        return self._buf.getvalue()

    def clear(self) -> None:
        """Drop the collected text."""
        self._buf = io.StringIO()

    def flush(self, path: str | os.PathLike[str]) -> None:
        """Write the collected text to *path* and clear the buffer."""
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(self._buf.getvalue())
        self.clear()