import sys
from typing import Iterator, TextIO

from src.ens_search.application.ports import LineSourcePort
from src.ens_search.domain.errors import SourceError

STDIN_LABEL = "<stdin>"


class StdinLineSource(LineSourcePort):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._exhausted = False
        self.label = STDIN_LABEL

    def read_line(self) -> str | None:
        if self._exhausted:
            return None
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(self.label, f"failed to read standard input: {exc}") from exc
        if not line:
            self._exhausted = True
            return None
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line

    def close(self) -> None:
        # The process owns stdin; only stop reading from it.
        self._exhausted = True
