import sys
from typing import TextIO

from src.ens_search.application.ports import NameSinkPort


class StreamNameSink(NameSinkPort):
    """Writes one name per line and flushes so downstream pipes see it at once."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def write_name(self, name: str) -> None:
        self._stream.write(name + "\n")
        self._stream.flush()
