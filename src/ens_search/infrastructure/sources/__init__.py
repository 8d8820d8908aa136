"""Line sources for batch input."""

from src.ens_search.application.ports import LineSourcePort
from src.ens_search.infrastructure.sources.file_source import FileLineSource
from src.ens_search.infrastructure.sources.stdin_source import STDIN_LABEL, StdinLineSource

STDIN_PATH = "-"


def open_line_source(path: str) -> LineSourcePort:
    """Open ``path`` as a line source; ``-`` means standard input.

    Raises:
        SourceError: if a file path does not exist or cannot be opened.
    """
    if path == STDIN_PATH:
        return StdinLineSource()
    return FileLineSource(path)


__all__ = ["FileLineSource", "open_line_source", "STDIN_LABEL", "STDIN_PATH", "StdinLineSource"]
