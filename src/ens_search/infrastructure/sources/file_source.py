from pathlib import Path
from typing import Iterator, TextIO

from src.config.logger_config import logger
from src.ens_search.application.ports import LineSourcePort
from src.ens_search.domain.errors import SourceError


class FileLineSource(LineSourcePort):
    """Lines of a UTF-8 text file, read lazily through the file object."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.label = str(self.path)
        if not self.path.exists():
            raise SourceError(self.label, f'"{self.label}" does not exist')
        if self.path.is_dir():
            raise SourceError(self.label, f'"{self.label}" is a directory')
        try:
            self._fp: TextIO | None = self.path.open("r", encoding="utf-8")
        except OSError as exc:
            raise SourceError(self.label, f'cannot open "{self.label}": {exc.strerror or exc}') from exc
        logger.debug("File source opened: path={}", self.label)

    def read_line(self) -> str | None:
        if self._fp is None:
            return None
        try:
            line = self._fp.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(self.label, f'failed to read "{self.label}": {exc}') from exc
        return line or None

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None
            logger.debug("File source closed: path={}", self.label)
