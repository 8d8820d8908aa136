from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class LineSourcePort(Protocol):
    label: str

    def read_line(self) -> str | None: ...
    """Return the next raw line, or None once the input is exhausted."""

    def __iter__(self) -> Iterator[str]: ...
    """Iterate over the remaining raw lines."""

    def close(self) -> None: ...
    """Release the underlying handle."""


@runtime_checkable
class AvailabilityOraclePort(Protocol):
    async def is_available(self, name: str) -> bool: ...
    """Ask the registry whether a canonical name can be registered."""


@runtime_checkable
class NameSinkPort(Protocol):
    def write_name(self, name: str) -> None: ...
    """Emit one available name, visible to the reader immediately."""
