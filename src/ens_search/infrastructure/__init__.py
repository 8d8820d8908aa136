"""Infrastructure adapters for name availability search."""

from src.ens_search.infrastructure.oracle.controller_oracle import ControllerAvailabilityOracle, create_oracle
from src.ens_search.infrastructure.sinks.stream_sink import StreamNameSink
from src.ens_search.infrastructure.sources import FileLineSource, StdinLineSource, open_line_source

__all__ = [
    "ControllerAvailabilityOracle",
    "create_oracle",
    "FileLineSource",
    "open_line_source",
    "StdinLineSource",
    "StreamNameSink",
]
