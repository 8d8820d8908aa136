"""Domain rules and errors for name availability search."""

from src.ens_search.domain.entities import AvailabilityResult
from src.ens_search.domain.errors import ConfigError, EnsSearchError, OracleError, SourceError
from src.ens_search.domain.names import MIN_NAME_LENGTH, format_eth_name, is_queryable, normalize_name

__all__ = [
    "AvailabilityResult",
    "ConfigError",
    "EnsSearchError",
    "format_eth_name",
    "is_queryable",
    "MIN_NAME_LENGTH",
    "normalize_name",
    "OracleError",
    "SourceError",
]
