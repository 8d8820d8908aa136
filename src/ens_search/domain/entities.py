from dataclasses import dataclass


@dataclass(frozen=True)
class AvailabilityResult:
    name: str
    available: bool
    queried: bool
