"""ENS name availability search."""
