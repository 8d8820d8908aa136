"""Ports, contracts and workflows for name availability search."""
