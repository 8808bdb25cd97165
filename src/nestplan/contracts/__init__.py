"""Contracts - protocols shared between the application and infrastructure layers."""

from nestplan.contracts.strategies import PlacementStrategy

__all__ = ["PlacementStrategy"]
