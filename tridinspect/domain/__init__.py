"""Domain models for tridinspect."""

from .results import MatchRecord

__all__ = ["MatchRecord"]
