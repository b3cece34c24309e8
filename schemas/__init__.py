"""
Pydantic schemas for Pentago arena records.
"""

from .match import AgentRecord, ArenaSummary, Color, MatchOutcome, MatchResult, MoveRecord

__all__ = [
    "AgentRecord",
    "ArenaSummary",
    "Color",
    "MatchOutcome",
    "MatchResult",
    "MoveRecord",
]
