"""
Pydantic schemas for arena match records.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Color(str, Enum):
    """Player color."""
    WHITE = "WHITE"
    BLACK = "BLACK"


class MatchOutcome(str, Enum):
    """How a match ended."""
    WHITE = "WHITE"
    BLACK = "BLACK"
    DRAW = "draw"


class MoveRecord(BaseModel):
    """A move that was played."""
    turn: int = Field(ge=0, description="Zero-based turn number")
    player: Color
    row: int = Field(ge=0, le=5)
    col: int = Field(ge=0, le=5)
    quadrant: int = Field(ge=0, le=3)
    rotation: str = Field(description="'cw' or 'ccw'")
    elapsed_ms: float = Field(ge=0, description="Time the agent spent choosing the move")

    class Config:
        json_schema_extra = {
            "example": {
                "turn": 0,
                "player": "WHITE",
                "row": 1,
                "col": 1,
                "quadrant": 3,
                "rotation": "cw",
                "elapsed_ms": 1712.4
            }
        }


class MatchResult(BaseModel):
    """Result of a single match."""
    white_agent: str
    black_agent: str
    outcome: Optional[MatchOutcome] = None
    moves: List[MoveRecord] = Field(default_factory=list)
    duration_s: float = 0.0
    error: Optional[str] = None

    @property
    def winner_name(self) -> Optional[str]:
        if self.outcome == MatchOutcome.WHITE:
            return self.white_agent
        if self.outcome == MatchOutcome.BLACK:
            return self.black_agent
        return None


class AgentRecord(BaseModel):
    """Aggregate record of one agent across a tournament."""
    wins: int = 0
    losses: int = 0
    draws: int = 0
    errors: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> float:
        return self.wins / self.games if self.games else 0.0


class ArenaSummary(BaseModel):
    """Results of a round-robin tournament."""
    agents: List[str]
    total_matches: int
    agent_stats: Dict[str, AgentRecord]
    match_results: List[MatchResult]
    total_time_s: float
    created_at: datetime = Field(default_factory=datetime.now)
