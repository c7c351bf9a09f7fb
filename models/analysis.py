from pydantic import Field, field_validator
from typing import List, Optional
from datetime import datetime

from .base import ApiModel, ApiInput, ensure_aware

class MoveEvaluation(ApiModel):
    move: str
    evaluation: float
    classification: str
    best_move: Optional[str] = None

class AnalysisDetail(ApiModel):
    moves: List[MoveEvaluation] = Field(default_factory=list)

class GameAnalysisBase(ApiModel):
    user_id: int
    pgn_data: str = Field(min_length=1)
    white_player: Optional[str] = None
    black_player: Optional[str] = None
    result: Optional[str] = None
    date: Optional[datetime] = None
    analysis: Optional[AnalysisDetail] = None

    @field_validator('date')
    @classmethod
    def normalize_date(cls, v):
        return ensure_aware(v)

class GameAnalysisCreate(GameAnalysisBase, ApiInput):
    pass

class GameAnalysis(GameAnalysisBase):
    id: int
    created_at: datetime

class PositionAnalysisRequest(ApiModel):
    fen: Optional[str] = None
    depth: Optional[int] = Field(default=None, ge=1)

class PositionAnalysis(ApiModel):
    evaluation: float
    best_move: str
    principal_variation: List[str]
    depth: int
