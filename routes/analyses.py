from fastapi import APIRouter, Depends, HTTPException
from typing import List
from db.storage import MemoryStore, get_store
from models.analysis import GameAnalysis, GameAnalysisCreate, PositionAnalysis, PositionAnalysisRequest
from utils.engine import mock_position_analysis, validate_fen
from utils.pgn import parse_pgn, pgn_date
from config import get_config_value

router = APIRouter()

@router.get("/game-analyses/single/{analysis_id}", response_model=GameAnalysis)
async def get_game_analysis(analysis_id: int, store: MemoryStore = Depends(get_store)):
    analysis = store.get_game_analysis(analysis_id)
    if not analysis:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return analysis

@router.get("/game-analyses/{user_id}", response_model=List[GameAnalysis])
async def list_game_analyses(user_id: int, store: MemoryStore = Depends(get_store)):
    return store.get_game_analyses(user_id)

@router.post("/game-analyses", response_model=GameAnalysis)
async def create_game_analysis(data: GameAnalysisCreate, store: MemoryStore = Depends(get_store)):
    """Store a game; player names, result and date default to the PGN headers."""
    game = parse_pgn(data.pgn_data)
    if game:
        headers = {
            "white_player": game.white,
            "black_player": game.black,
            "result": game.result,
            "date": pgn_date(game.date),
        }
        fill = {
            key: value for key, value in headers.items()
            if value is not None and key not in data.model_fields_set
        }
        if fill:
            data = data.model_copy(update=fill)
    return store.create_game_analysis(data)

@router.post("/analyze-position", response_model=PositionAnalysis)
async def analyze_position(body: PositionAnalysisRequest):
    if not body.fen:
        raise HTTPException(status_code=400, detail="FEN position required")
    if not validate_fen(body.fen):
        raise HTTPException(status_code=400, detail="Invalid FEN position")
    depth = body.depth or get_config_value("engine", "depth", 15)
    return mock_position_analysis(body.fen, depth)
