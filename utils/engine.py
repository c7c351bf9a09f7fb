from typing import Tuple

import chess

from models.analysis import PositionAnalysis

# Upper bounds (centipawns) for each move class; anything above is a blunder.
CLASSIFICATION_THRESHOLDS = (
    (0, "Best"),
    (2, "Excellent"),
    (5, "Good"),
    (10, "Inaccuracy"),
    (20, "Mistake"),
)

def classify_move(before_eval: float, after_eval: float) -> Tuple[str, float]:
    """Classify a move by the evaluation swing it caused (pawn units in, centipawns out)."""
    centipawn_loss = abs(after_eval - before_eval) * 100
    for limit, label in CLASSIFICATION_THRESHOLDS:
        if centipawn_loss <= limit:
            return label, centipawn_loss
    return "Blunder", centipawn_loss

def validate_fen(fen: str) -> bool:
    try:
        chess.Board(fen)
    except ValueError:
        return False
    return True

def mock_position_analysis(fen: str, depth: int) -> PositionAnalysis:
    """Placeholder analysis until a real engine is wired in."""
    return PositionAnalysis(
        evaluation=0.4,
        best_move="Nf3",
        principal_variation=["Nf3", "d5", "d4", "Nf6"],
        depth=depth,
    )
