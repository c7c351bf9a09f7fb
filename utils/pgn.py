import io
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple

import chess.pgn

logger = logging.getLogger(__name__)

UNKNOWN_PLAYER = "Unknown"
UNKNOWN_RESULT = "*"


@dataclass(frozen=True)
class ParsedGame:
    white: str = UNKNOWN_PLAYER
    black: str = UNKNOWN_PLAYER
    result: str = UNKNOWN_RESULT
    date: Optional[str] = None
    event: Optional[str] = None
    site: Optional[str] = None
    moves: Tuple[str, ...] = ()


def _header(headers, key: str) -> Optional[str]:
    value = headers.get(key)
    if not value or set(value) <= {"?", "."}:
        return None
    return value


def parse_pgn(text: Optional[str]) -> Optional[ParsedGame]:
    """Read the first game's headers and SAN mainline; None if there is no game."""
    if not text or not text.strip():
        return None
    try:
        game = chess.pgn.read_game(io.StringIO(text))
    except (ValueError, KeyError) as exc:
        logger.debug("PGN parse failed: %s", exc)
        return None
    if game is None:
        return None
    moves = []
    board = game.board()
    for move in game.mainline_moves():
        moves.append(board.san(move))
        board.push(move)
    headers = game.headers
    return ParsedGame(
        white=_header(headers, "White") or UNKNOWN_PLAYER,
        black=_header(headers, "Black") or UNKNOWN_PLAYER,
        result=_header(headers, "Result") or UNKNOWN_RESULT,
        date=_header(headers, "Date"),
        event=_header(headers, "Event"),
        site=_header(headers, "Site"),
        moves=tuple(moves),
    )


def pgn_date(value: Optional[str]) -> Optional[datetime]:
    """Convert a PGN `YYYY.MM.DD` tag to a UTC datetime; partial dates give None."""
    if not value:
        return None
    try:
        parsed = datetime.strptime(value, "%Y.%m.%d")
    except ValueError:
        return None
    return parsed.replace(tzinfo=timezone.utc)
