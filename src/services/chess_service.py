"""Orchestration of communication from the UI controller to the rules engine (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    BoardResponse,
    GameStateResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    PieceResponse,
)
from src.chess.game import GameEngine
from src.chess.position import Position, all_positions
from src.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ChessService:
    """Owns a single GameEngine. Selection/highlighting stays with the presentation layer."""

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.engine = engine or GameEngine(settings=self.settings)

    def new_game(self) -> GameStateResponse:
        """Player requested a new game: start over from the standard layout."""
        self.engine.reset_game()
        return self.get_game_state()

    def get_game_state(self) -> GameStateResponse:
        return GameStateResponse.from_state(self.engine.get_game_state())

    def get_board(self) -> BoardResponse:
        """Every occupied square, so the UI can draw the pieces."""
        pieces: dict[str, PieceResponse] = {}
        for position in all_positions():
            piece = self.engine.get_piece_at(position)
            if piece is not None:
                pieces[position.to_algebraic()] = PieceResponse.from_piece(piece)
        return BoardResponse(
            pieces=pieces, current_player=self.engine.get_game_state().current_player
        )

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Legal destinations of the piece the player selected (empty when it is not theirs to move)."""
        position = Position.from_algebraic(request.square)
        targets = self.engine.get_valid_moves(position)
        return LegalMovesResponse(
            square=request.square,
            legal_moves=sorted(target.to_algebraic() for target in targets),
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt. A rejected move comes back with success=False and the reason."""
        from_position = Position.from_algebraic(request.from_square)
        to_position = Position.from_algebraic(request.to_square)
        result = self.engine.make_move(from_position, to_position)
        if not result.success:
            logger.debug("Move request %s rejected: %s", request, result.message)
        return MoveResponse.from_result(result, self.engine.get_game_state())
