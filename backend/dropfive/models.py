from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from dropfive.services.games.board import Board, create_board

PLAYER_COLORS = {1: 'Green', 2: 'Blue'}

PHASE_WAITING = 'waiting'
PHASE_ACTIVE = 'active'


@dataclass
class Participant:
    id: str
    player_number: int

    def to_dict(self):
        return {'id': self.id, 'playerNumber': self.player_number}


@dataclass
class GameState:
    room_code: str
    board: Board = field(default_factory=create_board)
    turn: int = 1
    players: List[Participant] = field(default_factory=list)
    winner: Optional[str] = None
    last_drop: Optional[Dict[str, int]] = None

    def to_dict(self):
        return {
            'board': [list(row) for row in self.board],
            'turn': self.turn,
            'players': [p.to_dict() for p in self.players],
            'winner': self.winner,
            'roomCode': self.room_code,
            'lastDrop': dict(self.last_drop) if self.last_drop else None,
        }


@dataclass
class ReadyStatus:
    player1_ready: bool
    player2_ready: bool
    player_count: int

    def to_dict(self):
        return {
            'player1Ready': self.player1_ready,
            'player2Ready': self.player2_ready,
            'playerCount': self.player_count,
        }


@dataclass
class MoveResult:
    success: bool
    row: int
    col: int
    player_number: int
    winner: Optional[str] = None
    duplicate: bool = False

    def to_dict(self):
        return {
            'success': self.success,
            'row': self.row,
            'col': self.col,
            'playerNumber': self.player_number,
            'winner': self.winner,
            'duplicate': self.duplicate,
        }


@dataclass
class Room:
    code: str
    game_state: GameState
    player_ids: List[str] = field(default_factory=list)
    ready: Dict[str, bool] = field(default_factory=dict)
    phase: str = PHASE_WAITING
    seats_issued: int = 0
    # (seat, move_id) -> MoveResult, oldest first; cleared on rematch
    applied_moves: 'OrderedDict[Tuple[int, str], MoveResult]' = field(default_factory=OrderedDict)
