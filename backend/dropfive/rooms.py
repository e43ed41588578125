"""In-memory session store.

Two plain dicts are kept in step by every mutating method: rooms by code and
room codes by connection id. Events are handled one at a time, so each method
runs to completion before the next request can observe the tables.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from dropfive.errors import NotInRoom, RoomFull, RoomNotFound, SeatNotFound
from dropfive.models import GameState, Participant, Room
from dropfive.services.games.board import create_board

CODE_ALPHABET = 'ABCDEFGHJKLMNPQRSTUVWXYZ23456789'
CODE_LENGTH = 4
MAX_SEATS = 2


def generate_room_code(length=CODE_LENGTH, rng=random):
    """Random code from an alphabet without 0/O or 1/I. Not checked for collisions."""
    return ''.join(rng.choices(CODE_ALPHABET, k=length))


@dataclass
class LeaveResult:
    room_code: str
    player_number: Optional[int]
    destroyed: bool
    remaining: List[str] = field(default_factory=list)


class RoomStore:
    def __init__(self, code_factory=generate_room_code):
        self._code_factory = code_factory
        self.rooms: Dict[str, Room] = {}
        self.player_rooms: Dict[str, str] = {}

    def __len__(self):
        return len(self.rooms)

    def _new_code(self) -> str:
        code = self._code_factory()
        while code in self.rooms:
            code = self._code_factory()
        return code

    def create_room(self, sid: str) -> Room:
        if sid in self.player_rooms:
            self.leave(sid)
        code = self._new_code()
        room = Room(code=code, game_state=GameState(room_code=code))
        self._seat(room, sid)
        self.rooms[code] = room
        return room

    @staticmethod
    def check_joinable(room: Room, sid: str) -> None:
        """Raise RoomFull unless ``sid`` is seated in or can take a seat in ``room``."""
        if sid in room.player_ids:
            return
        if len(room.player_ids) >= MAX_SEATS:
            raise RoomFull()
        if room.seats_issued >= MAX_SEATS:
            raise RoomFull('Room no longer accepts players')

    def join_room(self, code: str, sid: str) -> Tuple[Room, int]:
        room = self.get_room(code)
        self.check_joinable(room, sid)
        if sid in room.player_ids:
            return room, self.participant_for(room, sid).player_number
        if sid in self.player_rooms:
            self.leave(sid)
        seat = self._seat(room, sid)
        return room, seat.player_number

    def _seat(self, room: Room, sid: str) -> Participant:
        room.seats_issued += 1
        seat = Participant(id=sid, player_number=room.seats_issued)
        room.player_ids.append(sid)
        room.game_state.players.append(seat)
        self.player_rooms[sid] = room.code
        return seat

    def get_room(self, code) -> Room:
        room = self.rooms.get(code.upper()) if isinstance(code, str) else None
        if room is None:
            raise RoomNotFound()
        return room

    def room_for(self, sid: str) -> Room:
        code = self.player_rooms.get(sid)
        if code is None:
            raise NotInRoom()
        return self.get_room(code)

    @staticmethod
    def participant_for(room: Room, sid) -> Participant:
        for p in room.game_state.players:
            if p.id == sid:
                return p
        raise SeatNotFound()

    def leave(self, sid: str) -> Optional[LeaveResult]:
        code = self.player_rooms.pop(sid, None)
        if code is None:
            return None
        room = self.rooms.get(code)
        if room is None:
            return None

        seat = next((p for p in room.game_state.players if p.id == sid), None)
        room.player_ids = [pid for pid in room.player_ids if pid != sid]
        room.game_state.players = [p for p in room.game_state.players if p.id != sid]
        room.ready.pop(sid, None)

        destroyed = not room.player_ids
        if destroyed:
            del self.rooms[code]
        return LeaveResult(
            room_code=code,
            player_number=seat.player_number if seat else None,
            destroyed=destroyed,
            remaining=list(room.player_ids),
        )

    @staticmethod
    def reset_for_rematch(room: Room) -> GameState:
        state = room.game_state
        state.board = create_board()
        state.turn = 1
        state.winner = None
        state.last_drop = None
        room.applied_moves.clear()
        return state
