"""Lobby readiness gate: both seats confirm before the match goes active."""

from typing import Optional

from dropfive.models import PHASE_ACTIVE, PHASE_WAITING, ReadyStatus, Room


def _seat_id(room: Room, player_number: int) -> Optional[str]:
    for p in room.game_state.players:
        if p.player_number == player_number:
            return p.id
    return None


def ready_status(room: Room) -> ReadyStatus:
    p1 = _seat_id(room, 1)
    p2 = _seat_id(room, 2)
    return ReadyStatus(
        player1_ready=room.ready.get(p1, False) if p1 else False,
        player2_ready=room.ready.get(p2, False) if p2 else False,
        player_count=len(room.player_ids),
    )


def set_ready(room: Room, sid: str, ready: bool) -> ReadyStatus:
    room.ready[sid] = bool(ready)
    return ready_status(room)


def should_start(room: Room) -> bool:
    """Flip the room to active the first time both seats are ready.

    Returns True only on that transition; later calls return False so the
    match-start event fires once per room.
    """
    if room.phase != PHASE_WAITING:
        return False
    status = ready_status(room)
    if status.player_count == 2 and status.player1_ready and status.player2_ready:
        room.phase = PHASE_ACTIVE
        return True
    return False
