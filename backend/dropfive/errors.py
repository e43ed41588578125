"""Error taxonomy shared by the Socket.IO and HTTP paths.

Every error is non-fatal: the request that raised it is rejected and only the
caller hears about it.
"""


class GameError(Exception):
    code = 'game_error'
    status = 400
    message = 'Request rejected'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        return {'error': self.message, 'code': self.code}


class NotInRoom(GameError):
    code = 'not_in_room'
    status = 400
    message = 'Not in a room'


class RoomNotFound(GameError):
    code = 'room_not_found'
    status = 404
    message = 'Room not found'


class RoomFull(GameError):
    code = 'room_full'
    status = 409
    message = 'Room is full'


class SeatNotFound(GameError):
    code = 'seat_not_found'
    status = 403
    message = 'Player not found'


class OutOfTurn(GameError):
    code = 'out_of_turn'
    status = 409
    message = 'Not your turn'


class MatchAlreadyDecided(GameError):
    code = 'match_decided'
    status = 409
    message = 'The match is already decided'


class ColumnFull(GameError):
    code = 'column_full'
    status = 409
    message = 'Column is full'


class MalformedRequest(GameError):
    code = 'malformed_request'
    status = 400
    message = 'Malformed request'
