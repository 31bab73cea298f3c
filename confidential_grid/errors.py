"""
Errors - Structural error hierarchy

Structural errors are detected on plaintext metadata before any encrypted
computation starts and abort the request with no state change. Rejected
placements (bad building type, occupied tile, missing funds) are never
raised; they come back as an encrypted status code.
"""


class GameError(Exception):
    """Base exception for all Confidential Grid errors."""

    code = "GAME_ERROR"

    def __init__(self, message: str, identity: str = None):
        self.identity = identity
        super().__init__(message)


class AlreadyJoinedError(GameError):
    """Raised when an identity calls join a second time."""

    code = "ALREADY_JOINED"

    def __init__(self, identity: str):
        super().__init__(f"Player '{identity}' has already joined", identity)


class NotJoinedError(GameError):
    """Raised when an identity acts or reads before joining."""

    code = "NOT_JOINED"

    def __init__(self, identity: str):
        super().__init__(f"Player '{identity}' has not joined", identity)


class InvalidPositionError(GameError):
    """Raised for a tile index outside the grid."""

    code = "INVALID_POSITION"

    def __init__(self, position: int, grid_size: int, identity: str = None):
        self.position = position
        self.grid_size = grid_size
        super().__init__(
            f"Position {position} is outside 0-{grid_size - 1}", identity
        )


class UnauthorizedInputError(GameError):
    """Raised when an encrypted input was not issued for the caller."""

    code = "UNAUTHORIZED_INPUT"

    def __init__(self, identity: str):
        super().__init__(
            f"Encrypted input is not usable by '{identity}'", identity
        )


class InvalidInputError(GameError):
    """Raised when a placement input is not a fresh euint8 encrypted input."""

    code = "INVALID_INPUT"

    def __init__(self, identity: str, reason: str):
        self.reason = reason
        super().__init__(f"Rejected input from '{identity}': {reason}", identity)


class DecryptionDeniedError(GameError):
    """Raised when an identity asks to decrypt a value it may not read."""

    code = "DECRYPTION_DENIED"

    def __init__(self, identity: str, handle: str):
        self.handle = handle
        super().__init__(
            f"'{identity}' is not allowed to decrypt {handle}", identity
        )


class UnknownHandleError(GameError):
    """Raised when a ciphertext handle is not in the registry."""

    code = "UNKNOWN_HANDLE"

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f"Unknown ciphertext handle {handle}")
