"""
HTTP Server - Public surface of the Confidential Grid

The caller identity comes from the X-Identity header, supplied by whatever
transport sits in front of this service. Responses carry ciphertext handles,
never plaintext; plaintext only leaves through /user_decrypt.
"""
from typing import Optional

from fastapi import FastAPI, HTTPException, Header

from confidential_grid.config import LOG_CONFIG
from confidential_grid.errors import (
    GameError,
    AlreadyJoinedError,
    NotJoinedError,
    InvalidPositionError,
    InvalidInputError,
    UnauthorizedInputError,
    DecryptionDeniedError,
    UnknownHandleError,
)
from confidential_grid.service.crypto_ops import EUINT8, KIND_BITS

app = FastAPI(title="Confidential Grid")

ERROR_STATUS = {
    AlreadyJoinedError: 409,
    NotJoinedError: 404,
    InvalidPositionError: 422,
    InvalidInputError: 422,
    UnauthorizedInputError: 403,
    DecryptionDeniedError: 403,
    UnknownHandleError: 404,
}


# Global state - set by GameEngine
class ServerState:
    def __init__(self):
        self.store = None
        self.encryption = None
        self.decryption = None

state = ServerState()


def initialize_server(store, encryption, decryption):
    """Initialize server with the store and crypto collaborators"""
    state.store = store
    state.encryption = encryption
    state.decryption = decryption


def _log(message: str):
    if LOG_CONFIG["verbose"]:
        print(f"[HTTP] {message}")


def _require_state():
    if state.store is None:
        raise HTTPException(status_code=503, detail="Server not initialized")


def _require_identity(x_identity: Optional[str]) -> str:
    if not x_identity:
        raise HTTPException(status_code=401, detail="Missing X-Identity header")
    return x_identity


def _game_error(e: GameError) -> HTTPException:
    _log(f"❌ {e.code}: {e}")
    return HTTPException(
        status_code=ERROR_STATUS.get(type(e), 400),
        detail={"code": e.code, "message": str(e)},
    )


def _describe(value) -> dict:
    return {"handle": value.handle, "kind": value.kind}


# ============================================================================
# Mutations
# ============================================================================

@app.post("/join")
def join(x_identity: Optional[str] = Header(None)):
    _require_state()
    identity = _require_identity(x_identity)
    try:
        state.store.join(identity)
    except GameError as e:
        raise _game_error(e)
    _log(f"✓ {identity} joined")
    return {"identity": identity, "joined": True}


@app.post("/encrypt_input")
def encrypt_input(request: dict, x_identity: Optional[str] = Header(None)):
    """Encrypt a building type for the caller (relayer role); euint8 only"""
    _require_state()
    identity = _require_identity(x_identity)
    kind = request.get("kind", EUINT8)
    if kind != EUINT8:
        raise HTTPException(status_code=422, detail=f"Only {EUINT8} inputs are accepted")
    value = request.get("value")
    if not isinstance(value, int) or isinstance(value, bool) \
            or not 0 <= value < (1 << KIND_BITS[EUINT8]):
        raise HTTPException(status_code=422, detail="value must be between 0 and 255")

    encrypted = state.encryption.encrypt_input(identity, value)
    return _describe(encrypted)


@app.post("/place_building")
def place_building(request: dict, x_identity: Optional[str] = Header(None)):
    _require_state()
    identity = _require_identity(x_identity)
    try:
        position = request["position"]
        handle = request["handle"]
    except KeyError as e:
        raise HTTPException(status_code=422, detail=f"Missing field {e}")

    try:
        proposed = state.store.registry.resolve(handle)
        outcome = state.store.place_building(identity, position, proposed)
    except GameError as e:
        raise _game_error(e)

    _log(f"✓ {identity} placement evaluated at {position}")
    return {
        "identity": identity,
        "position": position,
        "tile": _describe(outcome.new_tile),
        "balance": _describe(outcome.new_balance),
        "status": _describe(outcome.status),
    }


@app.post("/user_decrypt")
def user_decrypt(request: dict, x_identity: Optional[str] = Header(None)):
    """Decrypt a handle for the caller if the caller is an allowed reader"""
    _require_state()
    identity = _require_identity(x_identity)
    handle = request.get("handle")
    if not handle:
        raise HTTPException(status_code=422, detail="Missing field 'handle'")

    try:
        value = state.decryption.user_decrypt_handle(handle, identity)
    except GameError as e:
        raise _game_error(e)
    return {"handle": handle, "value": value}


# ============================================================================
# Public read surface
# ============================================================================

@app.get("/joined/{identity}")
def has_joined(identity: str):
    _require_state()
    return {"identity": identity, "joined": state.store.has_joined(identity)}


@app.get("/balance/{identity}")
def get_balance(identity: str):
    _require_state()
    try:
        return _describe(state.store.get_balance(identity))
    except GameError as e:
        raise _game_error(e)


@app.get("/tile/{identity}/{position}")
def get_tile(identity: str, position: int):
    _require_state()
    try:
        return _describe(state.store.get_tile(identity, position))
    except GameError as e:
        raise _game_error(e)


@app.get("/board/{identity}")
def get_board(identity: str):
    _require_state()
    try:
        return {"tiles": [_describe(tile) for tile in state.store.get_board(identity)]}
    except GameError as e:
        raise _game_error(e)


@app.get("/status/{identity}")
def get_last_status(identity: str):
    _require_state()
    try:
        return _describe(state.store.get_last_status(identity))
    except GameError as e:
        raise _game_error(e)
