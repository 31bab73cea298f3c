"""
Player State Store - Owns every PlayerAccount and applies placements

Structural checks (joined flag, position range, input origin) run on
plaintext metadata before any encrypted work and abort with no state change.
Everything past those checks is delegated to the rule engine and committed
as one unit under the identity's lock.
"""
import threading
from typing import Dict, List, Optional

from confidential_grid.config import GAME_CONFIG, CRYPTO_CONFIG, LOG_CONFIG
from confidential_grid.errors import (
    AlreadyJoinedError,
    NotJoinedError,
    InvalidPositionError,
    InvalidInputError,
    UnauthorizedInputError,
)
from confidential_grid.model import PlayerAccount
from confidential_grid.service.crypto_ops import (
    EncryptedScalar,
    ObliviousOps,
    CiphertextRegistry,
    EUINT8,
)
from confidential_grid.service.locks import KeyedLocks
from confidential_grid.service.rules import (
    EMPTY_TILE,
    StatusCode,
    PlacementOutcome,
    evaluate,
)


class PlayerStateStore:
    """Identity -> PlayerAccount table with per-identity serialization"""

    def __init__(
        self,
        ops: ObliviousOps,
        event_sink=None,
        registry: Optional[CiphertextRegistry] = None,
        store_identity: Optional[str] = None,
        starting_gold: Optional[int] = None,
        grid_size: Optional[int] = None,
    ):
        self.ops = ops
        self.event_sink = event_sink
        self.registry = registry
        self.store_identity = store_identity or CRYPTO_CONFIG["store_identity"]
        self.starting_gold = (
            GAME_CONFIG["starting_gold"] if starting_gold is None else starting_gold
        )
        self.grid_size = grid_size or GAME_CONFIG["grid_size"]

        self._accounts: Dict[str, PlayerAccount] = {}
        self._accounts_guard = threading.Lock()
        self._locks = KeyedLocks()

    # ========================================================================
    # Internal helpers
    # ========================================================================

    def _log(self, message: str):
        if LOG_CONFIG["verbose"]:
            print(f"[Store] {message}")

    def _get_account(self, identity: str) -> Optional[PlayerAccount]:
        with self._accounts_guard:
            return self._accounts.get(identity)

    def _joined_account(self, identity: str) -> PlayerAccount:
        account = self._get_account(identity)
        if account is None or not account.joined:
            self._log(f"✗ {identity} has not joined")
            raise NotJoinedError(identity)
        return account

    def _check_position(self, position: int, identity: str):
        if isinstance(position, bool) or not isinstance(position, int) \
                or not 0 <= position < self.grid_size:
            self._log(f"✗ {identity} used invalid position {position}")
            raise InvalidPositionError(position, self.grid_size, identity)

    def _check_input(self, proposed_type: EncryptedScalar, identity: str):
        if not proposed_type.is_readable_by(identity):
            self._log(f"✗ {identity} submitted an input bound to someone else")
            raise UnauthorizedInputError(identity)
        if not proposed_type.is_input:
            self._log(f"✗ {identity} submitted a stored value as input")
            raise InvalidInputError(identity, "not an encrypted input")
        if proposed_type.kind != EUINT8:
            self._log(f"✗ {identity} submitted a {proposed_type.kind} input")
            raise InvalidInputError(identity, f"expected {EUINT8}, got {proposed_type.kind}")
        if self.registry is not None and proposed_type.handle not in self.registry:
            self._log(f"✗ {identity} reused a spent input")
            raise InvalidInputError(identity, "input was already used")

    def _grant(self, value: EncryptedScalar, identity: str) -> EncryptedScalar:
        """Rebind the reader set to owner + store before a value is stored"""
        value = value.allow(identity, self.store_identity)
        if self.registry is not None:
            self.registry.register(value)
        return value

    def _retire(self, *values: EncryptedScalar):
        """Drop handles that no longer back any stored value"""
        if self.registry is None:
            return
        for value in values:
            self.registry.discard(value.handle)

    def _notify(self, event: str, *args):
        """Forward an event to the sink; sink failures never undo a commit"""
        if self.event_sink is None:
            return
        try:
            getattr(self.event_sink, event)(*args)
        except Exception as e:
            print(f"[Store] ⚠ Event sink failed on {event}: {e}")

    # ========================================================================
    # Mutations
    # ========================================================================

    def join(self, identity: str) -> PlayerAccount:
        """
        Create the account for `identity` with starting gold and an empty grid.

        Raises:
            AlreadyJoinedError: identity already joined
        """
        with self._locks.hold(identity):
            existing = self._get_account(identity)
            if existing is not None and existing.joined:
                self._log(f"✗ {identity} tried to join twice")
                raise AlreadyJoinedError(identity)

            account = PlayerAccount(identity)
            account.balance = self._grant(self.ops.as_euint64(self.starting_gold), identity)
            account.grid = [
                self._grant(self.ops.as_euint8(EMPTY_TILE), identity)
                for _ in range(self.grid_size)
            ]
            account.last_status = self._grant(self.ops.as_euint8(StatusCode.SUCCESS), identity)
            account.joined = True

            with self._accounts_guard:
                self._accounts[identity] = account

            self._log(f"✓ {identity} joined")
            self._notify("player_joined", identity)
            return account

    def place_building(
        self,
        identity: str,
        position: int,
        proposed_type: EncryptedScalar,
    ) -> PlacementOutcome:
        """
        Evaluate and commit a placement on `position`.

        The outcome (accepted or rejected) is only visible through the
        encrypted tile, balance and status; a rejection is not an error.

        Raises:
            NotJoinedError: identity has not joined
            InvalidPositionError: position outside the grid
            UnauthorizedInputError: proposed_type was not issued to identity
            InvalidInputError: proposed_type is not an unused euint8 input
        """
        with self._locks.hold(identity):
            account = self._joined_account(identity)
            self._check_position(position, identity)
            self._check_input(proposed_type, identity)

            outcome = evaluate(
                self.ops,
                proposed_type,
                account.grid[position],
                account.balance,
            )

            replaced = (account.grid[position], account.balance, account.last_status)
            committed = PlacementOutcome(
                new_tile=self._grant(outcome.new_tile, identity),
                new_balance=self._grant(outcome.new_balance, identity),
                status=self._grant(outcome.status, identity),
            )
            account.grid[position] = committed.new_tile
            account.balance = committed.new_balance
            account.last_status = committed.status
            self._retire(proposed_type, *replaced)

            self._log(f"✓ {identity} placement evaluated at position {position}")
            self._notify("building_placed", identity, position)
            return committed

    # ========================================================================
    # Read accessors (never decrypt)
    # ========================================================================

    def has_joined(self, identity: str) -> bool:
        account = self._get_account(identity)
        return account is not None and account.joined

    def get_balance(self, identity: str) -> EncryptedScalar:
        with self._locks.hold(identity):
            return self._joined_account(identity).balance

    def get_tile(self, identity: str, position: int) -> EncryptedScalar:
        with self._locks.hold(identity):
            account = self._joined_account(identity)
            self._check_position(position, identity)
            return account.grid[position]

    def get_board(self, identity: str) -> List[EncryptedScalar]:
        with self._locks.hold(identity):
            return list(self._joined_account(identity).grid)

    def get_last_status(self, identity: str) -> EncryptedScalar:
        with self._locks.hold(identity):
            return self._joined_account(identity).last_status
