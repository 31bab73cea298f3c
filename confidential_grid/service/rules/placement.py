"""
Placement Rule Engine

Decides whether an encrypted building may be placed on an encrypted tile with
an encrypted balance, and derives the resulting tile, balance and status.
Everything below runs unconditionally; no Python `if` ever looks at a
ciphertext.
"""
from typing import NamedTuple

from confidential_grid.service.crypto_ops import EncryptedScalar, ObliviousOps

from .catalog import BUILDING_COSTS, BUILDING_TYPES, EMPTY_TILE, StatusCode


class PlacementOutcome(NamedTuple):
    new_tile: EncryptedScalar
    new_balance: EncryptedScalar
    status: EncryptedScalar


def evaluate(
    ops: ObliviousOps,
    proposed_type: EncryptedScalar,
    existing_tile: EncryptedScalar,
    balance: EncryptedScalar,
) -> PlacementOutcome:
    """
    Evaluate a placement request obliviously.

    Args:
        ops: Predicate combinators
        proposed_type: euint8 building type chosen by the player
        existing_tile: euint8 current value of the target tile
        balance: euint64 current gold

    Returns:
        PlacementOutcome whose three values all follow the same accept decision
    """
    # One equality test per catalog entry, all of them always evaluated
    type_matches = [
        ops.eq(proposed_type, ops.as_euint8(building_type))
        for building_type in BUILDING_TYPES
    ]
    is_valid = ops.any_of(type_matches)

    # Unknown types fall through to cost 0; is_valid keeps them rejected
    cost = ops.as_euint64(0)
    for building_type, matches in zip(BUILDING_TYPES, type_matches):
        cost = ops.select(matches, ops.as_euint64(BUILDING_COSTS[building_type]), cost)

    is_empty = ops.eq(existing_tile, ops.as_euint8(EMPTY_TILE))
    has_funds = ops.ge(balance, cost)

    can_place = ops.all_of([is_valid, is_empty, has_funds])

    new_tile = ops.select(can_place, proposed_type, existing_tile)

    spend = ops.select(can_place, cost, ops.as_euint64(0))
    new_balance = ops.sub(balance, spend)

    status = derive_status(ops, is_valid, is_empty, has_funds, can_place)

    return PlacementOutcome(new_tile, new_balance, status)


def derive_status(
    ops: ObliviousOps,
    is_valid: EncryptedScalar,
    is_empty: EncryptedScalar,
    has_funds: EncryptedScalar,
    can_place: EncryptedScalar,
) -> EncryptedScalar:
    """
    Status code with precedence INVALID_BUILDING > TILE_TAKEN >
    INSUFFICIENT_FUNDS, then forced back to SUCCESS whenever can_place holds.
    """
    not_valid = ops.not_(is_valid)
    not_empty = ops.not_(is_empty)
    not_funded = ops.not_(has_funds)

    tile_taken = ops.and_(is_valid, not_empty)
    unaffordable = ops.all_of([is_valid, is_empty, not_funded])

    status = ops.as_euint8(StatusCode.SUCCESS)
    status = ops.select(not_valid, ops.as_euint8(StatusCode.INVALID_BUILDING), status)
    status = ops.select(tile_taken, ops.as_euint8(StatusCode.TILE_TAKEN), status)
    status = ops.select(unaffordable, ops.as_euint8(StatusCode.INSUFFICIENT_FUNDS), status)

    # can_place is the single source of truth for success
    return ops.select(can_place, ops.as_euint8(StatusCode.SUCCESS), status)
