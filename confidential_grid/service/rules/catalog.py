from typing import Dict

from confidential_grid.config import GAME_CONFIG

# ============================================================================
# Building Catalog
# ============================================================================

EMPTY_TILE = 0

BUILDING_COSTS: Dict[int, int] = dict(GAME_CONFIG["building_costs"])

BUILDING_NAMES: Dict[int, str] = {
    1: "farm",
    2: "house",
    3: "barracks",
    4: "castle",
}

BUILDING_TYPES = tuple(sorted(BUILDING_COSTS))


def building_name(building_type: int) -> str:
    """Display name for a decrypted tile value ("empty" for 0)"""
    if building_type == EMPTY_TILE:
        return "empty"
    return BUILDING_NAMES.get(building_type, "unknown")


# ============================================================================
# Status Codes
# ============================================================================

class StatusCode:
    SUCCESS = 0
    INVALID_BUILDING = 1
    TILE_TAKEN = 2
    INSUFFICIENT_FUNDS = 3


STATUS_MESSAGES: Dict[int, str] = {
    StatusCode.SUCCESS: "Building placed",
    StatusCode.INVALID_BUILDING: "Invalid building type",
    StatusCode.TILE_TAKEN: "Tile already occupied",
    StatusCode.INSUFFICIENT_FUNDS: "Not enough gold",
}


def status_message(status: int) -> str:
    return STATUS_MESSAGES.get(status, "Unknown result")
