from .catalog import (
    EMPTY_TILE,
    BUILDING_COSTS,
    BUILDING_NAMES,
    BUILDING_TYPES,
    STATUS_MESSAGES,
    StatusCode,
    building_name,
    status_message,
)
from .placement import PlacementOutcome, evaluate, derive_status

__all__ = [
    'EMPTY_TILE',
    'BUILDING_COSTS',
    'BUILDING_NAMES',
    'BUILDING_TYPES',
    'STATUS_MESSAGES',
    'StatusCode',
    'building_name',
    'status_message',
    'PlacementOutcome',
    'evaluate',
    'derive_status',
]
