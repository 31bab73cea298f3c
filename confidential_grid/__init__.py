"""
Confidential Grid - Encrypted gold and a secret 3x3 building grid

Placement legality (valid type, empty tile, enough gold) is decided and
applied without ever branching on encrypted values.
"""

__version__ = "0.1.0"
