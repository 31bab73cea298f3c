"""
Player Account Model

Confidential state held for one identity.
"""
from typing import List, Optional

from confidential_grid.service.crypto_ops import EncryptedScalar


class PlayerAccount:
    """
    Represents one player's board and purse.

    CONFIDENTIAL STATE: balance, tiles and last status are ciphertexts.
    Only `joined` is public. Every stored ciphertext must list the owner
    (and the store) among its readers.
    """
    def __init__(self, identity: str):
        self.identity = identity
        self.joined = False
        self.balance: Optional[EncryptedScalar] = None
        self.grid: List[EncryptedScalar] = []
        self.last_status: Optional[EncryptedScalar] = None

    def stored_values(self) -> List[EncryptedScalar]:
        """Every ciphertext currently held by this account"""
        values = list(self.grid)
        if self.balance is not None:
            values.append(self.balance)
        if self.last_status is not None:
            values.append(self.last_status)
        return values
