"""
Confidential Grid Models Package
"""

from .account import PlayerAccount

__all__ = ["PlayerAccount"]
