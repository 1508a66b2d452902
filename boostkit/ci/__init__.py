"""
CI host integration for BoostKit.
"""

from .actions import ActionsHost

__all__ = ["ActionsHost"]
