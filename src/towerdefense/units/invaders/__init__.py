"""Invader types -- one module per variant."""
from .basic import BasicInvader
from .fast import FastInvader
from .resurrecting import ResurrectingInvader
from .shielded import SHIELD_BLOCK_THRESHOLD, ShieldedInvader
from .tough import ToughInvader

__all__ = [
    "BasicInvader",
    "FastInvader",
    "ResurrectingInvader",
    "SHIELD_BLOCK_THRESHOLD",
    "ShieldedInvader",
    "ToughInvader",
]
