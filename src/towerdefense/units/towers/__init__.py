"""Tower types -- one module per variant."""
from .powerful import PowerfulTower
from .sniper import SniperTower
from .standard import StandardTower

__all__ = [
    "PowerfulTower",
    "SniperTower",
    "StandardTower",
]
