from towerdefense.units.base import TowerStats, TowerType


class SniperTower(TowerType):
    """Longer reach and never misses."""
    type_id = "sniper_tower"
    display_name = "Sniper Tower"
    stats = TowerStats(weapon_range=2, power=1, accuracy=1.0)
