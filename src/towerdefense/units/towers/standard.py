from towerdefense.units.base import TowerStats, TowerType


class StandardTower(TowerType):
    type_id = "standard_tower"
    display_name = "Tower"
    stats = TowerStats(weapon_range=1, power=1, accuracy=0.75)
