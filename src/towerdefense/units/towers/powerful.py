from towerdefense.units.base import TowerStats, TowerType


class PowerfulTower(TowerType):
    """Double damage per hit, standard reach and accuracy."""
    type_id = "powerful_tower"
    display_name = "Powerful Tower"
    stats = TowerStats(weapon_range=1, power=2, accuracy=0.75)
