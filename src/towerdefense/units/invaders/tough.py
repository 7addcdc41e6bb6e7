from towerdefense.units.base import InvaderProfile, PathInvader


class ToughInvader(PathInvader):
    """Twice the health of a basic invader, same pace."""
    type_id = "tough_invader"
    display_name = "Tough Invader"
    profile = InvaderProfile(health=4, stride=1)
