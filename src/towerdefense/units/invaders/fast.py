from towerdefense.units.base import InvaderProfile, PathInvader


class FastInvader(PathInvader):
    """Covers two path steps per move, so it is in range half as long."""
    type_id = "fast_invader"
    display_name = "Fast Invader"
    profile = InvaderProfile(health=2, stride=2)
