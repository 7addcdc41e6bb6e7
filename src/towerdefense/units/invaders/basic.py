from towerdefense.units.base import InvaderProfile, PathInvader


class BasicInvader(PathInvader):
    type_id = "basic_invader"
    display_name = "Invader"
    profile = InvaderProfile(health=2, stride=1)
