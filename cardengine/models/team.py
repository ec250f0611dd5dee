"""Team model."""

from pydantic import BaseModel, model_validator


class Team(BaseModel, frozen=True):
    """Two partnered players, referenced by their seat index.

    A team never holds the players themselves; members are resolved
    through the owning GameState.
    """

    name: str
    members: tuple[int, int]

    @model_validator(mode="after")
    def check_members(self) -> "Team":
        a, b = self.members
        if a < 0 or b < 0:
            raise ValueError("Team member indices must be non-negative")
        if a == b:
            raise ValueError("A team needs two different players")
        return self

    def __contains__(self, player_index: int) -> bool:
        return player_index in self.members

    def partner_of(self, player_index: int) -> int:
        """Get the seat index of a member's partner."""
        a, b = self.members
        if player_index == a:
            return b
        if player_index == b:
            return a
        raise ValueError(f"Player {player_index} is not in team {self.name}")
