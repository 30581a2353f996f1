"""The player identity as far as the game area is concerned. The hosting layer owns the real player entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Player:
    id: str
    user_name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.user_name:
            object.__setattr__(self, "user_name", self.id)
