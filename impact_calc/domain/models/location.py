from dataclasses import dataclass

from .base import BaseModel
from .coordinates import Coordinates
from .impact import TargetType


@dataclass(frozen=True, slots=True)
class ImpactLocation(BaseModel):
    """
    A named point on the globe with the terrain the impact lands on.
    """

    name: str
    coordinates: Coordinates
    terrain: TargetType = TargetType.LAND

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.coordinates.lat:.2f}°, "
            f"{self.coordinates.lon:.2f}°, {self.terrain.value})"
        )
