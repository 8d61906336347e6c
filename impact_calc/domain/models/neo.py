from dataclasses import dataclass
from datetime import date

from impact_calc.domain.constants import DEFAULT_ANGLE_DEG

from .base import BaseModel
from .impact import ImpactSimulationInput, TargetType
from .units import Kilometers, KilometersPerSecond, Meters


@dataclass(frozen=True, slots=True)
class NearEarthObject(BaseModel):
    """
    Model that holds the close-approach summary of one NeoWs object.
    """

    neo_id: str
    name: str
    designation: str
    diameter_min_m: Meters
    diameter_max_m: Meters
    velocity_km_s: KilometersPerSecond
    approach_date: date
    miss_distance_km: Kilometers
    is_hazardous: bool

    @property
    def mean_diameter_m(self) -> Meters:
        return Meters((self.diameter_min_m + self.diameter_max_m) / 2)

    def to_simulation_input(
        self,
        angle_deg: float = DEFAULT_ANGLE_DEG,
        target_type: TargetType | str = TargetType.LAND,
    ) -> ImpactSimulationInput:
        """Turn the observed object into a hypothetical impact scenario."""
        return ImpactSimulationInput.from_slider(
            diameter_m=self.mean_diameter_m,
            speed_km_s=self.velocity_km_s,
            angle_deg=angle_deg,
            target_type=target_type,
        )

    def to_dict(self):
        data = BaseModel.to_dict(self)
        data["approach_date"] = self.approach_date.isoformat()
        return data
