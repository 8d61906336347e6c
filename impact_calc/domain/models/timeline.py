from dataclasses import dataclass, field
from enum import Enum

from .base import BaseModel


class MilestoneStatus(str, Enum):
    COMPLETED = "completed"
    ACTIVE = "active"
    PENDING = "pending"
    CRITICAL = "critical"


@dataclass(frozen=True, slots=True)
class TimelineMilestone(BaseModel):
    """A single phase of the detection-to-impact narrative."""

    phase: str
    days_before_impact: int
    status: MilestoneStatus
    description: str

    @property
    def label(self) -> str:
        if self.days_before_impact == 0:
            return "T-0"
        return f"T-{self.days_before_impact} days"


@dataclass(frozen=True, slots=True)
class TrajectoryTimeline(BaseModel):
    days_to_impact: int
    milestones: tuple[TimelineMilestone, ...] = field(default_factory=tuple)
