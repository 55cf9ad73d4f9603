"""Observer example configuration schema."""

from typing import List

from pydantic import BaseModel, Field, field_validator


class ObserverConfig(BaseModel):
    """Timing and membership for the observer broadcast loop."""

    interval_seconds: float = Field(1.0, gt=0, description="Seconds between ticks")
    duration_seconds: float = Field(10.0, gt=0, description="Seconds before the loop stops")
    observer_ids: List[int] = Field(
        default_factory=lambda: [1, 2, 3],
        description="Identifiers of the observers registered at start",
    )

    @field_validator("observer_ids")
    @classmethod
    def validate_observer_ids(cls, v: List[int]) -> List[int]:
        """Require at least one observer."""
        if not v:
            raise ValueError("At least one observer id is required")
        return v
