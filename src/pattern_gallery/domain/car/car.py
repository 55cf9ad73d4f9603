"""Car value record."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Color(str, Enum):
    """Paint colours."""
    BLUE = "blue"
    RED = "red"


class Car(BaseModel):
    """A car as produced by ``CarBuilder``. Unpainted cars have no colour."""
    model_config = ConfigDict(frozen=True)

    top_speed: int = 0
    color: Optional[Color] = None

    def drive(self) -> str:
        return f"Driving at speed: {self.top_speed}"

    def stop(self) -> str:
        color = self.color.value if self.color is not None else ""
        return f"Stopping a {color} car"
