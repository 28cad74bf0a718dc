"""Aerodynamic car parts and their physical attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Mapping

MIN_AERO_EFFICIENCY = 0.5
MAX_AERO_EFFICIENCY = 1.5


@dataclass(frozen=True)
class PartAttributes:
    """Drag, mass and cost of a part or of a whole car."""

    drag: float = 0.0
    mass: float = 0.0
    cost: float = 0.0

    def __add__(self, other: PartAttributes) -> PartAttributes:
        if not isinstance(other, PartAttributes):
            return NotImplemented
        return PartAttributes(
            self.drag + other.drag,
            self.mass + other.mass,
            self.cost + other.cost,
        )

    def __mul__(self, scalar: float) -> PartAttributes:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return PartAttributes(self.drag * scalar, self.mass * scalar, self.cost * scalar)

    __rmul__ = __mul__

    def __lt__(self, other: PartAttributes) -> bool:
        if not isinstance(other, PartAttributes):
            return NotImplemented
        return self.cost < other.cost


class AeroPart:
    """A part with a choice of catalogue designs and an aero efficiency factor."""

    PART_TYPE: ClassVar[str] = ""
    DESIGNS: ClassVar[Mapping[int, PartAttributes]] = {}
    DESIGN_NAMES: ClassVar[Mapping[int, str]] = {}

    def __init__(self) -> None:
        self._selected_design = 0
        self._aero_efficiency = 1.0

    @property
    def selected_design(self) -> int:
        return self._selected_design

    @property
    def aero_efficiency(self) -> float:
        return self._aero_efficiency

    def attributes(self) -> PartAttributes:
        """Attributes of the selected design scaled by the aero efficiency."""
        return self.DESIGNS[self._selected_design] * self._aero_efficiency

    def set_design(self, index: int) -> None:
        if index not in self.DESIGNS:
            raise ValueError(f"Invalid {self.PART_TYPE} design")
        self._selected_design = index

    def design_name(self) -> str:
        return self.DESIGN_NAMES[self._selected_design]

    def adjust_aero_efficiency(self, factor: float) -> None:
        """Set the efficiency factor, clamped to the allowed range."""
        self._aero_efficiency = min(max(factor, MIN_AERO_EFFICIENCY), MAX_AERO_EFFICIENCY)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(design={self._selected_design}, "
            f"aero_efficiency={self._aero_efficiency})"
        )


_WING_NAMES = {
    0: "Standard",
    1: "High Downforce",
    2: "Low Drag",
    3: "Balanced",
    4: "Experimental",
}


class FrontWing(AeroPart):
    PART_TYPE = "FrontWing"
    DESIGNS = {
        0: PartAttributes(10.0, 5.0, 10000.0),
        1: PartAttributes(12.0, 4.5, 12000.0),
        2: PartAttributes(8.0, 6.0, 9000.0),
        3: PartAttributes(11.0, 5.2, 11000.0),
        4: PartAttributes(9.5, 5.8, 9500.0),
    }
    DESIGN_NAMES = _WING_NAMES


class RearWing(AeroPart):
    PART_TYPE = "RearWing"
    DESIGNS = {
        0: PartAttributes(15.0, 6.0, 15000.0),
        1: PartAttributes(18.0, 5.5, 18000.0),
        2: PartAttributes(12.0, 7.0, 13000.0),
        3: PartAttributes(16.0, 6.2, 16000.0),
        4: PartAttributes(13.5, 6.8, 14000.0),
    }
    DESIGN_NAMES = _WING_NAMES


class Diffuser(AeroPart):
    PART_TYPE = "Diffuser"
    DESIGNS = {
        0: PartAttributes(5.0, 3.0, 8000.0),
        1: PartAttributes(6.0, 2.8, 9000.0),
        2: PartAttributes(4.0, 3.5, 7000.0),
        3: PartAttributes(5.5, 3.2, 8500.0),
        4: PartAttributes(4.5, 3.3, 7500.0),
    }
    DESIGN_NAMES = {
        0: "Standard",
        1: "Aggressive",
        2: "Minimal",
        3: "Balanced",
        4: "Experimental",
    }


class Sidepods(AeroPart):
    PART_TYPE = "Sidepods"
    DESIGNS = {
        0: PartAttributes(8.0, 10.0, 20000.0),
        1: PartAttributes(9.0, 9.5, 22000.0),
        2: PartAttributes(7.0, 11.0, 18000.0),
        3: PartAttributes(8.5, 10.2, 21000.0),
        4: PartAttributes(7.5, 10.5, 19000.0),
    }
    DESIGN_NAMES = {
        0: "Standard",
        1: "Compact",
        2: "Streamlined",
        3: "Balanced",
        4: "Experimental",
    }