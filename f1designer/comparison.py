"""Side-by-side comparison of two car designs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .design import CarDesign, PartType

_PART_LABELS = (
    ("Front Wing", PartType.FRONT_WING),
    ("Rear Wing", PartType.REAR_WING),
    ("Diffuser", PartType.DIFFUSER),
    ("Sidepods", PartType.SIDEPODS),
)


def percent_difference(value: float, reference: float) -> float:
    """Relative difference of ``value`` against ``reference`` in percent; 0 for a zero reference."""
    if reference == 0:
        return 0.0
    return (value - reference) / reference * 100


@dataclass(frozen=True)
class MetricComparison:
    """One metric of two designs."""

    metric: str
    first: float
    second: float
    higher_is_better: bool = False
    template: str = "{:.2f}"

    @property
    def difference(self) -> float:
        """Percent difference of the first design against the second."""
        return percent_difference(self.first, self.second)

    @property
    def first_better(self) -> bool:
        """True when the first value is at least as good as the second."""
        if self.higher_is_better:
            return self.first >= self.second
        return self.first <= self.second

    @property
    def second_better(self) -> bool:
        """True when the second value is at least as good as the first."""
        if self.higher_is_better:
            return self.second >= self.first
        return self.second <= self.first

    def format(self, value: float) -> str:
        return self.template.format(value)


def compare_designs(first: CarDesign, second: CarDesign) -> List[MetricComparison]:
    """Drag, mass, cost, fuel consumption and speed of two designs."""
    attrs1 = first.total_attributes()
    attrs2 = second.total_attributes()
    return [
        MetricComparison("Drag", attrs1.drag, attrs2.drag),
        MetricComparison("Mass", attrs1.mass, attrs2.mass, template="{:.2f} kg"),
        MetricComparison("Cost", attrs1.cost, attrs2.cost, template="${:.2f}"),
        MetricComparison(
            "Fuel Consumption",
            first.fuel_consumption(),
            second.fuel_consumption(),
            template="{:.2f} L/100km",
        ),
        MetricComparison(
            "Speed",
            first.speed(),
            second.speed(),
            higher_is_better=True,
            template="{:.2f} km/h",
        ),
    ]


def part_summary(design: CarDesign) -> List[Tuple[str, str, float]]:
    """(part label, design name, aero efficiency) for each part of a design."""
    return [
        (label, design.part_design_name(part_type), design.aero_efficiency(part_type))
        for label, part_type in _PART_LABELS
    ]