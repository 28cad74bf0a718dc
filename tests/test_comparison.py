import pytest

from f1designer.comparison import (
    MetricComparison,
    compare_designs,
    part_summary,
    percent_difference,
)
from f1designer.design import CarDesign, PartType


def _low_drag():
    design = CarDesign()
    design.set_part_design(
        PartType.FRONT_WING | PartType.REAR_WING | PartType.DIFFUSER | PartType.SIDEPODS, 2
    )
    return design


def test_percent_difference_zero_reference():
    assert percent_difference(10.0, 0.0) == 0.0


def test_percent_difference_value():
    assert percent_difference(15.0, 10.0) == pytest.approx(50.0)


def test_percent_difference_same_value_is_zero():
    assert percent_difference(7.5, 7.5) == 0.0


def test_metric_order():
    names = [m.metric for m in compare_designs(CarDesign(), CarDesign())]
    assert names == ["Drag", "Mass", "Cost", "Fuel Consumption", "Speed"]


def test_identical_designs_tie():
    for metric in compare_designs(CarDesign(), CarDesign()):
        assert metric.difference == 0.0
        assert metric.first_better and metric.second_better


def test_values_match_design_metrics():
    first, second = _low_drag(), CarDesign()
    by_name = {m.metric: m for m in compare_designs(first, second)}
    assert by_name["Drag"].first == first.total_attributes().drag
    assert by_name["Cost"].second == second.total_attributes().cost
    assert by_name["Fuel Consumption"].first == first.fuel_consumption()
    assert by_name["Speed"].second == second.speed()


def test_better_flags():
    by_name = {m.metric: m for m in compare_designs(_low_drag(), CarDesign())}
    assert by_name["Drag"].first_better and not by_name["Drag"].second_better
    assert by_name["Mass"].second_better and not by_name["Mass"].first_better
    assert by_name["Speed"].first_better and not by_name["Speed"].second_better


def test_difference_signs_swap():
    forward = compare_designs(_low_drag(), CarDesign())
    backward = compare_designs(CarDesign(), _low_drag())
    for a, b in zip(forward, backward):
        assert (a.difference < 0) == (b.difference > 0)


def test_format_templates():
    by_name = {m.metric: m for m in compare_designs(CarDesign(), CarDesign())}
    assert by_name["Mass"].format(2.0) == "2.00 kg"
    assert by_name["Cost"].format(5.0) == "$5.00"


def test_metric_comparison_higher_is_better():
    metric = MetricComparison("Speed", 1.0, 2.0, higher_is_better=True)
    assert metric.second_better and not metric.first_better


def test_part_summary_defaults():
    summary = part_summary(CarDesign())
    assert [label for label, _, _ in summary] == ["Front Wing", "Rear Wing", "Diffuser", "Sidepods"]
    assert all(name == "Standard" and eff == 1.0 for _, name, eff in summary)


def test_part_summary_reflects_changes():
    design = CarDesign()
    design.set_part_design(PartType.DIFFUSER, 1)
    design.adjust_aero_efficiency(PartType.SIDEPODS, 1.25)
    summary = part_summary(design)
    assert summary[2][1] == "Aggressive"
    assert summary[3][2] == 1.25