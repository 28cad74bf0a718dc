# f1designer

Put together a Formula One car from a choice of aero parts. See what the choice
does to drag, mass, cost, fuel consumption and top speed. Designs can be saved
to and loaded from plain text files, and two designs can be compared side by
side.

## Parts

A car has four aero parts. Each part comes in five designs. Each part also has
an aero efficiency factor, clamped to the range 0.5 to 1.5, that scales its
drag, mass and cost.

| Part       | Class       | Designs (index 0 to 4)                                     |
|------------|-------------|------------------------------------------------------------|
| Front wing | `FrontWing` | Standard, High Downforce, Low Drag, Balanced, Experimental |
| Rear wing  | `RearWing`  | Standard, High Downforce, Low Drag, Balanced, Experimental |
| Diffuser   | `Diffuser`  | Standard, Aggressive, Minimal, Balanced, Experimental      |
| Sidepods   | `Sidepods`  | Standard, Compact, Streamlined, Balanced, Experimental     |

These classes live in `f1designer.parts`, together with `PartAttributes`, a
frozen dataclass of `drag`, `mass` and `cost`. `PartAttributes` values can be
added together and multiplied by a number. They order by cost.

## Metrics

`CarDesign.total_attributes()` sums the four parts. The models are:

- `fuel_consumption()`: `0.15 * mass + 0.25 * drag + 5.0`
- `speed()`: `15000 / (drag + 0.05 * mass)`

## Installation

```
pip install .
```

## Usage

```python
from f1designer.design import CarDesign, PartType, validate_design_name
from f1designer.comparison import compare_designs, part_summary

car = CarDesign()
car.set_part_design(PartType.FRONT_WING, 1)
car.adjust_aero_efficiency(PartType.REAR_WING, 0.9)
print(car.total_attributes(), car.fuel_consumption(), car.speed())
print(car.visual_representation())

print(validate_design_name("Monza Spec"))   # (True, '')
car.save("Monza Spec", "designs")           # the directory must already exist

other = CarDesign()
other.load("Monza Spec", "designs")
for label, name, efficiency in part_summary(other):
    print(label, name, efficiency)
for row in compare_designs(car, other):
    print(row.metric, row.format(row.first), row.format(row.second), f"{row.difference:.2f}%")
```

### Selecting parts

`PartType` is a flag enum with the members `FRONT_WING`, `REAR_WING`,
`DIFFUSER` and `SIDEPODS`. `set_part_design` and `adjust_aero_efficiency`
act on every part named in the flags, so `PartType.FRONT_WING | PartType.REAR_WING`
sets both wings at once.

A design index outside 0 to 4 raises `ValueError`. The parts clamp the
efficiency factor. `aero_efficiency(part_type)` reports the factor as it was
last requested, before clamping. `copy()` returns an independent duplicate of a
design.

### Design names

`validate_design_name` trims surrounding whitespace. It then rejects names that
are empty, longer than 50 characters, or made of anything but letters, digits,
`_`, `-` and inner spaces. It returns a `(valid, message)` pair.

### Design files

`save(name, directory)` writes `<directory>/<name>.f1design`, with one
`Key: value` line per part and per part's aero efficiency, for example:

```
FrontWing: 1
RearWing: 0
Diffuser: 0
Sidepods: 0
FrontWingAero: 1
RearWingAero: 0.9
DiffuserAero: 1
SidepodsAero: 1
```

The directory defaults to `designs`. An invalid name raises `ValueError`. A
file that cannot be written, read or understood raises
`f1designer.design.DesignFileError`. Keys missing from a file leave the
matching part unchanged.

### Comparing designs

`compare_designs(first, second)` returns one `MetricComparison` each for drag,
mass, cost, fuel consumption and speed. Each gives both values, the percent
`difference` of the first against the second, and `first_better` /
`second_better`. Lower is better, except for speed. `percent_difference`
returns 0 when the reference is 0.

## What this package does not do

There is no command-line program and no interactive screen. The package has no
store of saved designs either: it does not create the designs directory, list
or count the designs in it, or back a design up before it is overwritten.
Callers name the files and directories they save to and load from.

## Tests

```
pip install .[test]
pytest
```