"""A complete car design: four aero parts, metrics and the design file format."""

from __future__ import annotations

import enum
import re
from pathlib import Path
from typing import Dict, Tuple, Type, Union

from .parts import AeroPart, Diffuser, FrontWing, PartAttributes, RearWing, Sidepods

DESIGN_EXTENSION = ".f1design"
DEFAULT_DIRECTORY = "designs"
MAX_NAME_LENGTH = 50

_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_-][a-zA-Z0-9_ -]*[a-zA-Z0-9_-]")
_C_WHITESPACE = " \t\n\v\f\r"
_LEADING_NUMBER = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


class PartType(enum.IntFlag):
    NONE = 0
    FRONT_WING = 1 << 0
    REAR_WING = 1 << 1
    DIFFUSER = 1 << 2
    SIDEPODS = 1 << 3


class DesignFileError(Exception):
    """A design file could not be written, read or understood."""


_PART_CLASSES: Dict[PartType, Type[AeroPart]] = {
    PartType.FRONT_WING: FrontWing,
    PartType.REAR_WING: RearWing,
    PartType.DIFFUSER: Diffuser,
    PartType.SIDEPODS: Sidepods,
}

PathLike = Union[str, Path]


def validate_design_name(name: str) -> Tuple[bool, str]:
    """Check a design name; return (valid, error message)."""
    trimmed = name.strip(_C_WHITESPACE)
    if not trimmed:
        return False, "Design name cannot be empty"
    if len(trimmed) > MAX_NAME_LENGTH:
        return False, f"Design name exceeds {MAX_NAME_LENGTH} characters"
    if _NAME_PATTERN.fullmatch(trimmed) is None:
        return (
            False,
            "Design name contains invalid characters (use alphanumeric, _, -, or spaces)",
        )
    return True, ""


def _split_lines(text: str) -> list:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class CarDesign:
    """A car built from a front wing, rear wing, diffuser and sidepods."""

    def __init__(self) -> None:
        self._parts: Dict[PartType, AeroPart] = {
            part_type: cls() for part_type, cls in _PART_CLASSES.items()
        }
        self._efficiencies: Dict[PartType, float] = {part_type: 1.0 for part_type in _PART_CLASSES}

    def copy(self) -> CarDesign:
        duplicate = CarDesign()
        for part_type, part in self._parts.items():
            duplicate._parts[part_type].set_design(part.selected_design)
            duplicate.adjust_aero_efficiency(part_type, self._efficiencies[part_type])
        return duplicate

    def total_attributes(self) -> PartAttributes:
        return sum((part.attributes() for part in self._parts.values()), PartAttributes())

    def fuel_consumption(self) -> float:
        attrs = self.total_attributes()
        return 0.15 * attrs.mass + 0.25 * attrs.drag + 5.0

    def speed(self) -> float:
        attrs = self.total_attributes()
        return 15000.0 / (attrs.drag + 0.05 * attrs.mass)

    @staticmethod
    def _path(name: str, directory: PathLike) -> Path:
        return Path(directory) / f"{name}{DESIGN_EXTENSION}"

    def save(self, name: str, directory: PathLike = DEFAULT_DIRECTORY) -> Path:
        """Write the design to ``directory/name.f1design`` and return the path."""
        valid, error = validate_design_name(name)
        if not valid:
            raise ValueError(error)
        lines = [f"{part.PART_TYPE}: {part.selected_design}" for part in self._parts.values()]
        lines += [
            f"{part.PART_TYPE}Aero: {self._efficiencies[part_type]:g}"
            for part_type, part in self._parts.items()
        ]
        path = self._path(name, directory)
        try:
            with path.open("w", encoding="utf-8") as handle:
                handle.writelines(line + "\n" for line in lines)
        except OSError as exc:
            raise DesignFileError("Failed to save design") from exc
        return path

    def load(self, name: str, directory: PathLike = DEFAULT_DIRECTORY) -> None:
        """Read ``directory/name.f1design`` into this design."""
        path = self._path(name, directory)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise DesignFileError("Corrupted design file") from exc
        except OSError as exc:
            raise DesignFileError("Failed to load design") from exc

        values: Dict[str, float] = {}
        for line in _split_lines(text):
            key, _, rest = line.partition(":")
            match = _LEADING_NUMBER.match(rest)
            if not line or match is None:
                raise DesignFileError("Corrupted design file")
            values[key] = float(match.group(1))

        try:
            for part in self._parts.values():
                if part.PART_TYPE in values:
                    part.set_design(int(values[part.PART_TYPE]))
            for part_type, part in self._parts.items():
                key = f"{part.PART_TYPE}Aero"
                if key in values:
                    self._efficiencies[part_type] = values[key]
                    part.adjust_aero_efficiency(values[key])
        except (ValueError, OverflowError) as exc:
            raise DesignFileError("Invalid design data") from exc

    def set_part_design(self, part_type: PartType, index: int) -> None:
        """Select design ``index`` for every part named in the ``part_type`` flags."""
        for flag, part in self._parts.items():
            if part_type & flag:
                part.set_design(index)

    def part_design(self, part_type: PartType) -> int:
        part = self._parts.get(part_type)
        return part.selected_design if part is not None else 0

    def part_design_name(self, part_type: PartType) -> str:
        part = self._parts.get(part_type)
        return part.design_name() if part is not None else ""

    def visual_representation(self) -> str:
        parts = self._parts
        return (
            "  _______ \n"
            f" /  ***  \\ [{parts[PartType.FRONT_WING].design_name()}]\n"
            "/_________\\\n"
            f"|  ***  | [{parts[PartType.SIDEPODS].design_name()}]\n"
            "|  ***  |\n"
            f"|_______| [{parts[PartType.DIFFUSER].design_name()}]\n"
            f" \\  ***  / [{parts[PartType.REAR_WING].design_name()}]\n"
            "  \\_____/\n"
        )

    def adjust_aero_efficiency(self, part_type: PartType, factor: float) -> None:
        """Set the efficiency of every part named in ``part_type``; parts clamp it."""
        for flag, part in self._parts.items():
            if part_type & flag:
                self._efficiencies[flag] = factor
                part.adjust_aero_efficiency(factor)

    def aero_efficiency(self, part_type: PartType) -> float:
        """The efficiency factor as last requested for one part."""
        try:
            return self._efficiencies[part_type]
        except KeyError:
            raise ValueError(f"Unknown part type: {part_type!r}") from None

    def __repr__(self) -> str:
        chosen = ", ".join(
            f"{part.PART_TYPE}={part.selected_design}@{self._efficiencies[pt]:g}"
            for pt, part in self._parts.items()
        )
        return f"CarDesign({chosen})"