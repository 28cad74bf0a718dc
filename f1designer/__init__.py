"""Formula One car aero parts, design files and design comparison."""

__version__ = "1.0.0"