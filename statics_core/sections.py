# statics_core/sections.py
"""
Cross-section properties of common solid and thin-walled shapes.

All dimensions in mm. The y axis is the strong (horizontal) bending
axis, z the weak one:

    A   area (mm²)
    I   second moment of area (mm⁴)
    W   elastic section modulus I / c (mm³)
    r   radius of gyration √(I/A) (mm)
"""

import math
from dataclasses import dataclass
from typing import Dict, Union


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float


@dataclass(frozen=True)
class Circle:
    diameter: float


@dataclass(frozen=True)
class Pipe:
    outer_diameter: float
    wall_thickness: float


@dataclass(frozen=True)
class Box:
    """Hollow rectangle with uniform wall ``thickness``."""
    width: float
    height: float
    thickness: float


@dataclass(frozen=True)
class IBeam:
    height: float
    flange_width: float
    flange_thickness: float
    web_thickness: float


Shape = Union[Rectangle, Circle, Pipe, Box, IBeam]


@dataclass(frozen=True)
class SectionProperties:
    area: float
    iy: float
    iz: float
    wy: float
    wz: float
    ry: float
    rz: float


def _props(area: float, iy: float, iz: float, cy: float, cz: float) -> SectionProperties:
    return SectionProperties(
        area=area,
        iy=iy,
        iz=iz,
        wy=iy / cy,
        wz=iz / cz,
        ry=math.sqrt(iy / area),
        rz=math.sqrt(iz / area),
    )


def _check_positive(**dims: float) -> None:
    for name, value in dims.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def section_properties(shape: Shape) -> SectionProperties:
    """
    Area, second moments, section moduli and radii of gyration.

    Raises:
        ValueError: non-positive dimensions, or walls too thick for the shape
        TypeError: unknown shape
    """
    if isinstance(shape, Rectangle):
        b, h = shape.width, shape.height
        _check_positive(width=b, height=h)
        return _props(b * h, b * h ** 3 / 12.0, h * b ** 3 / 12.0, h / 2.0, b / 2.0)

    if isinstance(shape, Circle):
        _check_positive(diameter=shape.diameter)
        R = shape.diameter / 2.0
        I = math.pi * R ** 4 / 4.0
        return _props(math.pi * R * R, I, I, R, R)

    if isinstance(shape, Pipe):
        _check_positive(outer_diameter=shape.outer_diameter, wall_thickness=shape.wall_thickness)
        R = shape.outer_diameter / 2.0
        r = R - shape.wall_thickness
        if r < 0:
            raise ValueError("Pipe wall thicker than its radius")
        I = math.pi * (R ** 4 - r ** 4) / 4.0
        return _props(math.pi * (R * R - r * r), I, I, R, R)

    if isinstance(shape, Box):
        B, H, t = shape.width, shape.height, shape.thickness
        _check_positive(width=B, height=H, thickness=t)
        b, h = B - 2.0 * t, H - 2.0 * t
        if b < 0 or h < 0:
            raise ValueError("Box walls thicker than half its width or height")
        return _props(
            B * H - b * h,
            (B * H ** 3 - b * h ** 3) / 12.0,
            (H * B ** 3 - h * b ** 3) / 12.0,
            H / 2.0,
            B / 2.0,
        )

    if isinstance(shape, IBeam):
        h, bf = shape.height, shape.flange_width
        tf, tw = shape.flange_thickness, shape.web_thickness
        _check_positive(height=h, flange_width=bf, flange_thickness=tf, web_thickness=tw)
        hw = h - 2.0 * tf
        if hw < 0:
            raise ValueError("I-beam flanges thicker than half its height")
        # flanges about the centroid via parallel axes, web about its own axis
        iy = 2.0 * (bf * tf ** 3 / 12.0 + bf * tf * (h / 2.0 - tf / 2.0) ** 2) + tw * hw ** 3 / 12.0
        iz = 2.0 * tf * bf ** 3 / 12.0 + hw * tw ** 3 / 12.0
        return _props(2.0 * bf * tf + hw * tw, iy, iz, h / 2.0, bf / 2.0)

    raise TypeError(f"Unknown section shape: {type(shape).__name__}")


# NP standard I-profiles (TS 145): height, flange width, flange and web thickness
NP_PROFILES: Dict[str, IBeam] = {
    "NP100": IBeam(100.0, 55.0, 5.7, 4.1),
    "NP120": IBeam(120.0, 64.0, 6.3, 4.4),
    "NP140": IBeam(140.0, 73.0, 6.9, 4.7),
    "NP160": IBeam(160.0, 82.0, 7.4, 5.0),
    "NP180": IBeam(180.0, 91.0, 8.0, 5.3),
    "NP200": IBeam(200.0, 100.0, 8.5, 5.6),
    "NP220": IBeam(220.0, 110.0, 9.2, 5.9),
    "NP240": IBeam(240.0, 120.0, 9.8, 6.2),
}
