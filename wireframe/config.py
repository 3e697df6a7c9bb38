"""
Configuration
=============
Process-wide constants for the wireframe renderer and the immutable
configuration objects built from them.

Nothing here is mutated at runtime. The scene, the SVG writer and the
preview all receive a ``RenderConfig`` explicitly, ``DEFAULT_CONFIG`` unless
the caller builds another one.
"""
import math
from dataclasses import dataclass
from typing import Tuple

WIREFRAME_INPUT_FILENAME: str = "input.txt"
HTML5_SVG_OUTPUT_FILENAME: str = "output.html"
DOCUMENT_TITLE: str = "Wireframe"

# Object colours, one per rendered copy
OBJECT_COLOR_0: str = "magenta"
OBJECT_COLOR_1: str = "cyan"
OBJECT_COLOR_2: str = "blue"
OBJECT_COLOR_3: str = "purple"
PALETTE: Tuple[str, ...] = (OBJECT_COLOR_0, OBJECT_COLOR_1,
                            OBJECT_COLOR_2, OBJECT_COLOR_3)

CANVAS_SIZE_X: int = 500
CANVAS_SIZE_Y: int = 500

# Rotations shared by every copy, in radians
ROTATION_ANGLE_X: float = math.radians(20)
ROTATION_ANGLE_Y: float = math.radians(0)
ROTATION_ANGLE_Z: float = math.radians(-45)

MAX_WIREFRAME_EDGES: int = 5000
POINTS_PER_EDGE: int = 6


@dataclass(frozen=True)
class Instance:
    """One rendered copy of the wireframe."""
    scale: float
    xt: float
    yt: float
    zt: float
    colour: str


DEFAULT_INSTANCES: Tuple[Instance, ...] = (
    Instance(200, 125, 0, 125, OBJECT_COLOR_0),
    Instance(150, 375, 0, 125, OBJECT_COLOR_1),
    Instance(100, 125, 0, 375, OBJECT_COLOR_2),
    Instance(50, 375, 0, 375, OBJECT_COLOR_3),
)


@dataclass(frozen=True)
class RenderConfig:
    angle_x: float = ROTATION_ANGLE_X
    angle_y: float = ROTATION_ANGLE_Y
    angle_z: float = ROTATION_ANGLE_Z
    canvas_width: int = CANVAS_SIZE_X
    canvas_height: int = CANVAS_SIZE_Y
    instances: Tuple[Instance, ...] = DEFAULT_INSTANCES
    max_edges: int = MAX_WIREFRAME_EDGES
    title: str = DOCUMENT_TITLE


DEFAULT_CONFIG = RenderConfig()
