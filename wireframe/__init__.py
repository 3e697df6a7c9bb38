from .errors import UnreadableInput, UnwritableOutput, WireframeError
from .loader import EdgeList, parse_wireframe, read_wireframe
from .matrix import Matrix2x2, Matrix2x4, Matrix4, PointPair, multiply
from .scene import Line, Point, Scene, render
from .svg import SvgWriter
from .transforms import (compute_transform, projection, rotation_x,
                         rotation_y, rotation_z, scaling, translation)

__version__ = "0.1.0"
