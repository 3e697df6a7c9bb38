import math

from .matrix import Matrix2x4, Matrix4


def rotation_x(angle):
    """ Rotation of the given angle (in radians) around the X axis.
    """
    cosa = math.cos(angle)
    sina = math.sin(angle)
    return Matrix4([[1, 0, 0, 0],
                    [0, cosa, -sina, 0],
                    [0, sina, cosa, 0],
                    [0, 0, 0, 1]])


def rotation_y(angle):
    """ Rotation of the given angle (in radians) around the Y axis.

    The sine terms carry the opposite signs to the usual right-handed
    convention used by rotation_x and rotation_z. Rendered output depends on
    this, keep it as is.
    """
    cosa = math.cos(angle)
    sina = math.sin(angle)
    return Matrix4([[cosa, 0, -sina, 0],
                    [0, 1, 0, 0],
                    [sina, 0, cosa, 0],
                    [0, 0, 0, 1]])


def rotation_z(angle):
    """ Rotation of the given angle (in radians) around the Z axis.
    """
    cosa = math.cos(angle)
    sina = math.sin(angle)
    return Matrix4([[cosa, -sina, 0, 0],
                    [sina, cosa, 0, 0],
                    [0, 0, 1, 0],
                    [0, 0, 0, 1]])


def scaling(xs, ys, zs):
    return Matrix4([[xs, 0, 0, 0],
                    [0, ys, 0, 0],
                    [0, 0, zs, 0],
                    [0, 0, 0, 1]])


def translation(xt, yt, zt):
    return Matrix4([[1, 0, 0, xt],
                    [0, 1, 0, yt],
                    [0, 0, 1, zt],
                    [0, 0, 0, 1]])


def projection():
    """ Drops y from a homogeneous (x, y, z, w) point: x stays the screen x
    and z becomes the screen y.
    """
    return Matrix2x4([[1, 0, 0, 0],
                      [0, 0, 1, 0]])


def compute_transform(scale, xt, yt, zt, angle_x, angle_y, angle_z):
    """ Combines the transforms of one rendered copy into a single 2x4 matrix.

    M = P * T * S * Rx * Ry * Rz, so points are rotated about Z, then Y, then
    X before being scaled, translated and projected. z is scaled by -scale
    because the SVG vertical axis points downward.
    """
    yz = rotation_y(angle_y) @ rotation_z(angle_z)
    xyz = rotation_x(angle_x) @ yz
    sxyz = scaling(scale, scale, -scale) @ xyz
    tsxyz = translation(xt, yt, zt) @ sxyz
    return projection() @ tsxyz
