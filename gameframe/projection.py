"""Projection and look-at matrices.

All matrices use left-handed coordinates: the camera looks down +z and
depth maps to the range -1 (near plane) to +1 (far plane).
"""

from __future__ import annotations

import math

from gameframe.matrix import Mat4
from gameframe.vector import Vec3


def frustum(
    left: float, right: float, bottom: float, top: float, near_z: float, far_z: float
) -> Mat4:
    """Return a perspective projection for the given view frustum.

    Raises ValueError unless both planes are in front of the viewer and every
    extent is positive.
    """
    delta_x = right - left
    delta_y = top - bottom
    delta_z = far_z - near_z
    if not (near_z > 0.0 and far_z > 0.0 and delta_x > 0.0 and delta_y > 0.0 and delta_z > 0.0):
        raise ValueError(
            "frustum needs positive near and far planes and positive width, height and depth"
        )
    return Mat4(
        2.0 * near_z / delta_x, 0.0, 0.0, 0.0,
        0.0, 2.0 * near_z / delta_y, 0.0, 0.0,
        (right + left) / delta_x, (top + bottom) / delta_y, (near_z + far_z) / delta_z, 1.0,
        0.0, 0.0, -2.0 * near_z * far_z / delta_z, 0.0,
    )


def perspective_vfov(
    vert_fov_degrees: float, aspect: float, near_z: float, far_z: float
) -> Mat4:
    """Return a perspective projection from a vertical field of view in degrees."""
    top = math.tan(math.radians(vert_fov_degrees / 2)) * near_z
    right = top * aspect
    return frustum(-right, right, -top, top, near_z, far_z)


def perspective_hfov(
    hor_fov_degrees: float, aspect: float, near_z: float, far_z: float
) -> Mat4:
    """Return a perspective projection from a horizontal field of view in degrees."""
    right = math.tan(math.radians(hor_fov_degrees / 2)) * near_z
    top = right / aspect
    return frustum(-right, right, -top, top, near_z, far_z)


def ortho(
    left: float, right: float, bottom: float, top: float, near_z: float, far_z: float
) -> Mat4:
    """Return an orthographic projection of the given box.

    Raises ValueError if the box has zero width, height or depth.
    """
    delta_x = right - left
    delta_y = top - bottom
    delta_z = far_z - near_z
    if delta_x == 0.0 or delta_y == 0.0 or delta_z == 0.0:
        raise ValueError("orthographic box must have non-zero width, height and depth")
    return Mat4(
        2.0 / delta_x, 0.0, 0.0, 0.0,
        0.0, 2.0 / delta_y, 0.0, 0.0,
        0.0, 0.0, 2.0 / delta_z, 0.0,
        -(right + left) / delta_x, -(top + bottom) / delta_y, -(far_z + near_z) / delta_z, 1.0,
    )


def look_at_view(eye: Vec3, up: Vec3, at: Vec3) -> Mat4:
    """Return a view matrix for a camera at ``eye`` looking towards ``at``."""
    z_axis = (at - eye).normalized()
    x_axis = up.cross(z_axis).normalized()
    y_axis = z_axis.cross(x_axis)
    pos = Vec3(-x_axis.dot(eye), -y_axis.dot(eye), -z_axis.dot(eye))
    result = Mat4()
    result.set_axes_view(x_axis, y_axis, z_axis, pos)
    return result


def look_at_world(obj_pos: Vec3, up: Vec3, at: Vec3) -> Mat4:
    """Return a world matrix placing an object at ``obj_pos`` facing ``at``."""
    z_axis = (at - obj_pos).normalized()
    x_axis = up.cross(z_axis).normalized()
    y_axis = z_axis.cross(x_axis)
    result = Mat4()
    result.set_axes_world(x_axis, y_axis, z_axis, obj_pos)
    return result