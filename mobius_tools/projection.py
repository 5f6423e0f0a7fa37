"""Stereographic projection between the extended complex plane and the
unit sphere in R^3, and Mobius transformations coming from rotations
of the sphere.

The north pole (0, 0, 1) corresponds to the point at infinity, and
the south pole (0, 0, -1) corresponds to 0. Under this correspondence
every rotation of the sphere acts on the extended plane by a Mobius
transformation.

"""

import warnings

import numpy as np
from scipy.spatial.transform import Rotation

from .base import GeometryError
from .transformation import LFT
from .utils import types
from .utils.extended import INFINITY, r_to_c

def north_pole():
    return np.array([0., 0., 1.])

def plane_to_sphere(points):
    """Project points in the extended complex plane to the unit sphere.

    Parameters
    ----------
    points : number or array_like
        a point (or array of points) in the extended complex plane.

    Returns
    -------
    ndarray
        Float array of shape `points.shape + (3,)`. The point at
        infinity maps to the north pole. A finite point X + iY maps to
        (2X, 2Y, X^2 + Y^2 - 1) / (1 + X^2 + Y^2). Finite points so
        large that X^2 + Y^2 overflows also map to the north pole.

    """
    pts = np.asarray(points, dtype=complex)
    X, Y = pts.real, pts.imag

    with np.errstate(invalid="ignore", over="ignore"):
        normsq = X**2 + Y**2
        d = 1 / (1 + normsq)
        sphere = np.stack([2 * X * d, 2 * Y * d, (normsq - 1) * d], axis=-1)

    far = np.isinf(pts) | np.isinf(normsq)
    if sphere.ndim == 1:
        if far:
            return north_pole()
        return sphere

    sphere[far] = north_pole()
    return sphere

def sphere_to_plane(points):
    """Project points on the unit sphere to the extended complex plane.

    Parameters
    ----------
    points : array_like
        array of shape (..., 3). These are *not* checked to lie on the
        unit sphere.

    Returns
    -------
    complex or ndarray
        For a single point, a Python complex number, otherwise a
        complex array of shape `points.shape[:-1]`. Points with last
        coordinate exactly 1 map to `INFINITY`; otherwise (x, y, z)
        maps to (x + iy) / (1 - z).

    """
    vectors = np.asarray(points, dtype=float)
    if vectors.ndim == 0 or vectors.shape[-1] != 3:
        raise GeometryError(
            ("Expected an array of vectors in R^3, got array with shape"
             " {}").format(vectors.shape)
        )

    x, y, z = vectors[..., 0], vectors[..., 1], vectors[..., 2]

    if vectors.ndim == 1:
        if z == 1:
            return INFINITY
        return complex(x / (1 - z), y / (1 - z))

    at_north = (z == 1)
    with np.errstate(divide="ignore", invalid="ignore"):
        plane = r_to_c(np.stack([x / (1 - z), y / (1 - z)], axis=-1))

    plane[at_north] = INFINITY
    return plane

def stereo(*args):
    """Stereographic projection, in whichever direction makes sense for
    the arguments given. Applying it twice gives back the original
    point (up to rounding).

    - `stereo(z)`: project a complex number (or a complex array) to
      the sphere.
    - `stereo(X, Y)`: project the point X + iY to the sphere.
    - `stereo(v)`: project a real vector (or array of vectors) with
      last dimension 3 to the plane.
    - `stereo(x, y, z)`: project the point (x, y, z) to the plane.

    """
    if len(args) == 1:
        point = args[0]
        if (not types.is_scalar(point) and
            types.is_real_type(point) and
            np.shape(point)[-1] == 3):
            return sphere_to_plane(point)
        return plane_to_sphere(point)

    if len(args) == 2:
        return plane_to_sphere(r_to_c(np.stack(args, axis=-1)))

    if len(args) == 3:
        return sphere_to_plane(np.stack(args, axis=-1))

    raise TypeError(
        "stereo expects 1, 2 or 3 arguments, got {}".format(len(args))
    )

def _rotation_as_matrix(rotation):
    if isinstance(rotation, Rotation):
        rotation = rotation.as_matrix()

    matrix = np.asarray(rotation, dtype=float)
    if matrix.shape != (3, 3):
        raise GeometryError(
            ("Expected a 3 x 3 rotation matrix, got array with shape"
             " {}").format(matrix.shape)
        )
    return matrix

def from_rotation(rotation):
    """Get the Mobius transformation induced by a rotation of the sphere.

    The returned transformation F satisfies F(z) = stereo(Q @ stereo(z))
    (up to rounding) for every z in the extended complex plane.

    Parameters
    ----------
    rotation : ndarray or scipy.spatial.transform.Rotation
        a 3 x 3 matrix Q in SO(3), acting on column vectors. This is
        not checked to actually be a rotation.

    Returns
    -------
    LinearFractionalTransformation

    """
    matrix = _rotation_as_matrix(rotation)

    # a Mobius map is determined by where it sends three points
    sources = [0., 1., INFINITY]
    targets = [sphere_to_plane(matrix @ plane_to_sphere(z))
               for z in sources]

    return LFT.from_pairs(*zip(sources, targets))

def rotation_matrix(transformation, as_rotation=False, tolerance=1e-8):
    """Get the rotation of the sphere inducing a Mobius transformation.

    Parameters
    ----------
    transformation : LinearFractionalTransformation
        a Mobius transformation which comes from a rotation.
    as_rotation : bool
        If `True`, return a `scipy.spatial.transform.Rotation` instead
        of a matrix.
    tolerance : float
        absolute tolerance used to check the result is orthogonal.

    Returns
    -------
    ndarray or Rotation
        3 x 3 matrix Q (acting on column vectors) whose columns are
        the images of the standard basis under the conjugated map.

    """
    basis = np.identity(3)
    images = plane_to_sphere(transformation.apply(sphere_to_plane(basis)))
    matrix = images.T

    if not np.allclose(matrix @ matrix.T, np.identity(3), rtol=0.,
                       atol=tolerance):
        warnings.warn(
            "{} does not come from a rotation of the sphere".format(
                transformation)
        )

    if as_rotation:
        return Rotation.from_matrix(matrix)

    return matrix
