"""Work with Mobius (linear fractional) transformations of the extended
complex plane, in numerical coordinates.

The main class provided by this module is
`LinearFractionalTransformation` (also available as `LFT`), which
represents a single map

    z -> (a*z + b) / (c*z + d),    with ad - bc != 0.

The coefficients are only determined up to a nonzero complex scalar,
so equality of transformations is tested by composing with an
inverse rather than by comparing coefficients.

"""

import numpy as np

from .base import (GeometryError, NonFiniteCoefficient,
                   SingularTransformation, DuplicatePoints)
from .utils import types
from .utils.extended import (INFINITY, isinf, same_point, exact,
                             exact_quotient)

class LinearFractionalTransformation:
    """A Mobius transformation of the extended complex plane.

    The underlying data is a (read-only) 2x2 complex matrix
    `[[a, b], [c, d]]` acting on *column* vectors `(z, 1)`. Instances
    are immutable: `inv` and `compose` always build new objects.

    """
    def __init__(self, a, b, c, d):
        """Parameters
        ----------
        a, b, c, d : number
            coefficients of the map z -> (az + b) / (cz + d). These
            are promoted to complex numbers.

        Raises
        ------
        NonFiniteCoefficient
            if any coefficient is infinite or NaN.
        SingularTransformation
            if ad - bc = 0.

        """
        if not all(types.is_scalar(coeff) for coeff in (a, b, c, d)):
            raise GeometryError(
                "Mobius transformation expects four scalar coefficients,"
                " got {}".format((a, b, c, d))
            )

        coeffs = np.array([a, b, c, d], dtype=complex)
        if not np.isfinite(coeffs).all():
            raise NonFiniteCoefficient((a, b, c, d))

        ca, cb, cc, cd = coeffs.tolist()
        if ca * cd - cb * cc == 0:
            raise SingularTransformation((ca, cb, cc, cd))

        matrix = coeffs.reshape((2, 2))
        matrix.flags.writeable = False

        self._matrix = matrix
        self._coefficients = (ca, cb, cc, cd)

    @classmethod
    def from_matrix(cls, matrix):
        """Build a transformation from a 2x2 coefficient matrix
        `[[a, b], [c, d]]`.

        """
        mat = np.asarray(matrix)
        if mat.shape != (2, 2):
            raise GeometryError(
                ("Mobius transformation must be built from a 2 x 2"
                 " matrix, got array with shape {}").format(mat.shape)
            )
        return cls(mat[0, 0], mat[0, 1], mat[1, 0], mat[1, 1])

    @classmethod
    def identity(cls):
        return cls(1, 0, 0, 1)

    @classmethod
    def from_triple(cls, a, b, c):
        """Get the unique transformation taking a to 0, b to 1, and c to
        infinity.

        Parameters
        ----------
        a, b, c : number
            three distinct points in the extended complex plane. Any
            of them (but at most one, since they are distinct) may be
            infinite.

        Raises
        ------
        DuplicatePoints
            if two of the points coincide.

        """
        if same_point(a, b) or same_point(b, c) or same_point(a, c):
            raise DuplicatePoints((a, b, c))

        a, b, c = complex(a), complex(b), complex(c)

        if isinf(a):
            return cls(0, b - c, 1, -c)

        if isinf(b):
            return cls(1, -a, 1, -c)

        if isinf(c):
            return cls(1, -a, 0, b - a)

        return cls(b - c, -a * (b - c), b - a, -c * (b - a))

    @classmethod
    def from_pairs(cls, *args):
        """Get the unique transformation taking a to aa, b to bb, and c to
        cc.

        Either call as `from_pairs(a, aa, b, bb, c, cc)` or as
        `from_pairs((a, aa), (b, bb), (c, cc))`.

        Raises
        ------
        DuplicatePoints
            if either the source or the target points are not
            distinct.

        """
        if len(args) == 3:
            pairs = [tuple(pair) for pair in args]
            if any(len(pair) != 2 for pair in pairs):
                raise GeometryError(
                    "Expected three (source, target) pairs, got {}".format(args)
                )
            args = [pt for pair in pairs for pt in pair]

        if len(args) != 6:
            raise TypeError(
                "from_pairs expects 3 pairs or 6 points, got {} arguments".format(
                    len(args))
            )

        a, aa, b, bb, c, cc = args
        source = cls.from_triple(a, b, c)
        target = cls.from_triple(aa, bb, cc)
        return target.inv() @ source

    @property
    def matrix(self):
        return self._matrix

    @property
    def coefficients(self):
        """Coefficients (a, b, c, d), as a tuple of Python complex
        numbers."""
        return self._coefficients

    def determinant(self):
        a, b, c, d = self._coefficients
        return a * d - b * c

    def inv(self):
        """Get the inverse of this transformation.

        Returns
        --------
        LinearFractionalTransformation
            Inverse of this transformation.
        """
        a, b, c, d = self._coefficients
        return self.__class__(d, -b, -c, a)

    def compose(self, other):
        """Get the composition z -> self(other(z)).

        The coefficient matrix of the result is the matrix product of
        the two coefficient matrices. If floating-point error makes
        that product singular, `SingularTransformation` is raised.

        """
        return self.__class__.from_matrix(self._matrix @ other.matrix)

    def _apply_to_point(self, z):
        a, b, c, d = self._coefficients
        if isinf(z):
            if c == 0:
                return INFINITY
            return a / c

        z = complex(z)
        w1 = a * z + b
        w2 = c * z + d
        if w2 == 0:
            return INFINITY
        return w1 / w2

    def _apply_to_array(self, points):
        a, b, c, d = self._coefficients
        pts = np.asarray(points, dtype=complex)
        at_infinity = np.isinf(pts)

        # infinite inputs and poles are overwritten below
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            numerator = a * pts + b
            denominator = c * pts + d
            result = numerator / denominator

        result[denominator == 0] = INFINITY

        if c == 0:
            result[at_infinity] = INFINITY
        else:
            result[at_infinity] = a / c

        return result

    def apply(self, points):
        """Apply this transformation to a point (or an array of points) in
        the extended complex plane.

        Parameters
        ----------
        points : number or array_like
            A single point, or an array of points of any shape. Any
            value with an infinite real or imaginary part is the point
            at infinity.

        Returns
        -------
        complex or ndarray
            For a single point, a Python complex number; otherwise a
            complex ndarray with the same shape as `points`. The point
            at infinity is always returned as `INFINITY`.

        """
        if types.is_scalar(points):
            return self._apply_to_point(points)
        return self._apply_to_array(points)

    def __call__(self, points):
        return self.apply(points)

    def __matmul__(self, other):
        if isinstance(other, LinearFractionalTransformation):
            return self.compose(other)
        return self.apply(other)

    def is_identity(self):
        """Check whether the coefficient matrix is a scalar multiple of the
        identity matrix (exactly).

        """
        a, b, c, d = self._coefficients
        return b == 0 and c == 0 and a == d

    def equals(self, other):
        return (self @ other.inv()).is_identity()

    def __eq__(self, other):
        if not isinstance(other, LinearFractionalTransformation):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        # the images of 0, 1 and infinity determine the transformation.
        # Compute them exactly, so every scalar multiple of the
        # coefficients gives the same values.
        a, b, c, d = [exact(coeff) for coeff in self._coefficients]
        a_plus_b = (a[0] + b[0], a[1] + b[1])
        c_plus_d = (c[0] + d[0], c[1] + d[1])

        return hash((exact_quotient(b, d),
                     exact_quotient(a_plus_b, c_plus_d),
                     exact_quotient(a, c)))

    def __repr__(self):
        return "LFT({!r}, {!r}, {!r}, {!r})".format(*self._coefficients)

LFT = LinearFractionalTransformation

def identity():
    """Get the identity transformation z -> z."""
    return LFT.identity()

def lft(*args):
    """Build a Mobius transformation, choosing the constructor from the
    arguments given.

    - `lft()`: the identity.
    - `lft(M)`: from a 2x2 coefficient matrix.
    - `lft(a, b, c)`: the map taking a, b, c to 0, 1, infinity.
    - `lft((a, aa), (b, bb), (c, cc))`: the map taking a to aa, b to bb
      and c to cc.
    - `lft(a, b, c, d)`: the map z -> (az + b) / (cz + d).
    - `lft(a, aa, b, bb, c, cc)`: same as the pair form above.

    """
    if len(args) == 0:
        return LFT.identity()

    if len(args) == 1:
        return LFT.from_matrix(args[0])

    if len(args) == 3:
        if all(np.ndim(arg) == 1 for arg in args):
            return LFT.from_pairs(*args)
        return LFT.from_triple(*args)

    if len(args) == 4:
        return LFT(*args)

    if len(args) == 6:
        return LFT.from_pairs(*args)

    raise TypeError(
        "Cannot build a Mobius transformation from {} arguments".format(
            len(args))
    )
