"""Helpers for working with points in the extended complex plane, in
numerical coordinates.

There is a single point at infinity. We always *return* it as the
constant `INFINITY`, but accept any complex number with an infinite
real or imaginary part as input for it.

"""

import cmath
from fractions import Fraction

import numpy as np

INFINITY = complex(np.inf, np.inf)

def isinf(z):
    """Check whether a point (or an ndarray of points) in the extended
    complex plane is the point at infinity.

    """
    if np.ndim(z) == 0:
        return cmath.isinf(complex(z))

    return np.isinf(np.asarray(z, dtype=complex))

def same_point(z1, z2):
    """Check whether two points in the extended complex plane coincide
    exactly. Any two infinite values are the same point.

    """
    inf1, inf2 = isinf(z1), isinf(z2)
    if inf1 or inf2:
        return inf1 and inf2

    return complex(z1) == complex(z2)

def exact(z):
    """Return the exact value of a finite complex number, as a pair
    (real, imag) of `Fraction` objects. Signed zeros both become 0.

    """
    z = complex(z)
    return Fraction(z.real), Fraction(z.imag)

def exact_quotient(num, den):
    """Divide two complex numbers given as exact (real, imag) pairs,
    without rounding.

    Returns
    -------
    tuple or complex
        The exact quotient as a pair of `Fraction` objects, or
        `INFINITY` if `den` is zero.

    """
    p, q = num
    r, s = den
    normsq = r * r + s * s
    if normsq == 0:
        return INFINITY

    return (p * r + q * s) / normsq, (q * r - p * s) / normsq

def r_to_c(real_coords):
    """Convert an ndarray of shape (..., 2) to complex numbers."""
    rc = np.asarray(real_coords, dtype=float)

    # assign parts directly so infinite coordinates don't produce nan
    result = np.empty(rc.shape[:-1], dtype=complex)
    result.real = rc[..., 0]
    result.imag = rc[..., 1]
    return result
