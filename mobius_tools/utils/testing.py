import numpy as np

from .extended import isinf

def assert_same_point(z1, z2, rtol=1e-5, atol=1e-8):
    """Assert two points in the extended complex plane are close, treating
    all infinite values as the same point.

    """
    if isinf(z1) or isinf(z2):
        assert isinf(z1) and isinf(z2), "{} != {}".format(z1, z2)
        return

    assert np.isclose(z1, z2, rtol=rtol, atol=atol), "{} != {}".format(z1, z2)

def assert_coefficients_proportional(lft1, lft2):
    """Assert two transformations have proportional coefficient matrices,
    without going through exact equality.

    """
    m1 = lft1.matrix
    m2 = lft2.matrix

    # 2x2 minors of the stacked coefficient vectors vanish
    v1 = m1.flatten()
    v2 = m2.flatten()
    assert np.allclose(np.outer(v1, v2), np.outer(v2, v1))
