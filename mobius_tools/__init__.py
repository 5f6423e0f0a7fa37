r"""
mobius_tools
============

`mobius_tools` is a small Python package for working numerically with
Mobius (linear fractional) transformations of the extended complex
plane, and with their relationship to rotations of the Riemann sphere.

The package is built on top of numpy and scipy, and provides modules
to:

- build Mobius transformations from coefficients, from a 2x2 matrix,
  or from the images of three points, and compose, invert, apply and
  compare them (`mobius_tools.transformation`)

- go back and forth between the extended complex plane and the unit
  sphere by stereographic projection, and turn rotations of the sphere
  into Mobius transformations (`mobius_tools.projection`)

## Example usage

```python
from mobius_tools import lft, INFINITY
from mobius_tools.projection import stereo, from_rotation
from scipy.spatial.transform import Rotation

# the map sending 1 -> 2+i, 3 -> infinity, 4 -> 1-i
f = lft((1, 2+1j), (3, INFINITY), (4, 1-1j))
f(1)            # (2+1j)

# transformations are only determined up to scale
f == lft(2j * f.matrix)     # True

# a rotation of the sphere, as a Mobius transformation
rot = Rotation.from_euler("x", 90, degrees=True)
g = from_rotation(rot)
g(0.5)          # agrees with stereo(rot.as_matrix() @ stereo(0.5))
```
"""

from .base import (GeometryError, NonFiniteCoefficient,
                   SingularTransformation, DuplicatePoints)
from .utils.extended import INFINITY
from .transformation import LinearFractionalTransformation, LFT, lft, identity
from .projection import stereo, from_rotation, rotation_matrix
