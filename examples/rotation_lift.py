import numpy as np
from scipy.spatial.transform import Rotation

from mobius_tools import lft, INFINITY
from mobius_tools.projection import stereo, from_rotation, rotation_matrix

# a random rotation of the sphere
rot = Rotation.random(None, 7)
Q = rot.as_matrix()

# the Mobius transformation it induces on the extended complex plane
F = from_rotation(rot)

for z in [0, 1, 1j, -2 + 0.5j, INFINITY]:
    print(z, F(z), stereo(Q @ stereo(z)))

# rotations compose like the transformations they induce
G = from_rotation(Rotation.from_euler("y", 30, degrees=True))
print(np.allclose(rotation_matrix(F @ G), Q @ rotation_matrix(G)))

# the map sending 1 -> 2+i, 3 -> infinity, 4 -> 1-i
H = lft((1, 2 + 1j), (3, INFINITY), (4, 1 - 1j))
print(H, H(1), H(3), H(4))
