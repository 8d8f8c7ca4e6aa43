# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Welcome to enginemath

enginemath supplies the numeric kernel used inside a real-time rendering/simulation engine.  It is split into two
layers:

* :mod:`.scalar_math` provides deterministic, bounded-cost approximations of the transcendental functions (sine,
  cosine, arctangent, square root, ...) together with the rounding and angle utilities built on them.
* :mod:`.rotations` provides the quaternion rotation algebra (composition, interpolation, and conversion to and from
  rotation matrices, axis-angle pairs, and rotation vectors) built only on :mod:`.scalar_math`.

Vectors and matrices are plain numpy arrays.
"""

import enginemath.scalar_math
import enginemath.rotations

from enginemath.rotations import Quaternion

__all__ = ['scalar_math', 'rotations', 'Quaternion']
