from typing import Union
from datetime import datetime
from pandas import Timestamp

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike

DatetimeLike = Union[datetime, Timestamp]

AXIS_ANGLE = tuple[DOUBLE_ARRAY, float]
