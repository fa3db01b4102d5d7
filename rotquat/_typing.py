from typing import Literal, Union

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = np.typing.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR = Union[float, int, np.floating, np.integer]


EULER_ORDERS = Literal['XYZ', 'XZY', 'YXZ', 'YZX', 'ZXY', 'ZYX',
                       'xyz', 'xzy', 'yxz', 'yzx', 'zxy', 'zyx']
