import typing

from numpy.typing import NDArray
import numpy as np

# Type shorthand:
f64 = np.float64
f32 = np.float32
b8 = np.bool_
af64 = NDArray[f64]
af32 = NDArray[f32]
ab8 = NDArray[b8]

AF = typing.Union[af64, af32]
F = typing.Union[float, f64, f32]
# Anything a norm or membership function accepts: a scalar degree or an array of them
Degree = typing.Union[F, AF]
