"""Type aliases for PyClosure."""

from collections.abc import Hashable, MutableMapping, MutableSequence
from typing import Any, Literal, TypeAlias

import numpy as np
from numpy.typing import NDArray

# Matrix types
BoolArray: TypeAlias = NDArray[np.bool_]
IntArray: TypeAlias = NDArray[np.int64]

# Raw graph shapes accepted by compute_closure
Label: TypeAlias = Hashable
DenseRows: TypeAlias = MutableSequence[MutableSequence[Any]]
LabeledRows: TypeAlias = MutableMapping[Hashable, MutableMapping[Hashable, Any]]

# Edge representation (source, target)
Edge: TypeAlias = tuple[Any, Any]

UnsupportedPolicy: TypeAlias = Literal["raise", "warn", "ignore"]
