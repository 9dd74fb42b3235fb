from enum import Enum
import numpy as np


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


channel_max = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
}

BYTE_MAX = 255

default_format_dtypes = {
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float64,
}
