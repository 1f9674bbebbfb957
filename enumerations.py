from enum import Enum


class Channel(Enum):
    H = 0
    S = 1
    V = 2


class Bound(Enum):
    LOW = "low"
    HIGH = "high"


class OutputMode(Enum):
    COLORED_ROI = "Colored region"
    BINARY_MASK = "Binary mask"
