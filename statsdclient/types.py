"""statsdclient internal types"""

import enum


class StrEnum(str, enum.Enum):
    def __str__(self):
        return str(self.value)


class MetricType(StrEnum):
    COUNT = "c"
    GAUGE = "g"
    TIMING = "ms"
    SET = "s"
