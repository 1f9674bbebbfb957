from threading import RLock
from typing import Dict, Tuple

from enumerations import Bound, Channel

CHANNEL_MIN = 0
CHANNEL_MAX = 255


class HsvRange:
    """
    The six HSV bounds shared between the UI thread and the capture thread.
    Every setter keeps low <= high for its channel: a low above the high
    is pinned to the high and vice versa.
    """

    def __init__(self):
        self._lock = RLock()
        self._low = [CHANNEL_MIN] * 3
        self._high = [CHANNEL_MAX] * 3


    def set_low(self, channel: Channel, value: int) -> int:
        value = _clip(value)
        with self._lock:
            high = self._high[channel.value]
            self._low[channel.value] = value if value <= high else high
            return self._low[channel.value]


    def set_high(self, channel: Channel, value: int) -> int:
        value = _clip(value)
        with self._lock:
            low = self._low[channel.value]
            self._high[channel.value] = value if value >= low else low
            return self._high[channel.value]


    def set(self, channel: Channel, bound: Bound, value: int) -> int:
        if bound is Bound.LOW:
            return self.set_low(channel, value)
        return self.set_high(channel, value)


    def get(self, channel: Channel, bound: Bound) -> int:
        with self._lock:
            if bound is Bound.LOW:
                return self._low[channel.value]
            return self._high[channel.value]


    def lower(self) -> Tuple[int, int, int]:
        with self._lock:
            return tuple(self._low)


    def upper(self) -> Tuple[int, int, int]:
        with self._lock:
            return tuple(self._high)


    def bounds(self):
        # one lock so the capture thread never sees half an update
        with self._lock:
            return tuple(self._low), tuple(self._high)


    def reset(self):
        with self._lock:
            self._low = [CHANNEL_MIN] * 3
            self._high = [CHANNEL_MAX] * 3


    def to_dict(self) -> Dict[str, int]:
        with self._lock:
            values = {}
            for channel in Channel:
                values[f"{channel.name}_low"] = self._low[channel.value]
                values[f"{channel.name}_high"] = self._high[channel.value]
            return values


    def from_dict(self, values: Dict[str, int]):
        """
        Load bounds written by to_dict(). Missing keys keep the full range.
        Highs are applied before lows so a stored pair is never clamped
        against a stale partner.
        """
        with self._lock:
            self.reset()
            for channel in Channel:
                self.set_high(channel, int(values.get(f"{channel.name}_high", CHANNEL_MAX)))
                self.set_low(channel, int(values.get(f"{channel.name}_low", CHANNEL_MIN)))


    def describe(self) -> str:
        lower, upper = self.bounds()
        return f"Lower: {lower}  Upper: {upper}"


def _clip(value) -> int:
    return max(CHANNEL_MIN, min(CHANNEL_MAX, int(value)))
