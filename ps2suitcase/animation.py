"""Keyframe timelines for ICN animation weights."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Key:
    """A single keyframe: a value at a point in time (in frames)."""

    time: float
    value: float


class Timeline:
    """A piecewise-linear curve through a sequence of keys."""

    def __init__(self, keys: Iterable[Key]) -> None:
        self.keys: list[Key] = list(keys)

    def evaluate(self, t: float) -> float:
        """Return the curve's value at ``t``, held constant outside the keys."""
        if not self.keys:
            raise ValueError("timeline has no keys")
        first, last = self.keys[0], self.keys[-1]
        if t <= first.time:
            return first.value
        if t >= last.time:
            return last.value

        for k0, k1 in zip(self.keys, self.keys[1:]):
            if k0.time <= t < k1.time:
                dt = k1.time - k0.time
                if dt == 0.0:
                    return k0.value
                alpha = (t - k0.time) / dt
                return (1.0 - alpha) * k0.value + alpha * k1.value

        raise ValueError(f"no key interval contains time {t}")