from __future__ import annotations


class GravityTimer:
    """Elapsed-time accumulator that fires once per drop interval."""

    def __init__(self, interval: float = 0.5) -> None:
        if interval <= 0:
            raise ValueError(f"drop interval must be positive, got {interval}")
        self.interval = float(interval)
        self.elapsed = 0.0

    def reset(self) -> None:
        self.elapsed = 0.0

    def advance(self, dt: float) -> bool:
        if dt < 0:
            raise ValueError(f"frame time must be non-negative, got {dt}")
        self.elapsed += dt
        if self.elapsed >= self.interval:
            self.elapsed = 0.0
            return True
        return False
