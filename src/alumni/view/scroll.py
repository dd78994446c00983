from __future__ import annotations

from dataclasses import dataclass

SCROLL_THRESHOLD = 300


@dataclass(frozen=True)
class ScrollObserver:
    """Decides whether the "back to top" control is shown for a scroll offset."""

    threshold: int = SCROLL_THRESHOLD

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError(f"threshold must be >= 0, got {self.threshold}")

    def update(self, offset: float) -> bool:
        return offset > self.threshold

    @staticmethod
    def target_offset() -> int:
        """Where "back to top" scrolls to."""
        return 0
