from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from alumni.categories.table import ALL
from alumni.data.schema.record import Record

PAGE_SIZE = 10


@dataclass(frozen=True)
class ViewState:
    """Selected category, its ordered records and how many are shown.

    Invariant: 0 <= rendered <= len(records). Transitions return new states.
    """

    category: str = ALL
    records: tuple[Record, ...] = ()
    rendered: int = 0
    page_size: int = PAGE_SIZE
    previous: int = 0

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {self.page_size}")
        if not 0 <= self.previous <= self.rendered <= len(self.records):
            raise ValueError(
                f"cursor out of range: previous={self.previous} rendered={self.rendered} total={len(self.records)}"
            )

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def visible(self) -> tuple[Record, ...]:
        return self.records[: self.rendered]

    @property
    def last_batch(self) -> tuple[Record, ...]:
        """Records revealed by the transition that produced this state."""
        return self.records[self.previous : self.rendered]

    @property
    def has_more(self) -> bool:
        return self.rendered < self.total

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def reset(records: Sequence[Record], category: str = ALL, page_size: int = PAGE_SIZE) -> ViewState:
    """Fresh view showing the first page of `records`."""
    items = tuple(records)
    return ViewState(
        category=category,
        records=items,
        rendered=min(page_size, len(items)),
        page_size=page_size,
        previous=0,
    )


def reveal_next(state: ViewState) -> ViewState:
    """Show the next page. Safe when everything is already shown (no-op)."""
    if not state.has_more:
        return replace(state, previous=state.rendered)
    end = min(state.rendered + state.page_size, state.total)
    return replace(state, rendered=end, previous=state.rendered)
