from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from alumni.categories.apply import filter_records
from alumni.categories.table import ALL
from alumni.config import Settings
from alumni.data.io.fetch import LoadResult, load_dataset
from alumni.data.schema.record import Record
from alumni.ui.cards import CardModel, project
from alumni.view.pagination import ViewState, reset, reveal_next

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No alumni found for this selection."


@dataclass(frozen=True)
class RenderUpdate:
    """What a surface has to do after a transition.

    reset: clear previously shown cards first
    cards: cards to append (never ones already shown in this cycle)
    """

    reset: bool
    cards: tuple[CardModel, ...]
    show_more: bool
    message: str | None = None


class ShowcaseController:
    """Owns the loaded dataset and the current ViewState.

    Every transition replaces the state object; nothing is mutated in place.
    """

    def __init__(self, records: Sequence[Record], settings: Settings | None = None, *, load_error: str | None = None) -> None:
        self.settings = settings or Settings()
        self.all_records: tuple[Record, ...] = tuple(records)
        self.load_error = load_error
        self.state = ViewState(page_size=self.settings.page_size)
        # False until the first select(): "not filtered yet" is not "no results"
        self.selected = False

    @classmethod
    def from_result(cls, result: LoadResult, settings: Settings | None = None) -> "ShowcaseController":
        return cls(result.records, settings, load_error=result.error)

    @classmethod
    def load(cls, settings: Settings) -> "ShowcaseController":
        result = load_dataset(settings.dataset, timeout=settings.fetch_timeout)
        return cls.from_result(result, settings)

    @property
    def category(self) -> str:
        return self.state.category

    @property
    def has_more(self) -> bool:
        return self.state.has_more

    def visible_cards(self) -> tuple[CardModel, ...]:
        return tuple(project(r, self.settings) for r in self.state.visible)

    def message(self) -> str | None:
        if self.load_error:
            return self.load_error
        if self.selected and self.state.is_empty:
            return NO_RESULTS_MESSAGE
        return None

    def _update(self, *, reset_output: bool) -> RenderUpdate:
        cards = tuple(project(r, self.settings) for r in self.state.last_batch)
        return RenderUpdate(
            reset=reset_output,
            cards=cards,
            show_more=self.state.has_more,
            message=self.message(),
        )

    def select(self, category: str = ALL) -> RenderUpdate:
        filtered = filter_records(self.all_records, category)
        self.state = reset(filtered, category, self.settings.page_size)
        self.selected = True
        logger.info("category %s: %d alumni, showing %d", category, self.state.total, self.state.rendered)
        return self._update(reset_output=True)

    def reveal_next(self) -> RenderUpdate:
        before = self.state.rendered
        self.state = reveal_next(self.state)
        if self.state.rendered == before:
            logger.debug("reveal_next ignored: all %d records already shown", self.state.total)
        return self._update(reset_output=False)
