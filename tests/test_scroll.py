from __future__ import annotations

import pytest

from alumni.view.scroll import SCROLL_THRESHOLD, ScrollObserver


def test_back_to_top_visible_only_beyond_threshold() -> None:
    obs = ScrollObserver()
    assert obs.threshold == SCROLL_THRESHOLD == 300
    assert obs.update(0) is False
    assert obs.update(300) is False
    assert obs.update(301) is True
    assert obs.update(120.5) is False


def test_back_to_top_targets_offset_zero() -> None:
    assert ScrollObserver.target_offset() == 0


def test_negative_threshold_rejected() -> None:
    with pytest.raises(ValueError):
        ScrollObserver(threshold=-1)
