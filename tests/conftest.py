from __future__ import annotations

import pytest

from support import PairSummer, Row, make_rows


@pytest.fixture
def rows() -> list[Row]:
    return make_rows(5)


@pytest.fixture
def sum_pairs() -> PairSummer:
    return PairSummer()
