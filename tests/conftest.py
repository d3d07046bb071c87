import logging

import pytest

from marsturtle.mars import Mars
from marsturtle.turtle import Position


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # CLI runs attach handlers to streams that are closed afterwards
    logging.getLogger("marsturtle").handlers.clear()


@pytest.fixture
def mars() -> Mars:
    return Mars(Position(5, 3))


MISSION = """\
5 3
1 1 E
RFRFRFRF

3 2 N
FRRFLLFFRRFLL

0 3 W
LLFFFLFLFL
"""


@pytest.fixture
def mission_text() -> str:
    return MISSION
