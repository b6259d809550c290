import pytest

from killer_chase.components import Position
from killer_chase.state import GameState
from tests.helpers import FakeClock, FakeTerminal


@pytest.fixture
def term():
    return FakeTerminal()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def state():
    return GameState(
        width=10,
        height=10,
        cursor=Position(5, 5),
        killers=[Position(5, 2), Position(0, 0), Position(9, 9)],
    )
