import pytest

from gridmenu.config import EngineSettings
from gridmenu.core.engine import MenuEngine
from gridmenu.core.host import HeadlessHost
from gridmenu.core.scheduling import FrameScheduler


class ManualClock:
    """Monotonic clock that only moves when a test advances it."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def scheduler(clock: ManualClock) -> FrameScheduler:
    return FrameScheduler(clock=clock)


@pytest.fixture
def host() -> HeadlessHost:
    return HeadlessHost()


@pytest.fixture
def engine(host: HeadlessHost, scheduler: FrameScheduler) -> MenuEngine:
    """Engine whose deferred checks only run when the test drives the scheduler."""

    return MenuEngine(host, settings=EngineSettings(close_check_delay=0.05), scheduler=scheduler)
