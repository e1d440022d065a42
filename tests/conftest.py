import pytest

from pymandel.surface import FrameBuffer


class FakeClock:
    """Clock that moves forward by ``step`` seconds every time it is read."""

    def __init__(self, step=1.0):
        self.step = step
        self.now = 0.0
        self.reads = 0

    def __call__(self):
        value = self.now
        self.now += self.step
        self.reads += 1
        return value


class RecordingSurface(FrameBuffer):
    """Frame buffer that remembers the order pixels were written in."""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.writes = []

    def write_pixel(self, x, y, rgb):
        self.writes.append((x, y))
        super().write_pixel(x, y, rgb)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def recording_surface():
    return RecordingSurface(4, 3)
