"""Chart state for CPU load and memory usage, refreshed from a SysInfo sampler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

from .sysinfo import SysInfo

CHART_X_RANGE_COUNT = 50
CHART_X_RANGE_MAX = CHART_X_RANGE_COUNT - 1
COLOR_DARK_BLUE = 0x209FDF
COLOR_LIGHT_BLUE = 0xBFDFEF
PEN_WIDTH = 3

DEFAULT_START_DELAY_MS = 500
DEFAULT_UPDATE_INTERVAL_MS = 500


class _SysInfoChart(ABC):
    """Common state of a chart refreshed periodically from system information."""

    def __init__(
        self,
        title: str,
        sysinfo: SysInfo | None = None,
        start_delay_ms: int = DEFAULT_START_DELAY_MS,
        update_interval_ms: int = DEFAULT_UPDATE_INTERVAL_MS,
    ) -> None:
        self.title = title
        self.start_delay_ms = start_delay_ms
        self.update_interval_ms = update_interval_ms
        self.legend_visible = False
        self.antialiasing = True
        self._sysinfo = sysinfo

    @property
    def sysinfo(self) -> SysInfo:
        if self._sysinfo is None:
            self._sysinfo = SysInfo.instance()
        return self._sysinfo

    @abstractmethod
    def update_series(self) -> None:
        """Fetch a new sample and refresh the series."""


class CpuChart(_SysInfoChart):
    """A donut chart of CPU load against free CPU."""

    def __init__(self, sysinfo: SysInfo | None = None) -> None:
        super().__init__("CPU average load", sysinfo, 500, 500)
        self.hole_size = 0.35
        self.slices: list[tuple[str, float]] = [("CPU Load", 30.0), ("CPU Free", 70.0)]

    def update_series(self) -> None:
        load = self.sysinfo.cpu_load_average()
        self.slices = [("Load", load), ("Free", 100.0 - load)]


class MemoryChart(_SysInfoChart):
    """A scrolling area chart of memory usage over the last samples."""

    def __init__(self, sysinfo: SysInfo | None = None) -> None:
        super().__init__("Memory used", sysinfo)
        self.pen_color = COLOR_DARK_BLUE
        self.pen_width = PEN_WIDTH
        self.gradient = ((0.0, COLOR_LIGHT_BLUE), (1.0, COLOR_DARK_BLUE))
        self.x_axis_visible = False
        self.x_range: tuple[int, int] = (0, CHART_X_RANGE_MAX)
        self.y_range: tuple[float, float] = (0.0, 100.0)
        self.points: deque[tuple[int, float]] = deque()
        self._next_x = 0

    def update_series(self) -> None:
        used = self.sysinfo.memory_used()
        self.points.append((self._next_x, used))
        self._next_x += 1
        if len(self.points) > CHART_X_RANGE_COUNT:
            low, high = self.x_range
            self.x_range = (low + 1, high + 1)
            self.points.popleft()