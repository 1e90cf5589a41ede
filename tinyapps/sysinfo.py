"""CPU load and memory usage sampling, with one strategy per platform."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Sequence

import psutil

PROC_STAT = "/proc/stat"


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def parse_proc_stat(line: str) -> tuple[int, int, int, int]:
    """Return (user, nice, system, idle) from the aggregate ``cpu`` line of /proc/stat."""
    fields = line.split()
    if len(fields) < 5 or fields[0] != "cpu":
        raise ValueError(f"not an aggregate cpu line: {line!r}")
    try:
        user, nice, system, idle = (int(field) for field in fields[1:5])
    except ValueError as exc:
        raise ValueError(f"malformed cpu line: {line!r}") from exc
    return user, nice, system, idle


def busy_percent(first: Sequence[int], second: Sequence[int]) -> float:
    """Busy share of CPU time between two (user, nice, system, idle) samples."""
    if len(first) < 4 or len(second) < 4:
        raise ValueError("samples need four counters: user, nice, system, idle")
    deltas = [after - before for before, after in zip(first[:4], second[:4])]
    overall = sum(deltas[:3])
    total = overall + deltas[3]
    if total == 0:
        return 0.0
    return _clamp_percent(overall / total * 100.0)


def windows_busy_percent(first: Sequence[int], second: Sequence[int]) -> float:
    """Busy share of CPU time between two (idle, kernel, user) samples.

    Kernel time includes idle time, as the system reports it.
    """
    if len(first) < 3 or len(second) < 3:
        raise ValueError("samples need three counters: idle, kernel, user")
    idle, kernel, user = (after - before for before, after in zip(first[:3], second[:3]))
    system = kernel + user
    if system == 0:
        return 0.0
    return _clamp_percent((system - idle) * 100.0 / system)


def used_percent(used: float, total: float) -> float:
    """Percentage of ``total`` that ``used`` represents, bounded to [0, 100]."""
    if total <= 0:
        return 0.0
    return _clamp_percent(used / total * 100.0)


class SysInfo(ABC):
    """Platform-independent access to CPU load and memory usage."""

    _instance: ClassVar[SysInfo | None] = None

    def __init__(self) -> None:
        self._last_sample: tuple[int, ...] | None = None

    @staticmethod
    def instance() -> SysInfo:
        """The shared sampler for the running platform."""
        if SysInfo._instance is None:
            SysInfo._instance = _platform_class()()
        return SysInfo._instance

    def init(self) -> None:
        """Take the first CPU sample that later loads are measured against."""
        self._last_sample = self._cpu_raw_data()

    def cpu_load_average(self) -> float:
        """CPU load in percent since the previous sample."""
        if self._last_sample is None:
            raise RuntimeError("init() must be called before cpu_load_average()")
        first = self._last_sample
        second = self._cpu_raw_data()
        self._last_sample = second
        return self._cpu_percent(first, second)

    @abstractmethod
    def memory_used(self) -> float:
        """Memory in use, in percent."""

    @abstractmethod
    def _cpu_raw_data(self) -> tuple[int, ...]:
        ...

    @abstractmethod
    def _cpu_percent(self, first: Sequence[int], second: Sequence[int]) -> float:
        ...


class LinuxSysInfo(SysInfo):
    """Reads CPU counters from /proc/stat; memory includes swap."""

    def __init__(self, stat_path: str | Path = PROC_STAT) -> None:
        super().__init__()
        self.stat_path = Path(stat_path)

    def _cpu_raw_data(self) -> tuple[int, ...]:
        with self.stat_path.open(encoding="ascii") as stat:
            return parse_proc_stat(stat.readline())

    def _cpu_percent(self, first: Sequence[int], second: Sequence[int]) -> float:
        return busy_percent(first, second)

    def memory_used(self) -> float:
        ram = psutil.virtual_memory()
        swap = psutil.swap_memory()
        total = ram.total + swap.total
        used = (ram.total - ram.free) + (swap.total - swap.free)
        return used_percent(used, total)


class MacSysInfo(SysInfo):
    """Uses host CPU tick counters and virtual memory page counts."""

    def _cpu_raw_data(self) -> tuple[int, ...]:
        times = psutil.cpu_times()
        return int(times.user), int(times.nice), int(times.system), int(times.idle)

    def _cpu_percent(self, first: Sequence[int], second: Sequence[int]) -> float:
        return busy_percent(first, second)

    def memory_used(self) -> float:
        memory = psutil.virtual_memory()
        used = memory.active + memory.inactive + memory.wired
        return used_percent(used, used + memory.free)


class WindowsSysInfo(SysInfo):
    """Uses system idle, kernel and user times; memory is physical only."""

    def _cpu_raw_data(self) -> tuple[int, ...]:
        times = psutil.cpu_times()
        kernel = times.system + times.idle
        return int(times.idle), int(kernel), int(times.user)

    def _cpu_percent(self, first: Sequence[int], second: Sequence[int]) -> float:
        return windows_busy_percent(first, second)

    def memory_used(self) -> float:
        memory = psutil.virtual_memory()
        return used_percent(memory.total - memory.available, memory.total)


def _platform_class() -> type[SysInfo]:
    if sys.platform.startswith("win"):
        return WindowsSysInfo
    if sys.platform == "darwin":
        return MacSysInfo
    if sys.platform.startswith("linux"):
        return LinuxSysInfo
    raise RuntimeError(f"unsupported platform: {sys.platform}")