"""

"""

import os.path as osp
import time


class Timer:
    """Context manager timing a block, float(timer) gives seconds (running or final)."""
    def __init__(self):
        self._start = None
        self._elapsed = None

    def __enter__(self) -> 'Timer':
        self._start = time.perf_counter()
        return self

    def __exit__(self, *_: list) -> None:
        self._elapsed = time.perf_counter() - self._start

    def __float__(self) -> float:
        return self._elapsed if self._elapsed is not None else time.perf_counter() - self._start


def is_path(path: str) -> bool:
    return osp.isfile(osp.expanduser(path))


def read_lines(path: str) -> list[str]:
    """Non-empty lines of a text file, surrounding whitespace stripped."""
    with open(osp.expanduser(path), 'r', encoding = 'utf-8') as f:
        return [clean_line for clean_line in (line.strip() for line in f) if clean_line]
