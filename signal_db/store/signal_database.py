#!/usr/bin/env python3
"""
Fixed-capacity signal database

Slots are allocated once at construction. Signals are appended until the
database is full, and there is no removal. Occupied slots are always
exactly [0, count).

Supports in-place bubble sort by frequency, exact-match binary search
(caller must sort first), linear power range queries and persistence to the
flat text format in text_format.py.

Not thread-safe.
"""

import io
from pathlib import Path
from typing import Iterator, List, TextIO, Union

import numpy as np

from signal_db.models import WirelessSignal
from signal_db.store.text_format import read_signals, write_signals

NOT_FOUND = -1


class SignalDatabase:
    """Fixed-capacity container of WirelessSignal records"""

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise ValueError(f"Capacity must be a non-negative integer, got {capacity!r}")
        self._capacity = capacity
        self._count = 0
        self._signals = [WirelessSignal() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def is_full(self) -> bool:
        return self._count >= self._capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[WirelessSignal]:
        for i in range(self._count):
            yield self._signals[i]

    def __getitem__(self, index: int) -> WirelessSignal:
        return self.signal_at(index)

    def signal_at(self, index: int) -> WirelessSignal:
        """
        Live reference to the stored signal at `index`

        The returned object is the database's own record: assigning to its
        fields edits the stored signal in place.

        Raises:
            IndexError: index outside [0, count)
        """
        if not 0 <= index < self._count:
            raise IndexError(f"Signal index {index} out of range (count={self._count})")
        return self._signals[index]

    def add_signal(self, signal: WirelessSignal) -> bool:
        """
        Append a copy of `signal`

        Returns:
            True if stored, False if the database is full (nothing changes)
        """
        if self._count >= self._capacity:
            return False
        self._signals[self._count] = signal.copy()
        self._count += 1
        return True

    def sort_by_frequency(self) -> None:
        """Bubble sort occupied slots ascending by frequency (not stable-guaranteed)"""
        n = self._count
        for i in range(n - 1):
            for j in range(n - i - 1):
                if self._signals[j].frequency > self._signals[j + 1].frequency:
                    self._signals[j], self._signals[j + 1] = self._signals[j + 1], self._signals[j]

    def find_by_frequency(self, target: float) -> int:
        """
        Binary search for an exact frequency match

        Precondition: the database is sorted ascending by frequency
        (see sort_by_frequency). This is not checked; on unsorted data the
        result is unreliable. With duplicate frequencies any one of the
        matching indices may be returned.

        Returns:
            Index of a matching signal, or NOT_FOUND (-1)
        """
        low = 0
        high = self._count - 1

        while low <= high:
            mid = low + (high - low) // 2
            freq = self._signals[mid].frequency

            if freq == target:
                return mid
            elif freq < target:
                low = mid + 1
            else:
                high = mid - 1

        return NOT_FOUND

    def signals_in_power_range(self, min_power: float, max_power: float) -> List[WirelessSignal]:
        """Copies of all signals with min_power <= power <= max_power, in storage order"""
        return [s.copy() for s in self if min_power <= s.power <= max_power]

    def strengths(self) -> np.ndarray:
        """Signal strength of every occupied slot, in storage order"""
        power = np.array([s.power for s in self], dtype=np.float64)
        distance = np.array([s.distance for s in self], dtype=np.float64)

        with np.errstate(divide="ignore", invalid="ignore"):
            return np.where(distance == 0, power, power / (distance * distance))

    def dump(self, fp: TextIO) -> int:
        """Write the database to a text stream; returns number of records written"""
        return write_signals(fp, self)

    def dumps(self) -> str:
        buf = io.StringIO()
        self.dump(buf)
        return buf.getvalue()

    def load(self, fp: TextIO) -> int:
        """
        Replace contents with records read from a text stream

        At most `capacity` records are read; any further records are left
        unread in the stream. On a parse error the database is unchanged.

        Returns:
            Number of records loaded

        Raises:
            ValueError: malformed stream
        """
        signals = read_signals(fp, self._capacity)
        self._replace(signals)
        return self._count

    def loads(self, text: str) -> int:
        return self.load(io.StringIO(text))

    def save_to_file(self, path: Union[str, Path]) -> bool:
        """
        Write the database to `path`

        Returns:
            False if the file could not be opened for writing, True otherwise

        Raises:
            ValueError: a device type cannot be represented (file untouched)
        """
        text = self.dumps()
        try:
            with open(path, "w") as f:
                f.write(text)
        except OSError:
            return False
        return True

    def load_from_file(self, path: Union[str, Path]) -> bool:
        """
        Replace contents with the records stored in `path`

        Returns:
            False if the file could not be opened (database unchanged), True otherwise
        """
        try:
            with open(path, "r") as f:
                signals = read_signals(f, self._capacity)
        except OSError:
            return False
        self._replace(signals)
        return True

    def _replace(self, signals: List[WirelessSignal]) -> None:
        self._count = 0
        for signal in signals:
            self.add_signal(signal)

    def __repr__(self) -> str:
        return f"SignalDatabase(count={self._count}, capacity={self._capacity})"
