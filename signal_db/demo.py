#!/usr/bin/env python3
"""
Signal database walkthrough

Builds a small database, edits stored signals in place, saves it to disk,
reloads it into a second database, then sorts, binary-searches and
range-queries the reloaded copy.

Usage:
    # Default walkthrough (capacity 10, data/signals.txt)
    signal-db

    # Custom file and search parameters, archive the result to SQLite
    signal-db --file /tmp/signals.txt --freq 2450 --min-power 0 --max-power 0.01 --db
"""

import argparse
from pathlib import Path
from typing import List, Optional

from signal_db.database.sqlite_logger import init_db, log_signals
from signal_db.display import format_database, format_power_range
from signal_db.models import WirelessSignal
from signal_db.store.signal_database import NOT_FOUND, SignalDatabase
from signal_db.utils.config import DB_PATH, DEFAULT_CAPACITY, DEFAULT_SIGNALS_FILE

SAMPLE_SIGNALS = [
    WirelessSignal(power=0.1, frequency=2400.0, distance=10.0, device_type="WiFi"),
    WirelessSignal(power=0.001, frequency=2450.0, distance=5.0, device_type="Bluetooth"),
    WirelessSignal(power=50.0, frequency=101.5, distance=1000.0, device_type="Radio"),
]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Walk through insert, save/load, sort, binary search and power range search."
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=DEFAULT_CAPACITY,
        help=f"Slots per database (default: {DEFAULT_CAPACITY}).",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=DEFAULT_SIGNALS_FILE,
        help=f"Signal file to save and reload (default: {DEFAULT_SIGNALS_FILE}).",
    )
    parser.add_argument(
        "--freq",
        type=float,
        default=2400.0,
        help="Frequency in MHz to binary-search for (default: 2400).",
    )
    parser.add_argument("--min-power", type=float, default=0.0,
                        help="Lower power bound in watts (default: 0.0)")
    parser.add_argument("--max-power", type=float, default=1.0,
                        help="Upper power bound in watts (default: 1.0)")
    parser.add_argument(
        "--db",
        action="store_true",
        help=f"Also archive the reloaded signals to SQLite ({DB_PATH}).",
    )
    return parser.parse_args(argv)


def run_demo(
    capacity: int = DEFAULT_CAPACITY,
    signals_file: Path = DEFAULT_SIGNALS_FILE,
    target_freq: float = 2400.0,
    min_power: float = 0.0,
    max_power: float = 1.0,
    db_path: Optional[Path] = None,
) -> SignalDatabase:
    """
    Run the walkthrough and return the reloaded, sorted database

    Args:
        capacity: Slots for both databases
        signals_file: Where the first database is saved and reloaded from
        target_freq: Frequency (MHz) searched after sorting
        min_power: Lower bound of the power range search (W)
        max_power: Upper bound of the power range search (W)
        db_path: If given, archive the reloaded signals to this SQLite file
    """
    database = SignalDatabase(capacity)

    for signal in SAMPLE_SIGNALS:
        if not database.add_signal(signal):
            print(f"[Store] Database full, dropped {signal.device_type}")

    # Stored signals are live references
    if len(database) > 0:
        database[0].power = 0.2
    if len(database) > 1:
        database[1].distance = 3.0

    print(format_database(database))

    signals_file.parent.mkdir(parents=True, exist_ok=True)
    if database.save_to_file(signals_file):
        print(f"[Store] Database saved to {signals_file}")
    else:
        print(f"[Store] Error: Could not open {signals_file} for writing!")

    loaded = SignalDatabase(capacity)
    if loaded.load_from_file(signals_file):
        print(f"[Store] Database loaded from {signals_file}")
    else:
        print(f"[Store] Error: Could not open {signals_file} for reading!")

    loaded.sort_by_frequency()

    print("\n=== Binary Search Demo ===")
    index = loaded.find_by_frequency(target_freq)
    if index != NOT_FOUND:
        print(f"Found signal at {target_freq:g} MHz at index {index}")
        print(f"Device type: {loaded[index].device_type}")
    else:
        print("Signal not found")

    print("\n=== Power Range Search ===")
    print(format_power_range(loaded, min_power, max_power))

    print("\n=== Direct Data Access ===")
    if len(loaded) > 0:
        print(f"First signal frequency: {loaded[0].frequency:g} MHz")
    print(f"Database current size: {loaded.count}")
    print(f"Database max size: {loaded.capacity}")

    if db_path is not None:
        init_db(db_path)
        log_signals(loaded, db_path)

    return loaded


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if args.capacity < 0:
        raise ValueError(f"Capacity must be non-negative, got {args.capacity}")

    print(
        f"[Demo] Capacity={args.capacity}, File={args.file}, "
        f"Search={args.freq:g} MHz, Power=[{args.min_power:g}, {args.max_power:g}] W"
    )

    run_demo(
        capacity=args.capacity,
        signals_file=args.file,
        target_freq=args.freq,
        min_power=args.min_power,
        max_power=args.max_power,
        db_path=DB_PATH if args.db else None,
    )


if __name__ == "__main__":
    main()
