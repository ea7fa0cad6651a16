#!/usr/bin/env python3
"""
Flat text format for signal databases

Layout (one record per line, single-space separated):

    <count>
    <device_type> <power> <frequency> <distance>
    ...

Numbers are written with repr() so a dump/load cycle reproduces the exact
floats. Device types are single tokens.
"""

from typing import Iterable, List, TextIO

from signal_db.models import WirelessSignal

FIELDS_PER_RECORD = 4


def _check_device_type(device_type: str) -> None:
    if not device_type or any(c.isspace() for c in device_type):
        raise ValueError(
            f"Device type {device_type!r} cannot be stored: "
            f"must be a single token without whitespace"
        )


def format_record(signal: WirelessSignal) -> str:
    """Render one record line (without newline)"""
    _check_device_type(signal.device_type)
    return (
        f"{signal.device_type} {float(signal.power)!r} "
        f"{float(signal.frequency)!r} {float(signal.distance)!r}"
    )


def parse_record(line: str) -> WirelessSignal:
    """
    Parse one record line

    Raises:
        ValueError: if the line does not hold a label and three numbers
    """
    fields = line.split()
    if len(fields) != FIELDS_PER_RECORD:
        raise ValueError(
            f"Expected {FIELDS_PER_RECORD} fields per record, got {len(fields)}: {line.rstrip()!r}"
        )
    device_type, power, frequency, distance = fields
    return WirelessSignal(
        power=float(power),
        frequency=float(frequency),
        distance=float(distance),
        device_type=device_type,
    )


def write_signals(fp: TextIO, signals: Iterable[WirelessSignal]) -> int:
    """
    Write count line plus one line per signal

    Every line is rendered before the first write, so an unrepresentable
    device type leaves the stream untouched.

    Returns:
        Number of records written
    """
    lines = [format_record(s) for s in signals]
    fp.write(f"{len(lines)}\n")
    for line in lines:
        fp.write(line + "\n")
    return len(lines)


def read_signals(fp: TextIO, limit: int) -> List[WirelessSignal]:
    """
    Read up to `limit` records from a stream in file order

    Only min(count, limit) record lines are consumed; anything after them is
    left unread. A stream that ends before `count` records yields what was
    read so far.

    Args:
        fp: Text stream positioned at the count line
        limit: Maximum records to return (the receiving database capacity)

    Returns:
        List of parsed WirelessSignal

    Raises:
        ValueError: missing/invalid count or malformed record line
    """
    header = fp.readline()
    while header and not header.strip():
        header = fp.readline()
    if not header:
        raise ValueError("Missing record count")

    try:
        count = int(header.strip())
    except ValueError:
        raise ValueError(f"Invalid record count: {header.strip()!r}") from None
    if count < 0:
        raise ValueError(f"Record count must be non-negative, got {count}")

    signals = []
    while len(signals) < min(count, limit):
        line = fp.readline()
        if not line:
            break  # truncated
        if not line.strip():
            continue
        signals.append(parse_record(line))

    return signals
