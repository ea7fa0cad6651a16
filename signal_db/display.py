"""Console rendering for signals and signal databases"""

from signal_db.models import WirelessSignal
from signal_db.store.signal_database import SignalDatabase

SEPARATOR = "------------------------"


def format_signal(signal: WirelessSignal) -> str:
    return "\n".join([
        f"Device: {signal.device_type}",
        f"Power: {signal.power:g} watts",
        f"Frequency: {signal.frequency:g} MHz",
        f"Distance: {signal.distance:g} meters",
        f"Signal Strength: {signal.strength():g}",
        SEPARATOR,
    ])


def format_database(db: SignalDatabase) -> str:
    lines = ["=== Signal Database ===", f"Total signals: {len(db)}", ""]
    for i, signal in enumerate(db, start=1):
        lines.append(f"Signal {i}:")
        lines.append(format_signal(signal))
    return "\n".join(lines)


def format_power_range(db: SignalDatabase, min_power: float, max_power: float) -> str:
    lines = [f"Signals with power between {min_power:g} and {max_power:g} watts:"]
    matches = db.signals_in_power_range(min_power, max_power)
    if not matches:
        lines.append("No signals found in that power range.")
    for signal in matches:
        lines.append(format_signal(signal))
    return "\n".join(lines)
