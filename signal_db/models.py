# models.py
from dataclasses import dataclass, replace

UNKNOWN_DEVICE = "Unknown"

@dataclass(slots=True)
class WirelessSignal:
    """One observed emitter: power (W), frequency (MHz), distance (m) and device label.

    Fields are public and mutable; a database hands out live references
    through indexed access so callers can edit stored signals in place.
    """
    power: float = 0.0
    frequency: float = 0.0
    distance: float = 0.0
    device_type: str = UNKNOWN_DEVICE

    def strength(self) -> float:
        """Inverse-square signal strength, or raw power at zero distance"""
        if self.distance == 0:
            return self.power
        return self.power / (self.distance * self.distance)

    @property
    def frequency_hz(self) -> float:
        return self.frequency * 1e6

    def copy(self) -> "WirelessSignal":
        return replace(self)
