"""Simulated request latency."""

import asyncio
from dataclasses import dataclass


@dataclass(frozen=True)
class SimulatedLatency:
    """Pause store round trips so clients see realistic request timing.

    ``scale`` multiplies every delay; 0 turns delays off.
    """

    scale: float = 1.0

    async def wait(self, milliseconds: int) -> None:
        """Sleep for the scaled number of milliseconds."""
        seconds = milliseconds * self.scale / 1000
        if seconds > 0:
            await asyncio.sleep(seconds)
