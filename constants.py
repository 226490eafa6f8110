from __future__ import annotations

# Absolute physical lower bound for a reading (°C). Anything below is rejected.
MIN_TEMPERATURE: float = -273.0
