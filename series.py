from __future__ import annotations

import logging
import math
import statistics
from typing import Iterable, Iterator, List, NamedTuple, Optional

import pandas as pd

from constants import MIN_TEMPERATURE
from errors import EmptySeriesError, InvalidTemperatureError

logger = logging.getLogger(__name__)


class TempSummaryStatistics(NamedTuple):
    avg_temp: float
    dev_temp: float
    min_temp: float
    max_temp: float


def _validated(readings: Iterable[float]) -> List[float]:
    """
    Convert readings to floats and check each against MIN_TEMPERATURE.
    Raises InvalidTemperatureError on the first offending value, before the
    caller has touched any state.
    """
    values = [float(r) for r in readings]
    for value in values:
        # `not >=` also rejects NaN
        if not value >= MIN_TEMPERATURE:
            logger.warning(
                "Rejected batch of %d reading(s): %s is below %s",
                len(values),
                value,
                MIN_TEMPERATURE,
            )
            raise InvalidTemperatureError(value, MIN_TEMPERATURE)
    return values


def _closest_to(values: List[float], target: float) -> float:
    closest = values[0]
    for current in values[1:]:
        distance = abs(current - target)
        best = abs(closest - target)
        if distance < best or (distance == best and current > closest):
            closest = current
    return closest


class TemperatureSeries:
    """Ordered, growable collection of temperature readings (°C)."""

    def __init__(self, readings: Optional[Iterable[float]] = None) -> None:
        self._temps: List[float] = _validated(readings) if readings is not None else []

    def __len__(self) -> int:
        return len(self._temps)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._temps))

    def __repr__(self) -> str:
        return f"TemperatureSeries({self._temps!r})"

    @property
    def temperatures(self) -> List[float]:
        return list(self._temps)

    def to_series(self) -> pd.Series:
        """Copy of the readings as a pandas Series indexed by reading position."""
        return pd.Series(self._temps, dtype="float64", name="temperature_c")

    def _require_readings(self, operation: str) -> None:
        if not self._temps:
            raise EmptySeriesError(operation)

    # Aggregates -----------------------------------------------------------

    def average(self) -> float:
        self._require_readings("average")
        return float(statistics.mean(self._temps))

    def deviation(self) -> float:
        """Population standard deviation (divisor is the number of readings)."""
        self._require_readings("deviation")
        if not all(math.isfinite(t) for t in self._temps):
            # exact pstdev cannot handle inf; plain float arithmetic yields nan
            mean = self.average()
            return math.sqrt(math.fsum((t - mean) ** 2 for t in self._temps) / len(self._temps))
        return float(statistics.pstdev(self._temps))

    def min(self) -> float:
        self._require_readings("min")
        lowest = self._temps[0]
        for value in self._temps[1:]:
            if value < lowest:
                lowest = value
        return lowest

    def max(self) -> float:
        self._require_readings("max")
        highest = self._temps[0]
        for value in self._temps[1:]:
            if value > highest:
                highest = value
        return highest

    def find_temp_closest_to_zero(self) -> float:
        self._require_readings("the reading closest to zero")
        return _closest_to(self._temps, 0.0)

    def find_temp_closest_to_value(self, target: float) -> float:
        """
        Reading with the smallest distance to `target`. On an exact tie the
        larger reading wins, e.g. 5.0 over -5.0 for a target of 0.
        """
        self._require_readings("the reading closest to a value")
        return _closest_to(self._temps, float(target))

    def summary_statistics(self) -> TempSummaryStatistics:
        self._require_readings("summary statistics")
        return TempSummaryStatistics(
            avg_temp=self.average(),
            dev_temp=self.deviation(),
            min_temp=self.min(),
            max_temp=self.max(),
        )

    # Filters --------------------------------------------------------------

    def find_temps_less_than(self, threshold: float) -> List[float]:
        return [t for t in self._temps if t < threshold]

    def find_temps_greater_than(self, threshold: float) -> List[float]:
        return [t for t in self._temps if t > threshold]

    def find_temps_in_range(self, low: float, high: float) -> List[float]:
        """Readings with low <= t <= high, in insertion order."""
        return [t for t in self._temps if low <= t <= high]

    # Mutation -------------------------------------------------------------

    def add_temps(self, *readings: float) -> int:
        """Append all readings or none of them. Returns the new count."""
        values = _validated(readings)
        self._temps.extend(values)
        logger.debug("Added %d reading(s); series now holds %d", len(values), len(self._temps))
        return len(self._temps)

    def reset(self) -> None:
        self._temps = []
        logger.debug("Series reset")

    def sort_temps(self) -> None:
        self._temps.sort()
        logger.debug("Sorted %d reading(s)", len(self._temps))
