from __future__ import annotations


class TemperatureSeriesError(ValueError):
    """Base class for errors raised by TemperatureSeries."""


class EmptySeriesError(TemperatureSeriesError):
    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot compute {operation}: the temperature series is empty.")
        self.operation = operation


class InvalidTemperatureError(TemperatureSeriesError):
    def __init__(self, value: float, minimum: float) -> None:
        super().__init__(f"Temperature {value} is below the physical minimum of {minimum}.")
        self.value = value
        self.minimum = minimum
