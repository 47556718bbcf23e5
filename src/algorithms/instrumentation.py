import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, TypeVar

Clock = Callable[[], float]

T = TypeVar("T")


class MeasurementState(Enum):
    """Lifecycle of a single timed invocation."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass
class Metrics:
    """
    Cost of one algorithm invocation.

    Attributes:
        comparisons: Number of ordering decisions the algorithm made
        elapsed: Duration of the invocation in seconds, never negative
    """

    comparisons: int
    elapsed: float


class ComparisonCounter:
    """Counter the algorithms increment once per ordering decision."""

    def __init__(self):
        self.count = 0

    def increment(self) -> None:
        self.count += 1


class Measurement:
    """
    Times one invocation with a monotonic clock.

    Transitions are strictly NOT_STARTED -> RUNNING -> COMPLETED; anything
    else raises RuntimeError.
    """

    def __init__(self, clock: Clock):
        self.clock = clock
        self.state = MeasurementState.NOT_STARTED
        self._start: Optional[float] = None
        self._end: Optional[float] = None

    def start(self) -> None:
        if self.state is not MeasurementState.NOT_STARTED:
            raise RuntimeError(f"Cannot start a measurement in state {self.state.value}")
        self.state = MeasurementState.RUNNING
        self._start = self.clock()

    def stop(self) -> None:
        if self.state is not MeasurementState.RUNNING:
            raise RuntimeError(f"Cannot stop a measurement in state {self.state.value}")
        self._end = self.clock()
        self.state = MeasurementState.COMPLETED

    @property
    def elapsed(self) -> float:
        if self.state is not MeasurementState.COMPLETED:
            raise RuntimeError("Measurement has not completed")
        assert self._start is not None and self._end is not None
        # Clamp: an injected clock is not guaranteed to be monotonic.
        return max(0.0, self._end - self._start)


class InstrumentationHarness:
    """
    Wraps a single algorithm invocation with timing.

    The harness only times. Counting is done by the algorithm through the
    ComparisonCounter handed to the operation.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock if clock is not None else time.perf_counter

    def measure(
        self, operation: Callable[[ComparisonCounter], T]
    ) -> Tuple[T, Metrics]:
        """
        Run operation once and report its metrics.

        Args:
            operation: Callable receiving the counter to increment

        Returns:
            The operation's return value and the Metrics of the run
        """
        counter = ComparisonCounter()
        measurement = Measurement(self.clock)

        measurement.start()
        value = operation(counter)
        measurement.stop()

        return value, Metrics(comparisons=counter.count, elapsed=measurement.elapsed)
