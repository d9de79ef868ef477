"""
Simulation driver for the induction motor start/stop animation.

This module owns the live operating state:
1. Holds the motor parameters and caches the torque-slip curve
2. Applies the slip relaxation once per tick and publishes the readout
3. Drives ticks from a single cancelable periodic asyncio task
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional
import asyncio

from ..models.parameters import MotorParameters, create_default_parameters
from ..calculations.torque_slip import (
    CurvePoint, OperatingPoint,
    sample_curve, find_peak_point, compute_operating_point
)
from ..calculations.readouts import OperatingReadout, build_readout
from ..utils.constants import TICK_INTERVAL, LINE_FREQUENCY, CURVE_STEP, HISTORY_LIMIT
from .operating_state import (
    OperatingState, RelaxationSettings,
    initial_state, tick as relax_tick, set_running as switch_running
)
from .history import SlipHistory, SlipSample


Subscriber = Callable[[OperatingReadout], None]


@dataclass
class SimulationSettings:
    """
    All options of a simulation run.

    Attributes:
        tick_interval: Wall-clock time between periodic ticks [s]
        frequency: Supply frequency [Hz]
        curve_step: Slip resolution of the cached torque-slip curve
        relaxation: Slip ramp rates and limits
        record_history: Keep a SlipSample per tick
        history_limit: Number of most recent samples kept (None = unbounded)
        verbose: Print progress messages
    """
    tick_interval: float = TICK_INTERVAL
    frequency: float = LINE_FREQUENCY
    curve_step: float = CURVE_STEP
    relaxation: RelaxationSettings = field(default_factory=RelaxationSettings)
    record_history: bool = True
    history_limit: Optional[int] = HISTORY_LIMIT
    verbose: bool = False

    def __post_init__(self):
        """Validate settings."""
        if self.tick_interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_interval}")
        if self.frequency <= 0:
            raise ValueError(f"Frequency must be positive, got {self.frequency}")
        if not 0 < self.curve_step <= 1:
            raise ValueError(f"Curve step must be in (0, 1], got {self.curve_step}")
        if self.history_limit is not None and self.history_limit < 1:
            raise ValueError(f"History limit must be >= 1, got {self.history_limit}")


class MotorSimulator:
    """
    Live operating point of an induction motor being switched on and off.

    The simulator is the only writer of its OperatingState. Readers either
    poll the properties or subscribe to the readout published after each tick.

    Usage:
        sim = MotorSimulator(create_default_parameters())
        sim.set_running(True)
        sim.advance(50)
        print(sim.readout)
    """

    def __init__(
        self,
        params: Optional[MotorParameters] = None,
        settings: Optional[SimulationSettings] = None
    ):
        """
        Initialize the simulator.

        Args:
            params: Motor parameters (default motor if None)
            settings: Simulation options (defaults if None)
        """
        self.settings = settings if settings is not None else SimulationSettings()
        self.verbose = self.settings.verbose

        self._params = params if params is not None else create_default_parameters()
        self._state = initial_state(self.settings.relaxation)
        self._curve: Optional[List[CurvePoint]] = None
        self._subscribers: List[Subscriber] = []
        self._timer_task: Optional[asyncio.Task] = None

        self.tick_count = 0
        self.history = SlipHistory(self.settings.history_limit)

    def _log(self, message: str):
        """Print message if verbose."""
        if self.verbose:
            print(message)

    # -------------------------------------------------------------------------
    # State access
    # -------------------------------------------------------------------------

    @property
    def state(self) -> OperatingState:
        return self._state

    @property
    def slip(self) -> float:
        return self._state.slip

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def params(self) -> MotorParameters:
        return self._params

    @property
    def time(self) -> float:
        """Simulated time since start [s]."""
        return self.tick_count * self.settings.tick_interval

    @property
    def curve(self) -> List[CurvePoint]:
        """Torque-slip curve of the current parameters (cached)."""
        if self._curve is None:
            self._curve = sample_curve(
                self._params, self.settings.curve_step, self.settings.frequency
            )
        return self._curve

    @property
    def peak_point(self) -> CurvePoint:
        """Curve sample with the largest torque."""
        return find_peak_point(self.curve)

    @property
    def operating_point(self) -> OperatingPoint:
        return compute_operating_point(self._params, self._state.slip, self.settings.frequency)

    @property
    def readout(self) -> OperatingReadout:
        return build_readout(
            self._params, self._state.slip, self._state.running, self.settings.frequency
        )

    # -------------------------------------------------------------------------
    # Inputs
    # -------------------------------------------------------------------------

    def set_params(self, params: MotorParameters):
        """Replace the motor parameters; the curve is recomputed on next access."""
        if params == self._params:
            return
        self._params = params
        self._curve = None
        self._log(f"Parameters updated: {params.as_dict()}")

    def update_params(self, **changes):
        """Change individual parameters (e.g. update_params(Rr=1.2))."""
        self.set_params(self._params.replace(**changes))

    def set_running(self, running: bool):
        """Switch the motor on or off without touching the slip."""
        if running == self._state.running:
            return
        self._state = switch_running(self._state, running)
        self._log(f"Motor {'started' if running else 'stopped'} at slip {self.slip:.3f}")

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback receiving the readout after every tick.

        Returns:
            Function that removes the callback again
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def tick(self) -> OperatingState:
        """
        Apply one relaxation step and publish the result.

        Returns:
            The new operating state
        """
        self._state = relax_tick(self._state, self.settings.relaxation)
        self.tick_count += 1

        readout = self.readout
        if self.settings.record_history:
            self.history.add(SlipSample(
                tick=self.tick_count,
                time=self.time,
                slip=readout.slip,
                running=readout.running,
                speed=readout.actual_speed,
                torque=readout.torque
            ))

        for callback in list(self._subscribers):
            callback(readout)

        return self._state

    def advance(self, n_ticks: int) -> OperatingState:
        """Apply n ticks synchronously."""
        if n_ticks < 0:
            raise ValueError(f"Number of ticks must be non-negative, got {n_ticks}")
        for _ in range(n_ticks):
            self.tick()
        return self._state

    def reset(self):
        """Return to the power-up state and clear the history."""
        self._state = initial_state(self.settings.relaxation)
        self.tick_count = 0
        self.history.clear()
        self._log("Simulator reset")

    # -------------------------------------------------------------------------
    # Periodic timer
    # -------------------------------------------------------------------------

    @property
    def is_ticking(self) -> bool:
        """True while the periodic timer task is alive."""
        return self._timer_task is not None and not self._timer_task.done()

    async def _tick_loop(self):
        while True:
            await asyncio.sleep(self.settings.tick_interval)
            self.tick()

    async def start(self):
        """
        Start the periodic timer.

        A timer that is already active is cancelled first, so at most one
        task ticks the state.
        """
        await self.stop()
        self._timer_task = asyncio.create_task(self._tick_loop())
        self._log(f"Timer started ({self.settings.tick_interval * 1000:.0f} ms)")

    async def stop(self):
        """
        Cancel the periodic timer and wait until it has finished.

        An error that ended the timer (e.g. from a subscriber) is raised here.
        """
        task = self._timer_task
        if task is None:
            return
        self._timer_task = None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            # Only the timer's own cancellation is expected; a cancelled caller
            # must still see it.
            if not task.cancelled() or asyncio.current_task().cancelling():
                raise
        self._log("Timer stopped")

    async def toggle(self, running: bool):
        """
        Switch the motor on or off from the event loop.

        An active timer is replaced once by a fresh one, so the next tick
        comes a full interval after the switch.
        """
        if running == self._state.running:
            return
        self.set_running(running)
        if self._timer_task is not None:
            await self.start()

    async def run_for(self, n_ticks: int) -> OperatingState:
        """
        Wait until the periodic timer has produced n more ticks.

        The timer is started if needed and stopped again afterwards if it
        was started here. An error raised by a tick is re-raised here, and
        RuntimeError is raised if the timer is stopped before the ticks
        arrive. A timer replaced by `toggle` is followed to its successor.
        """
        if n_ticks <= 0:
            return self._state

        loop = asyncio.get_running_loop()
        done = loop.create_future()
        target = self.tick_count + n_ticks

        def on_tick(_readout):
            if self.tick_count >= target and not done.done():
                done.set_result(None)

        unsubscribe = self.subscribe(on_tick)
        started_here = not self.is_ticking
        if started_here:
            await self.start()
        try:
            while not done.done():
                task = self._timer_task
                if task is None:
                    raise RuntimeError(
                        f"Timer stopped after {n_ticks - (target - self.tick_count)} "
                        f"of {n_ticks} ticks"
                    )
                await asyncio.wait({done, task}, return_when=asyncio.FIRST_COMPLETED)
                if task.done() and not task.cancelled() and not done.done():
                    if self._timer_task is task:
                        self._timer_task = None
                    task.result()
        finally:
            unsubscribe()
            if started_here:
                await self.stop()
        return self._state
