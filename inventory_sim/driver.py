"""
Animation driver: pulls one simulated day per tick and redraws the chart.
Frame callbacks are a SimPy process; a rate limiter decides which frames tick.
"""

from typing import Callable, List, Optional
import simpy
import config
from inventory_sim.day_log import DayLog
from inventory_sim.display import DisplayBuffer, RateLimiter
from inventory_sim.engine import InventoryEngine
from inventory_sim.logs import get_logger
from inventory_sim.renderer import ChartRenderer
from inventory_sim.sim_config import SimulationConfig


class AnimationDriver:
    """Owns the engine, the display buffer and the frame loop of one run."""

    def __init__(
        self,
        env: simpy.Environment,
        renderer: Optional[ChartRenderer] = None,
        window: int = config.DISPLAY_WINDOW,
        tick_interval: float = config.TICK_INTERVAL,
        frame_interval: float = config.FRAME_INTERVAL,
        record_days: bool = True,
        on_tick: Optional[Callable[[int, int], None]] = None,
    ):
        """Initialize driver.

        Args:
            env: SimPy environment supplying the frame callbacks
                (simpy.rt.RealtimeEnvironment for wall-clock pacing)
            renderer: Chart to redraw each tick
            window: Number of recent values kept on the chart
            tick_interval: Seconds between engine steps
            frame_interval: Seconds between frame callbacks
            record_days: Keep a DayLog of the current run
            on_tick: Called with (day, inventory) after each redraw
        """
        self.env = env
        self.renderer = renderer if renderer is not None else ChartRenderer(window=window)
        self.window = window
        self.tick_interval = tick_interval
        self.frame_interval = frame_interval
        self.record_days = record_days
        self.on_tick = on_tick
        self.logger = get_logger('driver')

        # Per-run state
        self.config: Optional[SimulationConfig] = None
        self.engine: Optional[InventoryEngine] = None
        self.buffer: Optional[DisplayBuffer] = None
        self.day_log: Optional[DayLog] = None
        self.limiter: Optional[RateLimiter] = None
        self.tick_count = 0
        self._process: Optional[simpy.Process] = None

    @property
    def running(self) -> bool:
        return self._process is not None

    @property
    def values(self) -> List[int]:
        """Snapshot of the values currently on the chart."""
        if self.buffer is None:
            return []
        return self.buffer.values()

    def start(self, sim_config: SimulationConfig):
        """Start a fresh run, replacing any run in progress.

        Args:
            sim_config: Simulation parameters

        Raises:
            ConfigurationError: if sim_config is invalid; the driver is left as it was
        """
        sim_config.validate()
        self.stop()

        self.config = sim_config
        self.day_log = DayLog() if self.record_days else None
        self.engine = InventoryEngine(sim_config, day_log=self.day_log)
        self.buffer = DisplayBuffer(self.window)
        self.limiter = RateLimiter(self.tick_interval)
        self.tick_count = 0
        self._process = self.env.process(self._frame_loop())

        self.logger.info(
            f"Started: delivery={sim_config.delivery_delay}, "
            f"perception={sim_config.perception_delay}, "
            f"response={sim_config.response_delay}, "
            f"demand={sim_config.demand_schedule.to_text()}"
        )

    def stop(self):
        """Cancel the frame loop and drop all run state. Safe to call when stopped."""
        process = self._process
        if process is None:
            return

        self._process = None
        if process.is_alive and process is not self.env.active_process:
            process.interrupt("stop")

        day = self.engine.day if self.engine is not None else 0
        self.config = None
        self.engine = None
        self.buffer = None
        self.day_log = None
        self.limiter = None
        self.tick_count = 0
        self.logger.info(f"Stopped after {day} days")

    def tick(self) -> int:
        """Advance the engine one day, update the buffer and redraw.

        Returns:
            Inventory at the end of the new day
        """
        if self.engine is None:
            raise RuntimeError("Driver is not running")

        day = self.engine.day
        value = self.engine.next_day()
        self.buffer.append(value)
        self.renderer.render(self.buffer.values())
        self.tick_count += 1

        if self.on_tick is not None:
            self.on_tick(day, value)
        return value

    def _frame_loop(self):
        """SimPy process: one wake-up per display frame."""
        me = self.env.active_process
        try:
            while self._process is me:
                yield self.env.timeout(self.frame_interval)
                if self._process is not me:
                    break
                if self.limiter.ready(self.env.now):
                    self.tick()
        except simpy.Interrupt:
            self.logger.debug("Frame loop interrupted")
