"""
Inventory engine: the dealership stock recurrence.
Each call to next_day() advances one simulated day and returns end-of-day inventory.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np
import config
from inventory_sim.day_log import DayLog, DayRecord
from inventory_sim.logs import get_logger
from inventory_sim.sim_config import SimulationConfig


@dataclass
class SimulationState:
    """Mutable state of one run. Only InventoryEngine writes to it."""
    day: int = 0
    inventory: int = config.INITIAL_INVENTORY
    orders_history: List[int] = field(default_factory=list)
    sales_history: List[int] = field(default_factory=list)


class InventoryEngine:
    """Deterministic step function over SimulationState.

    The sequence is unbounded and cannot be rewound; build a new engine
    to start again from day 0.
    """

    def __init__(
        self,
        sim_config: SimulationConfig,
        day_log: Optional[DayLog] = None,
        initial_inventory: int = config.INITIAL_INVENTORY,
        seed_days: int = config.SEED_DAYS,
        seed_delivery: int = config.SEED_DELIVERY,
        horizon_days: int = config.DESIRED_INVENTORY_DAYS,
    ):
        """Initialize the engine.

        Args:
            sim_config: Delays and demand schedule (validated here)
            day_log: Optional DayLog receiving one record per step
            initial_inventory: Stock on day 0
            seed_days: Days with fixed deliveries before orders arrive
            seed_delivery: Units delivered per seeding day
            horizon_days: Days of perceived sales the dealer wants on hand

        Raises:
            ConfigurationError: if sim_config is invalid
        """
        sim_config.validate()
        self.config = sim_config
        self.day_log = day_log
        self.seed_days = seed_days
        self.seed_delivery = seed_delivery
        self.horizon_days = horizon_days
        self.state = SimulationState(inventory=initial_inventory)
        self.logger = get_logger('engine')

    def _deliveries(self, day: int) -> int:
        if day < self.seed_days:
            return self.seed_delivery
        placed_on = day - self.config.delivery_delay
        # Order not placed yet: delivery lag outlasts the seeding period
        if placed_on < 0:
            return 0
        return self.state.orders_history[placed_on]

    def next_day(self) -> int:
        """Advance one day.

        Returns:
            Inventory at the end of the simulated day
        """
        state = self.state
        day = state.day

        deliveries = self._deliveries(day)

        # Realized sales are raw demand; stock is allowed to go negative
        demand = self.config.demand_schedule.demand_at(day)
        state.sales_history.append(demand)

        window = state.sales_history[-self.config.perception_delay:]
        perceived_sales = float(np.mean(window))
        desired_inventory = perceived_sales * self.horizon_days
        discrepancy = desired_inventory - state.inventory

        # Half-up rounding, never negative
        raw_order = perceived_sales + discrepancy / self.config.response_delay
        order = max(0, int(np.floor(raw_order + 0.5)))
        state.orders_history.append(order)

        state.inventory = state.inventory + deliveries - demand
        state.day += 1

        if self.day_log is not None:
            self.day_log.log_day(DayRecord(
                day=day,
                deliveries=deliveries,
                demand=demand,
                perceived_sales=perceived_sales,
                desired_inventory=desired_inventory,
                discrepancy=discrepancy,
                order=order,
                inventory=state.inventory,
            ))

        self.logger.debug(
            f"Day {day}: deliveries={deliveries}, demand={demand}, "
            f"order={order}, inventory={state.inventory}"
        )

        return state.inventory

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next_day()

    @property
    def day(self) -> int:
        return self.state.day

    @property
    def inventory(self) -> int:
        return self.state.inventory
