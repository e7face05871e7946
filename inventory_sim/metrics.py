"""
Run metrics and reporting for the inventory simulation.
Summarizes a day trace, writes a JSON report and plots the full run.
"""

import json
from pathlib import Path
from typing import Dict, Optional
import numpy as np
import matplotlib.pyplot as plt
import config
from inventory_sim.day_log import DayLog
from inventory_sim.sim_config import SimulationConfig


class RunMetrics:
    """Compute summary statistics and generate reports for one run."""

    def __init__(
        self,
        day_log: DayLog,
        sim_config: SimulationConfig,
        output_dir: str = config.REPORT_DIR,
        run_id: str = "default",
    ):
        """Initialize metrics.

        Args:
            day_log: Trace of the run
            sim_config: Parameters the run used
            output_dir: Output directory for reports
            run_id: Identifier for this run
        """
        self.day_log = day_log
        self.sim_config = sim_config
        self.output_dir = Path(output_dir)
        self.run_id = run_id

    def order_amplification(self) -> Optional[float]:
        """Ratio of order variability to demand variability.

        Values above 1 mean the ordering policy amplifies demand swings.

        Returns:
            std(orders) / std(demand), or None when demand never varies
        """
        df = self.day_log.get_dataframe()
        if df.empty:
            return None

        demand_std = float(np.std(df["demand"]))
        if demand_std == 0:
            return None
        return float(np.std(df["order"])) / demand_std

    def compute_summary(self) -> Dict:
        """Compute inventory, demand and order statistics.

        Returns:
            Summary dictionary (empty statistics for an empty trace)
        """
        df = self.day_log.get_dataframe()
        if df.empty:
            return {"days": 0}

        inventory = df["inventory"].to_numpy()
        return {
            "days": int(len(df)),
            "final_inventory": int(inventory[-1]),
            "min_inventory": int(inventory.min()),
            "max_inventory": int(inventory.max()),
            "mean_inventory": float(inventory.mean()),
            "negative_inventory_days": int((inventory < 0).sum()),
            "total_demand": int(df["demand"].sum()),
            "total_orders": int(df["order"].sum()),
            "total_deliveries": int(df["deliveries"].sum()),
            "zero_order_days": int((df["order"] == 0).sum()),
            "order_amplification": self.order_amplification(),
        }

    def generate_report(self) -> Dict:
        """Generate the run report."""
        return {
            "run_id": self.run_id,
            "parameters": {
                "delivery_delay": self.sim_config.delivery_delay,
                "perception_delay": self.sim_config.perception_delay,
                "response_delay": self.sim_config.response_delay,
                "demand_schedule": self.sim_config.demand_schedule.to_text(),
            },
            "summary": self.compute_summary(),
        }

    def save_report_json(self, report: Dict) -> str:
        """Save report as JSON file.

        Args:
            report: Report dictionary

        Returns:
            Path to saved file
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / f"report_{self.run_id}.json"

        # Handle non-serializable values
        def default_serializer(obj):
            if isinstance(obj, np.ndarray):
                return obj.tolist()
            if isinstance(obj, np.integer):
                return int(obj)
            if isinstance(obj, np.floating):
                return float(obj)
            return str(obj)

        with open(path, "w") as f:
            json.dump(report, f, indent=2, default=default_serializer)

        return str(path)

    def plot_run(self, plot_dir: str = config.PLOT_DIR) -> str:
        """Plot inventory, orders and demand over the whole run.

        Returns:
            Path to saved figure, or "" for an empty trace
        """
        df = self.day_log.get_dataframe()
        if df.empty:
            return ""

        fig, axes = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

        axes[0].plot(df["day"], df["inventory"], label="Inventory", linewidth=2)
        axes[0].plot(df["day"], df["desired_inventory"], label="Desired inventory",
                     linestyle="--", linewidth=1.5)
        axes[0].axhline(0, color="r", linewidth=1)
        axes[0].set_ylabel("Cars")
        axes[0].set_title("Inventory")
        axes[0].legend()
        axes[0].grid(True, alpha=0.3)

        axes[1].plot(df["day"], df["demand"], label="Demand", linewidth=2)
        axes[1].plot(df["day"], df["order"], label="Orders", linewidth=2)
        axes[1].plot(df["day"], df["deliveries"], label="Deliveries", linewidth=1.5, alpha=0.7)
        axes[1].set_ylabel("Cars/day")
        axes[1].set_xlabel("Day")
        axes[1].set_title("Flows")
        axes[1].legend()
        axes[1].grid(True, alpha=0.3)

        path = Path(plot_dir) / f"run_{self.run_id}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        plt.tight_layout()
        plt.savefig(path, dpi=150)
        plt.close(fig)

        return str(path)
