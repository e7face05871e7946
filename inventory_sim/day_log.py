"""
Per-day trace of the inventory recurrence.
Keeps records in memory and exports them as a DataFrame or CSV.
"""

import csv
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import List
import pandas as pd
import config


@dataclass
class DayRecord:
    """Every intermediate quantity of one simulated day."""
    day: int
    deliveries: int
    demand: int
    perceived_sales: float
    desired_inventory: float
    discrepancy: float
    order: int
    inventory: int  # end of day


class DayLog:
    """In-memory day trace with CSV export."""

    def __init__(self):
        self.records: List[DayRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def log_day(self, record: DayRecord):
        """Append one day's record.

        Args:
            record: DayRecord produced by the engine
        """
        self.records.append(record)

    def get_dataframe(self) -> pd.DataFrame:
        """Return the trace as a pandas DataFrame indexed by position."""
        if not self.records:
            return pd.DataFrame(columns=config.DAY_LOG_COLUMNS)

        return pd.DataFrame([asdict(r) for r in self.records])

    def inventory_series(self) -> List[int]:
        return [r.inventory for r in self.records]

    def save_csv(self, output_dir: str = config.LOG_DIR, run_id: str = "default") -> str:
        """Write the trace to CSV.

        Args:
            output_dir: Directory to store the CSV
            run_id: Identifier for this run (used in filename)

        Returns:
            Path to CSV file
        """
        out = Path(output_dir)
        out.mkdir(parents=True, exist_ok=True)
        path = out / f"days_{run_id}.csv"

        with open(path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=config.DAY_LOG_COLUMNS)
            writer.writeheader()
            for record in self.records:
                writer.writerow(asdict(record))

        return str(path)
