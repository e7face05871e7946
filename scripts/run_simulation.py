"""
Main orchestration script for the dealership inventory simulation.
Animates a run through the driver and writes the chart, trace and report.
"""

import argparse
from pathlib import Path
import sys

# Ensure root directory is in path for config import
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

import simpy
import simpy.rt
import config
from inventory_sim.driver import AnimationDriver
from inventory_sim.metrics import RunMetrics
from inventory_sim.renderer import ChartRenderer
from inventory_sim.sim_config import ConfigurationError, SimulationConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run-simulation",
        description="Animate the dealership inventory simulation.",
    )
    choices = [str(c) for c in config.DELAY_CHOICES]
    parser.add_argument("--delivery-delay", default=str(config.DEFAULT_DELIVERY_DELAY),
                        choices=choices, help="Days between ordering and delivery")
    parser.add_argument("--perception-delay", default=str(config.DEFAULT_PERCEPTION_DELAY),
                        choices=choices, help="Days of sales averaged to perceive demand")
    parser.add_argument("--response-delay", default=str(config.DEFAULT_RESPONSE_DELAY),
                        choices=choices, help="Days over which a stock gap is corrected")
    parser.add_argument("--demand", default=config.DEFAULT_DEMAND,
                        help="Alternating day,demand pairs, e.g. 0,20,25,22")
    parser.add_argument("--days", type=int, default=config.RUN_DAYS,
                        help="Number of days to animate")
    parser.add_argument("--realtime", action="store_true",
                        help=f"Pace ticks on the wall clock ({config.TICKS_PER_SECOND}/s)")
    parser.add_argument("--frames-dir", default=None,
                        help="Save every redrawn frame into this directory")
    parser.add_argument("--output-dir", default=config.OUTPUT_DIR,
                        help="Directory for logs, plots and reports")
    parser.add_argument("--run-id", default="run0", help="Identifier used in output filenames")
    return parser


def run_animation(sim_config: SimulationConfig, days: int, realtime: bool = False,
                  frames_dir: str = None, output_dir: str = config.OUTPUT_DIR,
                  run_id: str = "run0") -> dict:
    """Animate one run and write its outputs.

    Args:
        sim_config: Validated simulation parameters
        days: Number of ticks to run
        realtime: Pace ticks on the wall clock
        frames_dir: Optional directory receiving one PNG per tick
        output_dir: Root directory for outputs
        run_id: Identifier for this run

    Returns:
        Report dictionary
    """
    if realtime:
        env = simpy.rt.RealtimeEnvironment(factor=1.0, strict=False)
    else:
        env = simpy.Environment()

    renderer = ChartRenderer()
    done = env.event()

    def on_tick(day: int, inventory: int):
        if frames_dir is not None:
            renderer.save(str(Path(frames_dir) / f"frame_{day:05d}.png"))
        if driver.tick_count >= days and not done.triggered:
            done.succeed()

    driver = AnimationDriver(env, renderer=renderer, on_tick=on_tick)
    driver.start(sim_config)

    print(f"[{run_id}] Animating {days} days...")
    env.run(until=done)
    print(f"[{run_id}] Animation complete at day {driver.engine.day}.")

    out = Path(output_dir)
    metrics = RunMetrics(
        day_log=driver.day_log,
        sim_config=sim_config,
        output_dir=str(out / "reports"),
        run_id=run_id,
    )
    report = metrics.generate_report()
    metrics.save_report_json(report)
    metrics.plot_run(plot_dir=str(out / "plots"))
    driver.day_log.save_csv(output_dir=str(out / "logs"), run_id=run_id)
    renderer.save(str(out / "plots" / f"chart_{run_id}.png"))

    driver.stop()
    print(f"[{run_id}] Report saved.")

    return report


def main(argv=None) -> int:
    """Entry point for the simulation."""
    args = build_parser().parse_args(argv)

    try:
        sim_config = SimulationConfig.from_form(
            delivery_delay=args.delivery_delay,
            perception_delay=args.perception_delay,
            response_delay=args.response_delay,
            demand_text=args.demand,
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.days < 1:
        print("Configuration error: --days must be at least 1", file=sys.stderr)
        return 2

    print(f"Dealership Inventory Simulation")
    print(f"=" * 50)
    print(f"Configuration:")
    print(f"  Delivery delay:   {sim_config.delivery_delay} days")
    print(f"  Perception delay: {sim_config.perception_delay} days")
    print(f"  Response delay:   {sim_config.response_delay} days")
    print(f"  Demand schedule:  {sim_config.demand_schedule.to_text()}")
    print(f"  Days:             {args.days}")
    print(f"=" * 50)

    report = run_animation(
        sim_config,
        days=args.days,
        realtime=args.realtime,
        frames_dir=args.frames_dir,
        output_dir=args.output_dir,
        run_id=args.run_id,
    )

    summary = report["summary"]
    amplification = summary["order_amplification"]
    print(f"\n{'=' * 50}")
    print(f"SUMMARY")
    print(f"{'=' * 50}")
    print(f"  Final inventory:   {summary['final_inventory']}")
    print(f"  Min / max:         {summary['min_inventory']} / {summary['max_inventory']}")
    print(f"  Days below zero:   {summary['negative_inventory_days']}")
    if amplification is not None:
        print(f"  Order amplification: {amplification:.2f}")
    print(f"\nOutputs: {args.output_dir}")
    print(f"{'=' * 50}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
