"""
Tests for the animation driver, display buffer, rate limiter and renderer.
"""

import pytest
import simpy
import config
from inventory_sim.display import DisplayBuffer, RateLimiter
from inventory_sim.driver import AnimationDriver
from inventory_sim.renderer import ChartRenderer
from inventory_sim.sim_config import ConfigurationError, DemandSchedule, SimulationConfig


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def sim_config():
    return SimulationConfig.from_form(3, 3, 3, "0,20,25,22")


def test_display_buffer_keeps_last_values():
    buffer = DisplayBuffer(window=3)
    for value in range(10):
        buffer.append(value)
    assert buffer.values() == [7, 8, 9]
    assert len(buffer) == 3


def test_rate_limiter_gates_ticks():
    limiter = RateLimiter(interval=0.1)
    assert limiter.ready(0.0)
    assert not limiter.ready(0.05)
    assert limiter.ready(0.1)
    assert not limiter.ready(0.15)


def test_rate_limiter_no_burst_after_late_frame():
    limiter = RateLimiter(interval=0.1)
    assert limiter.ready(0.0)
    assert limiter.ready(1.0)
    assert not limiter.ready(1.01)
    assert limiter.ready(1.1)


def test_renderer_full_redraw(tmp_path):
    renderer = ChartRenderer()
    renderer.render([200, 180, 160])
    assert renderer.plotted_values() == [200.0, 180.0, 160.0]

    renderer.render([150])
    assert renderer.plotted_values() == [150.0]
    assert len(renderer.ax.get_lines()) == 1
    assert renderer.ax.get_ylim() == (config.Y_AXIS_MIN, config.Y_AXIS_MAX)
    assert list(renderer.ax.get_yticks()) == list(
        range(config.Y_AXIS_MIN, config.Y_AXIS_MAX + 1, config.Y_TICK_INTERVAL)
    )
    assert renderer.frames_rendered == 2

    path = renderer.save(str(tmp_path / "frame.png"))
    assert (tmp_path / "frame.png").exists()
    assert path.endswith("frame.png")


@pytest.mark.parametrize("frame_interval", [1.0 / 60, 1.0 / 144])
def test_tick_rate_independent_of_frame_rate(env, sim_config, frame_interval):
    driver = AnimationDriver(env, frame_interval=frame_interval)
    driver.start(sim_config)
    env.run(until=1.005)
    assert driver.tick_count == config.TICKS_PER_SECOND
    assert driver.engine.day == config.TICKS_PER_SECOND


def test_buffer_window_and_redraw(env, sim_config):
    driver = AnimationDriver(env)
    driver.start(sim_config)
    env.run(until=4.05)

    assert driver.tick_count == 41
    assert len(driver.values) == config.DISPLAY_WINDOW
    assert driver.values == driver.day_log.inventory_series()[-config.DISPLAY_WINDOW:]
    assert driver.renderer.plotted_values() == [float(v) for v in driver.values]


def test_flat_scenario_through_driver(env):
    driver = AnimationDriver(env)
    driver.start(SimulationConfig.from_form(3, 3, 3, "0,20"))
    env.run(until=2.0)
    assert driver.values
    assert set(driver.values) == {200}


def test_stop_is_idempotent(env, sim_config):
    driver = AnimationDriver(env)
    driver.stop()
    assert not driver.running

    driver.start(sim_config)
    env.run(until=0.5)
    driver.stop()
    driver.stop()

    assert not driver.running
    assert driver.engine is None
    assert driver.values == []
    assert driver.day_log is None
    assert driver.tick_count == 0


def test_stop_cancels_frame_loop(env, sim_config):
    ticks = []
    driver = AnimationDriver(env, on_tick=lambda day, value: ticks.append(day))
    driver.start(sim_config)
    env.run(until=0.45)
    assert ticks == [0, 1, 2, 3, 4]

    driver.stop()
    env.run(until=2.0)
    assert ticks == [0, 1, 2, 3, 4]


def test_restart_begins_at_day_zero(env, sim_config):
    ticks = []
    driver = AnimationDriver(env, on_tick=lambda day, value: ticks.append(day))
    driver.start(sim_config)
    env.run(until=0.45)

    driver.start(sim_config)
    assert driver.engine.day == 0
    assert driver.values == []

    env.run(until=0.755)
    assert driver.engine.day == 3
    assert ticks == [0, 1, 2, 3, 4, 0, 1, 2]


def test_stop_from_tick_callback(env, sim_config):
    ticks = []

    def on_tick(day, value):
        ticks.append(day)
        if len(ticks) == 3:
            driver.stop()

    driver = AnimationDriver(env, on_tick=on_tick)
    driver.start(sim_config)
    env.run(until=2.0)

    assert ticks == [0, 1, 2]
    assert not driver.running


def test_start_rejects_missing_day_zero(env):
    driver = AnimationDriver(env)
    bad = SimulationConfig(demand_schedule=DemandSchedule(((5, 20),)))
    with pytest.raises(ConfigurationError):
        driver.start(bad)
    assert not driver.running
    assert driver.engine is None


def test_start_rejects_zero_response_delay(env):
    driver = AnimationDriver(env)
    with pytest.raises(ConfigurationError):
        driver.start(SimulationConfig(response_delay=0))
    assert driver.engine is None


def test_failed_start_keeps_current_run(env, sim_config):
    driver = AnimationDriver(env)
    driver.start(sim_config)
    env.run(until=0.25)
    day = driver.engine.day

    with pytest.raises(ConfigurationError):
        driver.start(SimulationConfig(response_delay=0))

    assert driver.running
    assert driver.engine.day == day
    env.run(until=0.55)
    assert driver.engine.day > day


def test_tick_requires_running_driver(env):
    driver = AnimationDriver(env)
    with pytest.raises(RuntimeError):
        driver.tick()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
