import asyncio

import pytest

from induction_motor_slip import (
    MotorSimulator,
    SimulationSettings,
    RelaxationSettings,
    OperatingState,
    calculate_torque,
    sample_curve,
)
from induction_motor_slip.core import simulator as simulator_module
from induction_motor_slip.utils import HISTORY_LIMIT


FAST = 0.001


def fast_settings(**kwargs):
    return SimulationSettings(tick_interval=FAST, **kwargs)


def timer_tasks():
    """Periodic timer tasks alive in the running loop."""
    return [
        task for task in asyncio.all_tasks()
        if task is not asyncio.current_task() and not task.done()
    ]


# ================================================================
# SETTINGS
# ================================================================

@pytest.mark.parametrize("kwargs", [
    {'tick_interval': 0},
    {'frequency': -50},
    {'curve_step': 0},
    {'history_limit': 0},
])
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        SimulationSettings(**kwargs)


def test_default_settings():
    settings = SimulationSettings()
    assert settings.tick_interval == 0.1
    assert settings.frequency == 50
    assert settings.curve_step == 0.01
    assert settings.relaxation == RelaxationSettings()
    assert settings.history_limit == HISTORY_LIMIT
    assert settings.verbose is False


# ================================================================
# SYNCHRONOUS STEPPING
# ================================================================

def test_initial_simulator_state(params):
    sim = MotorSimulator(params)
    assert sim.state == OperatingState(slip=0.03, running=False)
    assert sim.slip == 0.03
    assert sim.running is False
    assert sim.tick_count == 0
    assert sim.history.count == 0
    assert sim.params is params


def test_default_motor_used_when_no_parameters():
    sim = MotorSimulator()
    assert sim.params.sync_speed == 1500


def test_advance_stopped_to_standstill(params):
    sim = MotorSimulator(params)
    sim.advance(97)
    assert sim.slip == 1.0
    assert sim.time == pytest.approx(9.7)
    sim.advance(5)
    assert sim.slip == 1.0
    assert sim.tick_count == 102


def test_advance_rejects_negative_count(params):
    with pytest.raises(ValueError):
        MotorSimulator(params).advance(-1)


def test_set_running_switches_direction(params):
    sim = MotorSimulator(params)
    sim.advance(50)
    slip = sim.slip
    sim.set_running(True)
    assert sim.slip == slip
    sim.tick()
    assert sim.slip < slip
    sim.advance(100)
    assert sim.slip == 0.03


def test_operating_point_follows_slip(params):
    sim = MotorSimulator(params)
    sim.advance(20)
    point = sim.operating_point
    assert point.slip == sim.slip
    assert point.torque == calculate_torque(sim.slip, params)
    assert point.speed == pytest.approx(1500 * (1 - sim.slip))


def test_custom_relaxation(params):
    settings = SimulationSettings(
        relaxation=RelaxationSettings(step_up=0.25, initial_slip=0.0)
    )
    sim = MotorSimulator(params, settings)
    sim.advance(3)
    assert sim.slip == 0.75


def test_reset(params):
    sim = MotorSimulator(params)
    sim.set_running(True)
    sim.advance(10)
    sim.reset()
    assert sim.slip == 0.03
    assert sim.running is False
    assert sim.tick_count == 0
    assert sim.history.count == 0


# ================================================================
# PARAMETERS AND CURVE CACHE
# ================================================================

def test_curve_is_cached(params):
    sim = MotorSimulator(params)
    curve = sim.curve
    sim.advance(10)
    assert sim.curve is curve
    assert curve == sample_curve(params)


def test_curve_recomputed_after_parameter_change(params, monkeypatch):
    calls = []
    original = simulator_module.sample_curve

    def counting_sample_curve(*args, **kwargs):
        calls.append(args)
        return original(*args, **kwargs)

    monkeypatch.setattr(simulator_module, "sample_curve", counting_sample_curve)

    sim = MotorSimulator(params)
    sim.curve
    sim.advance(30)
    sim.curve
    assert len(calls) == 1

    sim.update_params(Rr=1.2)
    assert sim.params.Rr == 1.2
    sim.curve
    sim.curve
    assert len(calls) == 2


def test_setting_equal_parameters_keeps_cache(params):
    sim = MotorSimulator(params)
    curve = sim.curve
    sim.set_params(params.replace())
    assert sim.curve is curve


def test_parameter_change_keeps_slip(params):
    sim = MotorSimulator(params)
    sim.advance(12)
    slip = sim.slip
    sim.update_params(poles=6)
    assert sim.slip == slip
    assert sim.readout.sync_speed == 1000


def test_peak_point(params):
    sim = MotorSimulator(params)
    assert sim.peak_point.slip == pytest.approx(0.2)


# ================================================================
# SUBSCRIBERS AND HISTORY
# ================================================================

def test_subscribers_receive_readout_each_tick(params):
    sim = MotorSimulator(params)
    received = []
    unsubscribe = sim.subscribe(received.append)

    sim.advance(3)
    assert [r.slip for r in received] == [0.04, 0.05, 0.06]
    assert all(r.running is False for r in received)

    unsubscribe()
    sim.tick()
    assert len(received) == 3
    unsubscribe()


def test_subscriber_errors_propagate(params):
    sim = MotorSimulator(params)

    def broken(readout):
        raise RuntimeError("display failed")

    sim.subscribe(broken)
    with pytest.raises(RuntimeError):
        sim.tick()


def test_history_records_ticks(params):
    sim = MotorSimulator(params)
    sim.advance(2)
    sim.set_running(True)
    sim.tick()

    samples = sim.history.samples
    assert [s.tick for s in samples] == [1, 2, 3]
    assert [s.slip for s in samples] == [0.04, 0.05, 0.04]
    assert [s.running for s in samples] == [False, False, True]
    assert samples[-1].time == pytest.approx(0.3)
    assert samples[-1].torque == calculate_torque(0.04, params)


def test_history_can_be_disabled(params):
    sim = MotorSimulator(params, SimulationSettings(record_history=False))
    sim.advance(5)
    assert sim.history.count == 0


def test_history_limit(params):
    sim = MotorSimulator(params, SimulationSettings(history_limit=10))
    sim.advance(25)
    assert sim.history.count == 10
    assert sim.history.samples[0].tick == 16


def test_history_bounded_by_default(params):
    sim = MotorSimulator(params)
    sim.advance(HISTORY_LIMIT + 50)
    assert sim.history.count == HISTORY_LIMIT
    assert sim.history.samples[0].tick == 51
    assert sim.history.current.tick == HISTORY_LIMIT + 50


def test_verbose_logging(params, capsys):
    sim = MotorSimulator(params, SimulationSettings(verbose=True))
    sim.set_running(True)
    sim.update_params(voltage=230)
    out = capsys.readouterr().out
    assert "Motor started at slip 0.030" in out
    assert "Parameters updated" in out


def test_quiet_by_default(params, capsys):
    sim = MotorSimulator(params)
    sim.set_running(True)
    sim.advance(3)
    assert capsys.readouterr().out == ""


# ================================================================
# PERIODIC TIMER
# ================================================================

def test_run_for_ticks_from_timer(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        await sim.run_for(5)
        assert not sim.is_ticking
        return sim

    sim = asyncio.run(scenario())
    assert sim.tick_count >= 5
    assert sim.slip == pytest.approx(0.03 + 0.01 * sim.tick_count)


def test_start_and_stop(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        await sim.start()
        assert sim.is_ticking
        assert len(timer_tasks()) == 1
        await sim.run_for(3)
        assert sim.is_ticking
        await sim.stop()
        assert not sim.is_ticking
        assert timer_tasks() == []
        count = sim.tick_count
        await asyncio.sleep(FAST * 5)
        assert sim.tick_count == count

    asyncio.run(scenario())


def test_restart_replaces_timer(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        await sim.start()
        await sim.start()
        await sim.start()
        assert len(timer_tasks()) == 1
        await sim.stop()
        assert timer_tasks() == []

    asyncio.run(scenario())


def test_toggle_restarts_single_timer(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        await sim.start()
        for running in [True, False, True, True, False]:
            await sim.toggle(running)
            assert sim.running is running
            assert len(timer_tasks()) == 1
        await sim.stop()
        assert timer_tasks() == []

    asyncio.run(scenario())


def test_toggle_without_timer_does_not_start_one(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        await sim.toggle(True)
        assert sim.running is True
        assert not sim.is_ticking
        assert sim.slip == 0.03

    asyncio.run(scenario())


def test_timer_relaxes_toward_floor_when_running(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        sim.advance(50)
        await sim.start()
        await sim.toggle(True)
        slip_at_toggle = sim.slip
        await sim.run_for(60)
        await sim.stop()
        return slip_at_toggle, sim

    slip_at_toggle, sim = asyncio.run(scenario())
    assert slip_at_toggle == 0.53
    assert sim.slip == 0.03
    running = [s.slip for s in sim.history.samples if s.running]
    assert running == sorted(running, reverse=True)


def test_run_for_raises_subscriber_error(params):
    def broken(readout):
        raise RuntimeError("display failed")

    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        sim.subscribe(broken)
        with pytest.raises(RuntimeError, match="display failed"):
            await asyncio.wait_for(sim.run_for(3), timeout=1.0)
        assert not sim.is_ticking
        assert timer_tasks() == []
        return sim

    sim = asyncio.run(scenario())
    assert sim.tick_count == 1


def test_stop_raises_error_that_ended_timer(params):
    def broken(readout):
        raise RuntimeError("display failed")

    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        sim.subscribe(broken)
        await sim.start()
        while sim.is_ticking:
            await asyncio.sleep(FAST)
        with pytest.raises(RuntimeError, match="display failed"):
            await sim.stop()
        await sim.stop()
        assert sim.tick_count == 1

    asyncio.run(scenario())


def test_run_for_fails_when_timer_stopped_externally(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        await sim.start()
        waiter = asyncio.create_task(sim.run_for(10_000))
        await asyncio.sleep(FAST * 3)
        await sim.stop()
        with pytest.raises(RuntimeError, match="Timer stopped"):
            await asyncio.wait_for(waiter, timeout=1.0)
        assert timer_tasks() == []

    asyncio.run(scenario())


def test_run_for_follows_timer_replaced_by_toggle(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        sim.advance(20)
        await sim.start()
        start_count = sim.tick_count
        waiter = asyncio.create_task(sim.run_for(50))
        await asyncio.sleep(FAST * 3)
        await sim.toggle(True)
        await asyncio.wait_for(waiter, timeout=2.0)
        assert sim.tick_count >= start_count + 50
        assert sim.is_ticking
        assert len(timer_tasks()) == 1
        await sim.stop()

    asyncio.run(scenario())


def test_cancelled_stop_caller_stays_cancelled(params):
    async def scenario():
        sim = MotorSimulator(params, fast_settings())
        await sim.start()
        caller = asyncio.create_task(sim.stop())
        await asyncio.sleep(0)
        caller.cancel()
        with pytest.raises(asyncio.CancelledError):
            await caller
        assert caller.cancelled()
        assert not sim.is_ticking
        assert timer_tasks() == []

    asyncio.run(scenario())
