"""Tests for delay and sound timers."""

import jax.numpy as jnp
from chip8core import tick_timers


def with_timers(state, delay, sound):
    return state.replace(
        delay_timer=jnp.asarray(delay, dtype=jnp.uint8),
        sound_timer=jnp.asarray(sound, dtype=jnp.uint8),
    )


def test_tick_decrements_both(fresh_state):
    state, beep = tick_timers(with_timers(fresh_state, 5, 7))
    assert state.delay_timer == 4
    assert state.sound_timer == 6
    assert not beep


def test_tick_at_zero_stays_zero(fresh_state):
    state, beep = tick_timers(fresh_state)
    assert state.delay_timer == 0
    assert state.sound_timer == 0
    assert not beep

    state, beep = tick_timers(state)
    assert state.delay_timer == 0
    assert state.sound_timer == 0
    assert not beep


def test_timers_are_independent(fresh_state):
    state, _ = tick_timers(with_timers(fresh_state, 0, 2))
    assert state.delay_timer == 0
    assert state.sound_timer == 1


def test_beep_when_sound_timer_expires(fresh_state):
    state, beep = tick_timers(with_timers(fresh_state, 0, 1))
    assert beep
    assert state.sound_timer == 0
    assert not state.sound_active


def test_beep_fires_exactly_once(fresh_state):
    state = with_timers(fresh_state, 3, 3)
    beeps = []
    for _ in range(6):
        state, beep = tick_timers(state)
        beeps.append(beep)
    assert beeps == [False, False, True, False, False, False]
    assert state.delay_timer == 0


def test_tick_from_max_value(fresh_state):
    state, _ = tick_timers(with_timers(fresh_state, 255, 255))
    assert state.delay_timer == 254
    assert state.sound_timer == 254
    assert state.delay_timer.dtype == jnp.uint8


def test_tick_leaves_cpu_untouched(fresh_state):
    state, _ = tick_timers(with_timers(fresh_state, 1, 1))
    assert state.pc == fresh_state.pc
    assert jnp.array_equal(state.V, fresh_state.V)
