"""Test configuration and fixtures for CHIP-8 emulator tests."""

import pytest
import jax.numpy as jnp
from chip8core import create_state, load_program


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


def with_registers(state, **registers):
    """Helper to set V registers by name, e.g. ``with_registers(state, V1=0x42)``."""
    V = state.V
    for name, value in registers.items():
        V = V.at[int(name[1:], 16)].set(value)
    return state.replace(V=V)


def program_state(program, address=0x200):
    """Helper to build a fresh state with a program loaded."""
    return load_program(create_state(), bytes(program), address)


def lit_display(state):
    """Helper to turn every pixel on."""
    return state.replace(display=jnp.ones_like(state.display))
