"""CHIP-8 emulator state structures."""

from typing import Iterable, Union

import jax.numpy as jnp
import numpy as np
from flax.struct import PyTreeNode, field

from chip8core.constants import (
    MEMORY_SIZE, PROGRAM_START, FONT_START, FONT_DATA, SCREEN_WIDTH, SCREEN_HEIGHT,
    STACK_SIZE, NUM_REGISTERS, NUM_KEYS
)
from chip8core.errors import MemoryBoundsError, InvalidKeyError


class StackState(PyTreeNode):
    """Return-address stack for subroutine calls."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state.

    The display is row-major: ``display[y, x]`` is the pixel in row ``y``,
    column ``x``.
    """
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.asarray(PROGRAM_START, dtype=jnp.uint16))
    display: jnp.ndarray = field(
        default_factory=lambda: jnp.zeros((SCREEN_HEIGHT, SCREEN_WIDTH), dtype=jnp.bool_)
    )
    stack: StackState = field(default_factory=StackState)
    delay_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    sound_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    keypad: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_KEYS, dtype=jnp.bool_))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))

    @property
    def sound_active(self) -> bool:
        """Whether the host should be producing a tone right now."""
        return bool(self.sound_timer > 0)


def create_state() -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    state = EmulatorState()
    font = jnp.array(FONT_DATA, dtype=jnp.uint8)
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(font))


def reset(state: EmulatorState) -> EmulatorState:
    """Discard ``state`` and return a freshly constructed one."""
    del state
    return create_state()


def load_program(
    state: EmulatorState,
    program: Union[bytes, bytearray, Iterable[int]],
    address: int = PROGRAM_START,
) -> EmulatorState:
    """Copy raw program bytes into memory starting at ``address`` (0x200 by default).

    Addresses below 0x200 hold the font table and are reserved.
    """
    data = bytes(program)
    end = address + len(data)
    if address < PROGRAM_START:
        raise MemoryBoundsError(
            address,
            f"Cannot load a program at 0x{address:03X}: memory below 0x{PROGRAM_START:03X} is reserved",
        )
    if end > MEMORY_SIZE:
        raise MemoryBoundsError(
            address,
            f"Program of {len(data)} bytes at 0x{address:03X} does not fit in {MEMORY_SIZE} bytes of memory",
        )
    if not data:
        return state
    program_array = np.frombuffer(data, dtype=np.uint8)
    return state.replace(memory=state.memory.at[address:end].set(program_array))


def set_key(state: EmulatorState, key: int, pressed: bool) -> EmulatorState:
    """Set the pressed/released state of one keypad key."""
    if not 0 <= key < NUM_KEYS:
        raise InvalidKeyError(f"Key index must be in 0..{NUM_KEYS - 1}, got {key}")
    return state.replace(keypad=state.keypad.at[key].set(bool(pressed)))
