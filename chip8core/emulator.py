"""Main CHIP-8 emulator execution engine."""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.decode import decode
from chip8core.constants import MEMORY_SIZE, INSTRUCTIONS_PER_FRAME
from chip8core.errors import Chip8Error, MemoryBoundsError
from chip8core.logging import EmulatorLogger
from chip8core.instructions.system import execute_system_instruction, execute_unhandled
from chip8core.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register
)
from chip8core.instructions.alu import execute_alu_operation
from chip8core.instructions.memory import execute_set, execute_add


# Indexed by the first nibble of the opcode.
INSTRUCTION_TABLE = [
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_unhandled,
    execute_unhandled,
    execute_unhandled,
    execute_unhandled,
    execute_unhandled,
    execute_unhandled,
    execute_unhandled,
]


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction."""
    decoded_instruction = decode(instruction)
    return INSTRUCTION_TABLE[decoded_instruction.opcode](state, decoded_instruction)


def _pack_u16(high: jnp.uint8, low: jnp.uint8) -> jnp.uint16:
    """Pack two bytes into uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def fetch(state: EmulatorState) -> tuple[EmulatorState, jnp.uint16]:
    """Fetch next instruction from memory."""
    pc = int(state.pc)
    # JAX clamps out-of-range indices instead of failing, so check explicitly.
    if pc + 1 >= MEMORY_SIZE:
        raise MemoryBoundsError(pc, f"Cannot fetch instruction at 0x{pc:04X}: past end of memory")
    instruction = _pack_u16(state.memory[pc], state.memory[pc + 1])
    return state.replace(pc=state.pc + 2), instruction


def step(state: EmulatorState) -> EmulatorState:
    """Fetch and execute exactly one instruction."""
    state, instruction = fetch(state)
    return execute(state, int(instruction))


def tick_timers(state: EmulatorState) -> tuple[EmulatorState, bool]:
    """Count both timers down by one, stopping at zero.

    Returns the new state and whether the sound timer expired on this tick,
    which is the host's cue to stop (or emit) the beep.
    """
    beep = bool(state.sound_timer == 1)
    delay_timer = jnp.where(state.delay_timer > 0, state.delay_timer - 1, 0).astype(jnp.uint8)
    sound_timer = jnp.where(state.sound_timer > 0, state.sound_timer - 1, 0).astype(jnp.uint8)
    return state.replace(delay_timer=delay_timer, sound_timer=sound_timer), beep


def _traced_step(state: EmulatorState, logger: EmulatorLogger) -> EmulatorState:
    address = int(state.pc)
    try:
        next_state, instruction = fetch(state)
        next_state = execute(next_state, int(instruction))
    except Chip8Error as error:
        logger.log_fault(error, address)
        raise
    logger.log_instruction(address, int(instruction))
    return next_state


def run_n_instructions(
    state: EmulatorState,
    n: int,
    logger: Optional[EmulatorLogger] = None,
) -> EmulatorState:
    """Run ``n`` instructions, tracing each one when a logger is given."""
    for _ in range(n):
        state = step(state) if logger is None else _traced_step(state, logger)
    return state


def run_frame(
    state: EmulatorState,
    instructions_per_frame: int = INSTRUCTIONS_PER_FRAME,
    logger: Optional[EmulatorLogger] = None,
) -> tuple[EmulatorState, bool]:
    """Run one host frame: a batch of instructions followed by one timer tick.

    Pacing frames against the wall clock is left to the caller.
    """
    state = run_n_instructions(state, instructions_per_frame, logger)
    state, beep = tick_timers(state)
    if logger is not None:
        if beep:
            logger.log_beep()
        logger.log_frame(state.pc, state.delay_timer, state.sound_timer)
    return state, beep
