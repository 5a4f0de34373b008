"""CHIP-8 CPU emulation core."""

from chip8core.state import EmulatorState, StackState, create_state, reset, load_program, set_key
from chip8core.emulator import execute, fetch, step, tick_timers, run_n_instructions, run_frame
from chip8core.decode import DecodedInstruction, decode, disassemble
from chip8core.errors import (
    Chip8Error, UnhandledInstructionError, BoundsError, MemoryBoundsError,
    StackOverflowError, StackUnderflowError, InvalidKeyError
)
from chip8core.logging import ConsoleLogger, EmulatorLogger
from chip8core.constants import *

__all__ = [
    "EmulatorState",
    "StackState",
    "create_state",
    "reset",
    "load_program",
    "set_key",
    "fetch",
    "execute",
    "step",
    "tick_timers",
    "run_n_instructions",
    "run_frame",
    "DecodedInstruction",
    "decode",
    "disassemble",
    "Chip8Error",
    "UnhandledInstructionError",
    "BoundsError",
    "MemoryBoundsError",
    "StackOverflowError",
    "StackUnderflowError",
    "InvalidKeyError",
    "ConsoleLogger",
    "EmulatorLogger",
    "MEMORY_SIZE",
    "PROGRAM_START",
    "FONT_START",
    "FONT_DATA",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "STACK_SIZE",
    "INSTRUCTIONS_PER_FRAME",
]
