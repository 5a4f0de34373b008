"""CHIP-8 ALU operations (8xxx)."""

from chip8core.state import EmulatorState
from chip8core.decode import DecodedInstruction
from chip8core.instructions.system import execute_unhandled


def alu_set(vx: int, vy: int) -> int:
    """8XY0 - Set: VX = VY."""
    return vy


def alu_or(vx: int, vy: int) -> int:
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy


def alu_and(vx: int, vy: int) -> int:
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy


def alu_xor(vx: int, vy: int) -> int:
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy


ALU_OPERATIONS = {
    0x0: alu_set,
    0x1: alu_or,
    0x2: alu_and,
    0x3: alu_xor,
}


def execute_alu_operation(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """8XYN - ALU operations dispatcher."""
    operation = ALU_OPERATIONS.get(instruction.n)
    if operation is None:
        return execute_unhandled(state, instruction)

    vx = int(state.V[instruction.x])
    vy = int(state.V[instruction.y])
    return state.replace(V=state.V.at[instruction.x].set(operation(vx, vy)))
