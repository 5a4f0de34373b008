"""CHIP-8 instruction decoding."""

from chex import dataclass

from chip8core.errors import UnhandledInstructionError


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    raw: int
    opcode: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    nn: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


def decode(instruction: int) -> DecodedInstruction:
    """Decode 16-bit instruction into components."""
    instruction = int(instruction)
    if not 0 <= instruction <= 0xFFFF:
        raise UnhandledInstructionError(instruction)
    return DecodedInstruction(
        raw=instruction,
        opcode=(instruction & 0xF000) >> 12,
        x=(instruction & 0x0F00) >> 8,
        y=(instruction & 0x00F0) >> 4,
        n=instruction & 0x000F,
        nn=instruction & 0x00FF,
        nnn=instruction & 0x0FFF
    )


_ALU_MNEMONICS = {0x0: "LD", 0x1: "OR", 0x2: "AND", 0x3: "XOR"}


def disassemble(instruction: int) -> str:
    """Return the assembly mnemonic for an instruction, or ``"???"`` if unsupported."""
    if not 0 <= int(instruction) <= 0xFFFF:
        return "???"
    inst = decode(instruction)

    if inst.raw == 0x0000:
        return "NOP"
    if inst.raw == 0x00E0:
        return "CLS"
    if inst.raw == 0x00EE:
        return "RET"
    if inst.opcode == 0x1:
        return f"JP 0x{inst.nnn:03X}"
    if inst.opcode == 0x2:
        return f"CALL 0x{inst.nnn:03X}"
    if inst.opcode == 0x3:
        return f"SE V{inst.x:X}, 0x{inst.nn:02X}"
    if inst.opcode == 0x4:
        return f"SNE V{inst.x:X}, 0x{inst.nn:02X}"
    if inst.opcode == 0x5 and inst.n == 0:
        return f"SE V{inst.x:X}, V{inst.y:X}"
    if inst.opcode == 0x6:
        return f"LD V{inst.x:X}, 0x{inst.nn:02X}"
    if inst.opcode == 0x7:
        return f"ADD V{inst.x:X}, 0x{inst.nn:02X}"
    if inst.opcode == 0x8 and inst.n in _ALU_MNEMONICS:
        return f"{_ALU_MNEMONICS[inst.n]} V{inst.x:X}, V{inst.y:X}"
    return "???"
