"""CHIP-8 fault types."""


class Chip8Error(Exception):
    """Base exception for all emulator faults."""
    pass


class UnhandledInstructionError(Chip8Error):
    """Raised when an opcode matches none of the supported instruction patterns."""

    def __init__(self, opcode: int):
        self.opcode = int(opcode)
        super().__init__(f"Unhandled opcode: 0x{self.opcode:04X}")


class BoundsError(Chip8Error, IndexError):
    """Base class for memory and stack bounds faults."""
    pass


class MemoryBoundsError(BoundsError):
    """Raised when an access falls outside of addressable memory."""

    def __init__(self, address: int, message: str = None):
        self.address = int(address)
        super().__init__(message or f"Memory access out of bounds at 0x{self.address:04X}")


class StackOverflowError(BoundsError):
    """Raised when pushing onto a full return-address stack."""
    pass


class StackUnderflowError(BoundsError):
    """Raised when popping from an empty return-address stack."""
    pass


class InvalidKeyError(Chip8Error, ValueError):
    """Raised when the host addresses a key outside of the keypad."""
    pass
