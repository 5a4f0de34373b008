"""Console logging utilities for tracing emulator runs.

The core operations never log. Host helpers such as
:func:`chip8core.emulator.run_n_instructions` accept an optional
:class:`EmulatorLogger` and report executed instructions, audio cues and
faults through it.
"""

import time
import sys
from typing import Optional

from chip8core.decode import disassemble

LEVELS = {"DEBUG": 0, "INFO": 1, "WARNING": 2, "ERROR": 3}

COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
}
RESET_COLOR = "\033[0m"


class ConsoleLogger:
    """Print-based logger with a level threshold.

    Colors are only used when stdout is a terminal.
    """

    def __init__(
        self,
        name: str = "CHIP-8",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
    ):
        self.name = name
        self.threshold = LEVELS.get(log_level.upper(), LEVELS["INFO"])
        self.use_colors = use_colors and sys.stdout.isatty()
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def log(self, level: str, message: str):
        """Print ``message`` if ``level`` is at or above the threshold."""
        if LEVELS[level] < self.threshold:
            return

        level_str = f"[{level:>8s}]"
        if self.use_colors:
            level_str = f"{COLORS[level]}{level_str}{RESET_COLOR}"
        timestamp = f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""

        print(f"{timestamp}{level_str}[{self.name}] {message}", flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)


class EmulatorLogger(ConsoleLogger):
    """Logger for instruction traces and emulator events."""

    def __init__(self, name: str = "CHIP-8", **kwargs):
        super().__init__(name, **kwargs)
        self.instruction_count = 0
        self.frame_count = 0

    def log_instruction(self, address: int, opcode: int):
        """Trace one executed instruction at DEBUG level."""
        self.instruction_count += 1
        self.debug(f"0x{int(address):03X}: {int(opcode):04X}  {disassemble(opcode)}")

    def log_fault(self, error: Exception, address: Optional[int] = None):
        """Report a fault that is about to abort the run."""
        where = f" at 0x{int(address):03X}" if address is not None else ""
        self.error(f"{type(error).__name__}{where}: {error}")

    def log_beep(self):
        """Report the audio cue emitted as the sound timer expires."""
        self.info("Sound timer expired (beep)")

    def log_frame(self, pc: int, delay_timer: int, sound_timer: int):
        """Summarize the machine at the end of a host frame."""
        self.frame_count += 1
        self.debug(
            f"Frame {self.frame_count:5d} | PC: 0x{int(pc):03X} | "
            f"DT: {int(delay_timer):3d} | ST: {int(sound_timer):3d} | "
            f"executed: {self.instruction_count}"
        )
