"""Run a small hand-assembled CHIP-8 program with instruction tracing."""

from chip8core import create_state, load_program, run_frame, EmulatorLogger

PROGRAM = bytes([
    0x60, 0x05,  # LD V0, 0x05
    0x61, 0x03,  # LD V1, 0x03
    0x22, 0x0A,  # CALL 0x20A
    0x72, 0x01,  # ADD V2, 0x01
    0x12, 0x06,  # JP 0x206
    0x80, 0x11,  # OR V0, V1
    0x00, 0xEE,  # RET
])

if __name__ == "__main__":
    logger = EmulatorLogger(log_level="DEBUG")
    state = load_program(create_state(), PROGRAM)

    for _ in range(3):
        state, beep = run_frame(state, instructions_per_frame=4, logger=logger)

    logger.info(f"V0={int(state.V[0])} V1={int(state.V[1])} V2={int(state.V[2])}")
