"""Tests for console logging and traced runs."""

import pytest
import jax.numpy as jnp
from chip8core import (
    ConsoleLogger, EmulatorLogger, run_n_instructions, run_frame, UnhandledInstructionError,
)
from conftest import program_state


def quiet_logger(**kwargs):
    return EmulatorLogger(use_colors=False, show_timestamps=False, **kwargs)


def test_level_filtering(capsys):
    logger = ConsoleLogger(name="Test", log_level="WARNING", use_colors=False, show_timestamps=False)

    logger.info("hidden")
    logger.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[ WARNING][Test] shown" in out


def test_trace_each_instruction(capsys):
    logger = quiet_logger(log_level="DEBUG")
    state = program_state([0x60, 0x05, 0x61, 0x03, 0x80, 0x11])

    run_n_instructions(state, 3, logger=logger)

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith("0x200: 6005  LD V0, 0x05")
    assert lines[2].endswith("0x204: 8011  OR V0, V1")
    assert logger.instruction_count == 3


def test_trace_hidden_at_info(capsys):
    logger = quiet_logger()
    run_n_instructions(program_state([0x60, 0x05]), 1, logger=logger)
    assert capsys.readouterr().out == ""


def test_fault_is_logged_and_raised(capsys):
    logger = quiet_logger()
    state = program_state([0x60, 0x05, 0xF0, 0x0A])

    with pytest.raises(UnhandledInstructionError):
        run_n_instructions(state, 2, logger=logger)

    out = capsys.readouterr().out
    assert "UnhandledInstructionError at 0x202" in out
    assert "0xF00A" in out
    assert logger.instruction_count == 1


def test_frame_reports_beep(capsys):
    logger = quiet_logger(log_level="DEBUG")
    state = program_state([0x12, 0x00]).replace(sound_timer=jnp.asarray(1, dtype=jnp.uint8))

    _, beep = run_frame(state, instructions_per_frame=1, logger=logger)

    out = capsys.readouterr().out
    assert beep
    assert "beep" in out
    assert "Frame     1 | PC: 0x200" in out
    assert logger.frame_count == 1


def test_unknown_level_defaults_to_info(capsys):
    logger = ConsoleLogger(log_level="verbose", use_colors=False, show_timestamps=False)

    logger.debug("hidden")
    logger.info("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[    INFO][CHIP-8] shown" in out
