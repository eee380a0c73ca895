import io
import logging

import numpy as np

from snapcore.display import ConsoleDisplay, format_cell


def test_format_cell_picks_notation():
    assert format_cell(1.5, 8) == "  1.5000"
    assert format_cell(1e-6, 10) == "  1.00e-06"
    assert format_cell(0.0, 6) == "0.0000"
    assert format_cell(np.float64(2.0e6), 9) == " 2.00e+06"
    assert format_cell(7, 3) == "  7"
    assert format_cell(np.bool_(True), 5) == " True"
    assert format_cell("x", 3) == "  x"


def test_rows_follow_columns():
    buf = io.StringIO()
    d = ConsoleDisplay("Test", stream=buf)
    d.setup_stats_columns(["A", "B"], [4, 8])
    d.log_stats(1, 0.25)
    lines = buf.getvalue().splitlines()
    assert lines[1] == "   A         B"
    assert lines[-1] == "   1    0.2500"


def test_row_arity_mismatch_is_logged(caplog):
    buf = io.StringIO()
    d = ConsoleDisplay("Test", stream=buf)
    d.setup_stats_columns(["A", "B"])
    with caplog.at_level(logging.WARNING, logger="snapcore.display"):
        d.log_stats(1)
    assert "expected 2 values" in caplog.text
    assert buf.getvalue().count("\n") == 3


def test_error_is_printed_once(caplog):
    buf = io.StringIO()
    with caplog.at_level(logging.DEBUG, logger="snapcore.display"):
        ConsoleDisplay("Test", stream=buf).error("solver blew up")
    assert buf.getvalue().count("CRITICAL ERROR: solver blew up") == 1
    assert caplog.records == []
