"""Tests for runtime configuration and structured logging."""

import io
import logging

import pytest

from dof.core.config import LOG_LEVEL_ENV, load_runtime_config
from dof.core.errors import ConfigError
from dof.core.logging import get_logger, setup_logging
from dof.core.units import m_to_mm, mm_to_m


def test_default_level() -> None:
    assert load_runtime_config({}).log_level == logging.WARNING


def test_level_from_env() -> None:
    assert load_runtime_config({LOG_LEVEL_ENV: "info"}).log_level == logging.INFO


def test_invalid_level() -> None:
    with pytest.raises(ConfigError):
        load_runtime_config({LOG_LEVEL_ENV: "loud"})


def test_structured_data_rendered() -> None:
    stream = io.StringIO()
    setup_logging(logging.DEBUG, stream)
    get_logger("dof.test").debug("lookup", {"name": "m43", "found": True})
    assert stream.getvalue().strip() == "DEBUG dof.test: lookup name=m43 found=True"


def test_bound_context_precedes_data() -> None:
    stream = io.StringIO()
    setup_logging(logging.DEBUG, stream)
    log = get_logger("dof.test").bind(format="m43")
    log.debug("computed", {"dof_mm": 1.5})
    log.debug("plain")
    lines = stream.getvalue().splitlines()
    assert lines == [
        "DEBUG dof.test: computed format=m43 dof_mm=1.5",
        "DEBUG dof.test: plain format=m43",
    ]


def test_below_level_suppressed() -> None:
    stream = io.StringIO()
    setup_logging(logging.WARNING, stream)
    get_logger("dof.test").debug("hidden", {"x": 1})
    assert stream.getvalue() == ""


def test_units() -> None:
    assert m_to_mm(5) == 5000.0
    assert mm_to_m(1500.0) == 1.5
