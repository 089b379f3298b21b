import io
import logging
import sys
from collections.abc import Callable, Iterator

import pytest

from dof.cli.main import run
from dof.core.config import LOG_LEVEL_ENV
from dof.core.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def run_cli() -> Callable[..., tuple[int, str, str]]:
    """Run the CLI driver in-process, returning (status, stdout, stderr)."""

    def _run(*args: str) -> tuple[int, str, str]:
        out = io.StringIO()
        err = io.StringIO()
        status = run(list(args), out, err)
        return status, out.getvalue(), err.getvalue()

    return _run


@pytest.fixture()
def python() -> str:
    return sys.executable
