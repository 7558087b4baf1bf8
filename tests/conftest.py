import logging

import colorlog
import pytest

from ircline.logging_config import error_aggregator


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop the stderr handler LoggerConfigurator installs during CLI tests.

    It is bound to the capture stream of the running test and would write
    into a closed stream later on.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, colorlog.ColoredFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    error_aggregator.reset()
