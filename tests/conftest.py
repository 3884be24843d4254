"""
Shared test fixtures.

Every test starts from default configuration and an unconfigured
"banco" logger, so CLI runs that install handlers do not leak into
later tests.
"""

import logging

import pytest

from banco_ledger import config as config_module


@pytest.fixture(autouse=True)
def reset_logging_and_config(monkeypatch):
    monkeypatch.setattr(config_module, "config", config_module.BancoConfig())
    yield
    logger = logging.getLogger("banco")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
