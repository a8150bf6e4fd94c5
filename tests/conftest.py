import logging

import pytest

from byteslice import logging_config


@pytest.fixture(autouse=True)
def _reset_logging():
    # The CLI turns propagation off, which would hide records from caplog
    yield
    logger = logging.getLogger(logging_config.ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    for name in ("byteslice.cli", "byteslice.copier", "byteslice.range", "byteslice.streams"):
        logging.getLogger(name).setLevel(logging.NOTSET)
    logging_config._CONFIGURED = False
