import logging

import pytest


@pytest.fixture(autouse=True)
def reset_wireframe_logger():
    """main() installs handlers bound to the current stdout; drop them."""
    yield
    logger = logging.getLogger("wireframe")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
