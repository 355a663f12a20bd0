import io
import json
import logging

import pytest

from flightfinder.config import ObservabilityConfig
from flightfinder.domain.errors import ConfigurationError
from flightfinder.logging_config import PACKAGE_LOGGER, configure_logging


@pytest.fixture
def stream():
    buffer = io.StringIO()
    yield buffer
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_plain_format(stream):
    configure_logging(
        ObservabilityConfig(level="DEBUG", format="%(levelname)s|%(message)s"),
        handler=logging.StreamHandler(stream),
    )

    logging.getLogger("flightfinder.graph").debug("hello")

    assert stream.getvalue().strip() == "DEBUG|hello"


def test_structured_includes_extra_fields(stream):
    configure_logging(
        ObservabilityConfig(structured=True), handler=logging.StreamHandler(stream)
    )

    logging.getLogger("flightfinder.services").info(
        "Route found", extra={"origin": "NYC", "total_price": 200.0}
    )

    record = json.loads(stream.getvalue())
    assert record["message"] == "Route found"
    assert record["level"] == "INFO"
    assert record["origin"] == "NYC"
    assert record["total_price"] == 200.0


def test_reconfigure_replaces_handler(stream):
    first = logging.StreamHandler(io.StringIO())
    second = logging.StreamHandler(stream)

    configure_logging(ObservabilityConfig(), handler=first)
    logger = configure_logging(ObservabilityConfig(), handler=second)

    assert first not in logger.handlers
    assert second in logger.handlers


def test_level_filters_records(stream):
    configure_logging(ObservabilityConfig(level="warning"), handler=logging.StreamHandler(stream))

    logging.getLogger("flightfinder.adapters").info("quiet")

    assert stream.getvalue() == ""


def test_unknown_level_raises(stream):
    with pytest.raises(ConfigurationError) as exc_info:
        configure_logging(ObservabilityConfig(level="LOUD"))

    assert exc_info.value.setting_name == "FF_LOG_LEVEL"
