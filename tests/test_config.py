import logging

import pytest

from geoshapes.config import GeoshapesConfig, setup_logging
from geoshapes.distance import EARTH_RADIUS_METERS, haversine_distance
from geoshapes.errors import MalformedPosition
from geoshapes.position import Position, decode_position


def test_defaults():
    config = GeoshapesConfig()
    assert config.earth_radius == EARTH_RADIUS_METERS
    assert config.json_indent is None
    assert config.log_level == "WARNING"


def test_earth_radius_feeds_haversine():
    config = GeoshapesConfig(earth_radius=1.0)
    start = Position(longitude=0.0, latitude=0.0)
    end = Position(longitude=90.0, latitude=0.0)
    distance = haversine_distance(start, end, radius=config.earth_radius)
    assert distance.in_meters() == pytest.approx(1.5707963267948966)


def test_setup_logging_configures_root_logger():
    root_logger = logging.getLogger()
    saved_level = root_logger.level
    saved_handlers = list(root_logger.handlers)
    try:
        setup_logging(GeoshapesConfig(log_level="DEBUG"))
        assert root_logger.level == logging.DEBUG
        new_handlers = [h for h in root_logger.handlers if h not in saved_handlers]
        assert len(new_handlers) == 1
        assert new_handlers[0].level == logging.DEBUG
    finally:
        root_logger.handlers = saved_handlers
        root_logger.setLevel(saved_level)


def test_decode_failures_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="geoshapes"):
        with pytest.raises(MalformedPosition):
            decode_position([1.0, 2.0, 3.0, 4.0], path="$.coordinates")
    assert "Rejecting position of length 4 at $.coordinates" in caplog.text
