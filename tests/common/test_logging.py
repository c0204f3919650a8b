import logging

from storageperms.common.logging import PACKAGE_LOGGER, get_logger


def test_default_logger_is_the_package_logger():
    assert get_logger().name == PACKAGE_LOGGER


def test_level_names_are_case_insensitive():
    log = get_logger("storageperms.tests.levels", level="debug")
    assert log.level == logging.DEBUG


def test_unknown_level_name_falls_back_to_info():
    log = get_logger("storageperms.tests.bogus", level="chatty")
    assert log.level == logging.INFO


def test_level_is_left_alone_when_not_given():
    log = logging.getLogger("storageperms.tests.untouched")
    log.setLevel(logging.WARNING)
    assert get_logger("storageperms.tests.untouched").level == logging.WARNING
