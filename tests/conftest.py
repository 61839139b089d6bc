"""
Shared fixtures for the registry tests.
"""
import logging

import pytest

from course_registry.registry import CourseManagementSystem
from course_registry.seed import load_demo_data


@pytest.fixture
def system():
    registry = CourseManagementSystem()
    yield registry
    registry.clear()


@pytest.fixture
def seeded_system(system):
    load_demo_data(system)
    return system


@pytest.fixture(autouse=True)
def reset_registry_logger():
    yield
    logger = logging.getLogger("CourseRegistry")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
