import logging
import pytest
import sys
from pathlib import Path

# Add the repository root to sys.path so the top-level packages import
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from database import Student, Bike


# Common test fixtures
@pytest.fixture
def jenny():
    return Student("Jenny", 3.8, 3, ["swimming", "dancing"], bike=Bike("BMX"))


@pytest.fixture
def mike():
    return Student("Mike", 3.2, 2, ["basketball"])


@pytest.fixture
def students(jenny, mike):
    """The two-student scenario used throughout the query tests."""
    return [jenny, mike]


@pytest.fixture(autouse=True)
def restore_root_logger():
    """cli.main reconfigures the root logger, put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
