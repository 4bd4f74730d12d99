import numpy as np
import pytest

from expression_graph import IdGenerator
from expression_graph.logging_system import LogLevel, configure_logging


@pytest.fixture
def generator():
    """Independent identifier counter so tests never share id state"""
    return IdGenerator()


@pytest.fixture
def samples():
    rng = np.random.default_rng(42)
    return rng.uniform(-1, 1, (100, 3))


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(LogLevel.MINIMAL)
    yield
