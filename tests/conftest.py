import pytest

import cyclecheck  # registers detectors and tasks
from cyclecheck.registry import DETECTORS


@pytest.fixture(params=DETECTORS.names())
def detect(request):
    return DETECTORS.get(request.param)


TREE = [(0, 1), (0, 2), (0, 3), (1, 4), (1, 5), (4, 8), (4, 9), (3, 6), (3, 7), (6, 10), (6, 11)]


@pytest.fixture
def tree_edges():
    return list(TREE)
