import matplotlib

matplotlib.use("Agg")

import pytest

from memalloc import MemoryManager


@pytest.fixture
def memory():
    """용량 10의 빈 주소 공간"""
    return MemoryManager(10)


@pytest.fixture
def fragmented(memory):
    """[0,4) 비어 있음, [4,7) P2 점유, [7,10) 비어 있음"""
    memory.allocate("first_fit", "P1", 4)
    memory.allocate("first_fit", "P2", 3)
    memory.release("P1")
    return memory
