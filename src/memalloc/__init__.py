"""memalloc - 연속 메모리 할당 시뮬레이터

First-Fit / Best-Fit / Worst-Fit / Circular-Fit 배치 정책 시뮬레이션
"""

from .memory import MemoryManager, Region, AllocationResult, next_cursor
from .strategies import STRATEGIES, get_strategy

__all__ = ['MemoryManager', 'Region', 'AllocationResult', 'next_cursor', 'STRATEGIES', 'get_strategy']
