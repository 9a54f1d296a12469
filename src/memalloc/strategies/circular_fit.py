"""
Circular-Fit (Next-Fit) 배치 전략
- 호출자가 넘긴 커서 위치부터 끝까지 탐색
- 없으면 0부터 커서 직전까지 되돌아 탐색
"""

from ..memory import PlacementStrategy


class CircularFitStrategy(PlacementStrategy):
    """전략 4: 회전하는 시작점에서의 first fit

    커서는 엔진이 아닌 호출자가 소유한다 (memory.next_cursor 참고).
    """

    name = 'circular_fit'
    label = 'Circular-Fit'
    needs_cursor = True

    def find_position(self, memory, length, cursor=None):
        cursor = cursor or 0
        last_start = memory.total_size - length

        # 1단계: cursor .. 끝
        for start in range(cursor, last_start + 1):
            if not memory.overlaps(start, length):
                return start

        # 2단계: 0 .. cursor-1
        for start in range(min(cursor, last_start + 1)):
            if not memory.overlaps(start, length):
                return start

        return None
