"""Worst-Fit 배치 전략"""

from ..memory import PlacementStrategy


class WorstFitStrategy(PlacementStrategy):
    """전략 3: 배치 후 뒤에 남는 빈 공간(waste)이 가장 큰 위치"""

    name = 'worst_fit'
    label = 'Worst-Fit'

    def find_position(self, memory, length, cursor=None):
        worst_start = None
        max_waste = -1

        for start in self.candidates(memory, length):
            waste = memory.waste_after(start, length)
            # 엄격한 > 비교: 동률이면 먼저 찾은 위치 유지
            if waste > max_waste:
                max_waste = waste
                worst_start = start

        return worst_start
