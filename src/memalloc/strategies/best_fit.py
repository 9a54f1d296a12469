"""Best-Fit 배치 전략"""

from ..memory import PlacementStrategy


class BestFitStrategy(PlacementStrategy):
    """전략 2: 배치 후 뒤에 남는 빈 공간(waste)이 가장 작은 위치"""

    name = 'best_fit'
    label = 'Best-Fit'

    def find_position(self, memory, length, cursor=None):
        best_start = None
        min_waste = None

        for start in self.candidates(memory, length):
            waste = memory.waste_after(start, length)
            # 엄격한 < 비교: 동률이면 먼저 찾은(낮은) 위치 유지
            if min_waste is None or waste < min_waste:
                min_waste = waste
                best_start = start

        return best_start
