"""First-Fit 배치 전략"""

from ..memory import PlacementStrategy


class FirstFitStrategy(PlacementStrategy):
    """전략 1: 0부터 오름차순으로 처음 만나는 빈 위치"""

    name = 'first_fit'
    label = 'First-Fit'

    def find_position(self, memory, length, cursor=None):
        return next(self.candidates(memory, length), None)
