"""배치 전략 모듈"""
from .first_fit import FirstFitStrategy
from .best_fit import BestFitStrategy
from .worst_fit import WorstFitStrategy
from .circular_fit import CircularFitStrategy

STRATEGIES = {
    strategy.name: strategy
    for strategy in (FirstFitStrategy, BestFitStrategy, WorstFitStrategy, CircularFitStrategy)
}


def get_strategy(name):
    """이름으로 전략 인스턴스 생성"""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"알 수 없는 전략: {name!r} (가능: {', '.join(STRATEGIES)})") from None


__all__ = [
    'FirstFitStrategy',
    'BestFitStrategy',
    'WorstFitStrategy',
    'CircularFitStrategy',
    'STRATEGIES',
    'get_strategy',
]
