"""
기본 클래스 모듈
- Region: 프로세스가 점유한 연속 메모리 영역
- AllocationResult: 할당 시도 결과
- PlacementStrategy: 배치 전략 베이스 클래스
- MemoryManager: 주소 공간과 영역 목록을 관리하는 엔진
"""

from __future__ import annotations
from abc import ABC, abstractmethod

INSUFFICIENT_SPACE = 'insufficient_space'
INVALID_REQUEST = 'invalid_request'
EMPTY_OWNER_MARK = '?'


class Region:
    """프로세스가 점유한 연속 영역 [start, end)"""
    def __init__(self, owner, start, length):
        self.owner = owner
        self.start = start
        self.length = length

    @property
    def end(self):
        return self.start + self.length

    def __repr__(self):
        return f"Region({self.owner!r}, start={self.start}, length={self.length})"


class AllocationResult:
    """할당 결과 (실패 시 position은 None)"""
    def __init__(self, success: bool, position: int | None = None,
                 reason: str | None = None, strategy: str = '') -> None:
        self.success: bool = success
        self.position: int | None = position
        self.reason: str | None = reason
        self.strategy: str = strategy

    def __bool__(self):
        return self.success

    def __repr__(self):
        if self.success:
            return f"AllocationResult({self.strategy}, position={self.position})"
        return f"AllocationResult({self.strategy}, failed={self.reason})"


class PlacementStrategy(ABC):
    """배치 전략 베이스 클래스"""

    name: str = ''
    label: str = ''
    needs_cursor: bool = False

    @abstractmethod
    def find_position(self, memory: MemoryManager, length: int, cursor: int | None = None) -> int | None:
        """새 영역을 놓을 시작 위치 탐색

        Args:
            memory: 현재 주소 공간 상태 (읽기 전용으로 사용)
            length: 요청 크기 (1 <= length <= total_size 보장됨)
            cursor: 순환 탐색 시작 위치 (circular fit에서만 사용)

        Returns:
            시작 위치, 빈 공간이 없으면 None
        """
        pass

    def candidates(self, memory: MemoryManager, length: int):
        """0부터 오름차순으로 비어 있는 시작 위치 나열"""
        for start in range(memory.total_size - length + 1):
            if not memory.overlaps(start, length):
                yield start


class MemoryManager:
    """고정 크기 선형 주소 공간 위의 연속 할당 엔진

    영역 목록은 이 객체만 변경한다. 순환 커서와 정책 선택은 호출자가 보관하고
    매 호출마다 명시적으로 넘긴다.
    """

    def __init__(self, total_size: int) -> None:
        if isinstance(total_size, bool) or not isinstance(total_size, int) or total_size <= 0:
            raise ValueError(f"메모리 크기는 양의 정수여야 합니다: {total_size!r}")
        self.total_size: int = total_size
        self._regions: list[Region] = []

    @property
    def regions(self) -> tuple[Region, ...]:
        """시작 위치 순으로 정렬된 영역 목록"""
        return tuple(sorted(self._regions, key=lambda r: r.start))

    def regions_of(self, owner) -> list[Region]:
        return [r for r in self.regions if r.owner == owner]

    def overlaps(self, start: int, length: int) -> bool:
        """[start, start+length) 구간이 기존 영역과 겹치는지 확인"""
        end = start + length
        for region in self._regions:
            if region.start < end and start < region.end:
                return True
        return False

    def is_free(self, start: int, length: int) -> bool:
        """구간이 주소 공간 안에 있고 어떤 영역과도 겹치지 않는지 확인"""
        if start < 0 or start + length > self.total_size:
            return False
        return not self.overlaps(start, length)

    def waste_after(self, start: int, length: int) -> int:
        """후보 구간 바로 뒤에 남는 빈 공간 크기

        구간 끝 이후에서 가장 가까운 영역의 시작(없으면 total_size)까지의 거리.
        다른 위치의 빈 공간은 고려하지 않는다.
        """
        end = start + length
        next_occupied = self.total_size
        for region in self._regions:
            if end <= region.start < next_occupied:
                next_occupied = region.start
        return next_occupied - end

    def allocate(self, policy, owner, length: int, cursor: int | None = None) -> AllocationResult:
        """정책에 따라 새 영역 배치

        Args:
            policy: 전략 이름 ('first_fit', 'best_fit', 'worst_fit', 'circular_fit')
                또는 PlacementStrategy 인스턴스
            owner: 프로세스 식별자
            length: 요청 크기
            cursor: circular fit 탐색 시작 위치 (circular fit에서 필수)

        Returns:
            AllocationResult. 실패 시 상태는 변경되지 않는다.
        """
        strategy = policy
        if not isinstance(policy, PlacementStrategy):
            from .strategies import get_strategy
            strategy = get_strategy(policy)

        if strategy.needs_cursor:
            if cursor is None:
                raise ValueError(f"{strategy.name}: cursor가 필요합니다")
            cursor = cursor % self.total_size

        # 범위 밖 요청은 탐색 없이 거절
        if length <= 0 or length > self.total_size:
            return AllocationResult(False, reason=INVALID_REQUEST, strategy=strategy.name)

        position = strategy.find_position(self, length, cursor)
        if position is None:
            return AllocationResult(False, reason=INSUFFICIENT_SPACE, strategy=strategy.name)

        self._regions.append(Region(owner, position, length))
        return AllocationResult(True, position=position, strategy=strategy.name)

    def release(self, owner) -> int:
        """owner가 가진 모든 영역 해제

        Returns:
            해제된 영역 수 (없으면 0, 오류 아님)
        """
        before = len(self._regions)
        self._regions = [r for r in self._regions if r.owner != owner]
        return before - len(self._regions)

    def region_at(self, position: int) -> Region | None:
        """position을 덮는 영역, 비어 있으면 None"""
        for region in self._regions:
            if region.start <= position < region.end:
                return region
        return None

    def render(self) -> str:
        """주소 단위마다 [X] 한 칸씩 이어 붙인 스냅샷

        X는 str(owner)의 첫 글자 (빈 문자열 owner는 '?'), 빈 칸은 공백.
        """
        cells = []
        for position in range(self.total_size):
            region = self.region_at(position)
            if region is None:
                mark = ' '
            else:
                mark = str(region.owner)[:1] or EMPTY_OWNER_MARK
            cells.append(f"[{mark}]")
        return ''.join(cells)

    def free_blocks(self) -> list[tuple[int, int]]:
        """(start, length) 형식의 연속 빈 구간 목록 (오름차순)"""
        blocks = []
        cursor = 0
        for region in self.regions:
            if region.start > cursor:
                blocks.append((cursor, region.start - cursor))
            cursor = max(cursor, region.end)
        if cursor < self.total_size:
            blocks.append((cursor, self.total_size - cursor))
        return blocks

    def used_space(self) -> int:
        return sum(r.length for r in self._regions)

    def free_space(self) -> int:
        return self.total_size - self.used_space()

    def largest_free_block(self) -> int:
        return max((length for _, length in self.free_blocks()), default=0)

    def external_fragmentation(self) -> float:
        """1 - (최대 빈 구간 / 전체 빈 공간), 빈 공간이 없으면 0.0"""
        free = self.free_space()
        if free == 0:
            return 0.0
        return 1 - self.largest_free_block() / free


def next_cursor(cursor: int, length: int, success: bool, total_size: int) -> int:
    """circular fit 호출 후 다음 커서 계산

    실패하면 0으로 되돌린 뒤, 성공 여부와 관계없이 요청 크기만큼 전진한다.
    실패한 할당도 다음 탐색 시작점을 바꾼다.
    """
    if not success:
        cursor = 0
    return (cursor + length) % total_size
