"""
MemoryManager 엔진 테스트

겹침/낭비 계산, 할당 실패 처리, 해제, 스냅샷 렌더링, 파생 조회.
"""

import random

import pytest

from memalloc import MemoryManager, Region, STRATEGIES
from memalloc.memory import INSUFFICIENT_SPACE, INVALID_REQUEST


def assert_invariants(memory):
    regions = memory.regions
    for region in regions:
        assert region.start >= 0
        assert region.length > 0
        assert region.end <= memory.total_size
    for a, b in zip(regions, regions[1:]):
        assert a.end <= b.start
    free = sum(length for _, length in memory.free_blocks())
    assert memory.used_space() + free == memory.total_size
    assert memory.free_space() == free


class TestConstruction:

    def test_empty_state(self, memory):
        assert memory.total_size == 10
        assert memory.regions == ()
        assert memory.free_blocks() == [(0, 10)]

    @pytest.mark.parametrize("size", [0, -3, 2.5, "10", True])
    def test_rejects_bad_total_size(self, size):
        with pytest.raises(ValueError):
            MemoryManager(size)


class TestPrimitives:

    def test_region_end_is_exclusive(self):
        region = Region("P1", 3, 4)
        assert region.end == 7

    def test_overlaps_half_open(self, fragmented):
        # P2 = [4,7)
        assert not fragmented.overlaps(0, 4)
        assert fragmented.overlaps(0, 5)
        assert fragmented.overlaps(6, 1)
        assert not fragmented.overlaps(7, 3)

    def test_is_free_checks_bounds(self, fragmented):
        assert fragmented.is_free(7, 3)
        assert not fragmented.is_free(8, 3)
        assert not fragmented.is_free(-1, 2)

    def test_waste_after(self, fragmented):
        assert fragmented.waste_after(0, 2) == 2
        assert fragmented.waste_after(2, 2) == 0
        assert fragmented.waste_after(7, 2) == 1
        assert fragmented.waste_after(7, 3) == 0

    def test_waste_after_on_empty_space_runs_to_end(self, memory):
        assert memory.waste_after(0, 4) == 6


class TestScenarios:

    def test_first_fit_sequence_and_release(self, memory):
        result = memory.allocate("first_fit", "P1", 4)
        assert result.success and result.position == 0
        assert memory.render() == "[P][P][P][P][ ][ ][ ][ ][ ][ ]"

        result = memory.allocate("first_fit", "P2", 3)
        assert result.success and result.position == 4
        assert memory.render() == "[P][P][P][P][P][P][P][ ][ ][ ]"

        memory.release("P1")
        assert memory.render() == "[ ][ ][ ][ ][P][P][P][ ][ ][ ]"

    def test_best_fit_picks_minimal_waste(self, fragmented):
        # offset 2는 [2,4)를 채워 뒤에 남는 공간이 0
        result = fragmented.allocate("best_fit", "P3", 2)
        assert result.position == 2

    def test_worst_fit_picks_maximal_waste(self, fragmented):
        result = fragmented.allocate("worst_fit", "P4", 2)
        assert result.position == 0

    def test_request_larger_than_memory(self, memory):
        result = memory.allocate("first_fit", "P5", 11)
        assert not result
        assert result.reason == INVALID_REQUEST
        assert memory.regions == ()


class TestFailures:

    @pytest.mark.parametrize("length", [0, -1, 11])
    @pytest.mark.parametrize("policy", list(STRATEGIES))
    def test_invalid_length_rejected(self, memory, policy, length):
        result = memory.allocate(policy, "X", length, cursor=0)
        assert not result.success
        assert result.position is None
        assert result.reason == INVALID_REQUEST
        assert memory.regions == ()

    @pytest.mark.parametrize("policy", list(STRATEGIES))
    def test_insufficient_space_leaves_state(self, fragmented, policy):
        before = fragmented.render()
        result = fragmented.allocate(policy, "X", 5, cursor=0)
        assert not result.success
        assert result.reason == INSUFFICIENT_SPACE
        assert fragmented.render() == before

    def test_engine_usable_after_failure(self, fragmented):
        fragmented.allocate("first_fit", "X", 9)
        assert fragmented.allocate("first_fit", "Y", 4).position == 0

    def test_unknown_policy(self, memory):
        with pytest.raises(ValueError):
            memory.allocate("next_best_fit", "X", 1)

    def test_circular_requires_cursor(self, memory):
        with pytest.raises(ValueError):
            memory.allocate("circular_fit", "X", 1)


class TestRelease:

    def test_release_removes_every_region_of_owner(self, memory):
        memory.allocate("first_fit", "A", 2)
        memory.allocate("first_fit", "B", 2)
        memory.allocate("first_fit", "A", 3)
        assert len(memory.regions_of("A")) == 2

        assert memory.release("A") == 2
        assert memory.regions_of("A") == []
        assert memory.is_free(0, 2)
        assert memory.is_free(4, 3)
        assert [r.owner for r in memory.regions] == ["B"]

    def test_release_unknown_owner_is_noop(self, fragmented):
        before = fragmented.render()
        assert fragmented.release("nobody") == 0
        assert fragmented.render() == before

    def test_owner_stored_in_full(self, memory):
        memory.allocate("first_fit", "process-42", 3)
        assert memory.regions[0].owner == "process-42"
        assert memory.render().startswith("[p][p][p]")


class TestRender:

    def test_length_and_format(self, fragmented):
        snapshot = fragmented.render()
        assert len(snapshot) == 3 * fragmented.total_size
        assert snapshot[0::3] == "[" * 10
        assert snapshot[2::3] == "]" * 10

    def test_non_string_owner(self, memory):
        memory.allocate("first_fit", 7, 1)
        assert memory.render() == "[7]" + "[ ]" * 9

    def test_none_owner_renders_as_occupied(self):
        memory = MemoryManager(4)
        assert memory.allocate("first_fit", None, 2).success
        assert memory.render() == "[N][N][ ][ ]"

    def test_empty_owner_renders_fixed_mark(self):
        memory = MemoryManager(4)
        assert memory.allocate("first_fit", "", 2).success
        assert memory.render() == "[?][?][ ][ ]"
        assert memory.region_at(0).owner == ""
        assert memory.region_at(2) is None

    def test_render_is_idempotent(self, fragmented):
        assert fragmented.render() == fragmented.render()


class TestDerivedQueries:

    def test_free_blocks_and_fragmentation(self, fragmented):
        assert fragmented.free_blocks() == [(0, 4), (7, 3)]
        assert fragmented.used_space() == 3
        assert fragmented.free_space() == 7
        assert fragmented.largest_free_block() == 4
        assert fragmented.external_fragmentation() == pytest.approx(3 / 7)

    def test_full_memory(self, memory):
        memory.allocate("first_fit", "A", 10)
        assert memory.free_blocks() == []
        assert memory.largest_free_block() == 0
        assert memory.external_fragmentation() == 0.0


class TestProperties:

    @pytest.mark.parametrize("policy", list(STRATEGIES))
    def test_random_sequences_keep_invariants(self, policy):
        rng = random.Random(1234)
        memory = MemoryManager(32)
        cursor = 0
        owners = [f"P{i}" for i in range(6)]
        for _ in range(300):
            if rng.random() < 0.65:
                length = rng.randint(1, 12)
                result = memory.allocate(policy, rng.choice(owners), length, cursor=cursor)
                if result.success:
                    assert memory.region_at(result.position) is not None
            else:
                memory.release(rng.choice(owners))
            assert_invariants(memory)

    def test_first_fit_is_deterministic(self):
        def run():
            memory = MemoryManager(20)
            positions = []
            for owner, length in [("A", 5), ("B", 3), ("C", 7)]:
                positions.append(memory.allocate("first_fit", owner, length).position)
            memory.release("B")
            positions.append(memory.allocate("first_fit", "D", 2).position)
            return positions, memory.render()

        assert run() == run()
