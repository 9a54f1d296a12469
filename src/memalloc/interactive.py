#!/usr/bin/env python3
"""대화형 메모리 할당 시뮬레이터 CLI"""

from .memory import MemoryManager, next_cursor, INVALID_REQUEST
from .strategies import get_strategy
from .visualizer import print_memory_report, visualize_memory

ALGORITHMS = {
    1: 'first_fit',
    2: 'best_fit',
    3: 'worst_fit',
    4: 'circular_fit',
}

MENU = (
    "\n1. 할당\n"
    "2. 해제\n"
    "3. 메모리 보기\n"
    "4. 종료\n"
    "5. 그래프 저장\n"
    "선택: "
)


def get_positive_int_input(prompt: str, default: int | None = None) -> int | None:
    """양수 정수 입력을 받는 헬퍼 함수

    Args:
        prompt: 사용자에게 보여줄 프롬프트 메시지
        default: 기본값 (None이면 필수 입력)

    Returns:
        입력받은 양수 정수, 또는 에러 시 None
    """
    user_input = input(prompt).strip()

    if user_input == "":
        if default is not None:
            return default
        print("❌ 오류: 값을 입력해주세요.")
        return None

    try:
        value = int(user_input)
        if value <= 0:
            print("❌ 오류: 양수를 입력해주세요.")
            return None
        return value
    except ValueError:
        print("❌ 오류: 숫자를 입력해주세요.")
        return None


def get_process_id(prompt: str) -> str | None:
    """공백 없는 프로세스 ID 입력"""
    user_input = input(prompt).strip()
    if not user_input:
        print("❌ 오류: 프로세스 ID를 입력해주세요.")
        return None
    return user_input.split()[0]


def report_allocation(result, owner, label):
    """할당 결과 출력"""
    if result.success:
        print(f"✓ {label}: 프로세스 {owner} 위치 {result.position}에 할당")
    elif result.reason == INVALID_REQUEST:
        print(f"❌ {label}: 요청 크기가 메모리 범위를 벗어났습니다 (프로세스 {owner})")
    else:
        print(f"❌ {label}: 메모리 공간 부족 (프로세스 {owner})")


def run_interactive():
    """대화형 CLI 실행"""
    print("="*60)
    print("연속 메모리 할당 시뮬레이터")
    print("="*60)

    memory_size = get_positive_int_input("메모리 크기 (기본값 10): ", default=10)
    if memory_size is None:
        return
    memory = MemoryManager(memory_size)
    print(f"✓ 메모리 크기: {memory_size}")

    choice = get_positive_int_input(
        "알고리즘 선택 (1-First-Fit, 2-Best-Fit, 3-Worst-Fit, 4-Circular-Fit, 기본값 1): ",
        default=1,
    )
    strategy = get_strategy(ALGORITHMS[choice]) if choice in ALGORITHMS else None
    if strategy is not None:
        print(f"✓ {strategy.label} 전략 사용")

    # circular fit 커서는 드라이버가 보관
    cursor = 0

    while True:
        option = get_positive_int_input(MENU)
        if option is None:
            continue

        if option == 1:
            owner = get_process_id("프로세스 ID: ")
            if owner is None:
                continue
            size = get_positive_int_input("프로세스 크기: ")
            if size is None:
                continue

            if strategy is None:
                print("❌ 잘못된 알고리즘 선택입니다.")
            else:
                result = memory.allocate(strategy, owner, size, cursor=cursor)
                if strategy.needs_cursor:
                    cursor = next_cursor(cursor, size, result.success, memory_size)
                report_allocation(result, owner, strategy.label)
            print_memory_report(memory)
        elif option == 2:
            owner = get_process_id("해제할 프로세스 ID: ")
            if owner is None:
                continue
            released = memory.release(owner)
            if released:
                print(f"✓ 프로세스 {owner} 해제 ({released}개 영역)")
            else:
                print(f"⚠️  프로세스 {owner}가 가진 영역이 없습니다")
            print_memory_report(memory)
        elif option == 3:
            print_memory_report(memory)
        elif option == 4:
            print("프로그램을 종료합니다.")
            break
        elif option == 5:
            visualize_memory(memory, strategy.label if strategy else '')
        else:
            print("❌ 잘못된 선택입니다.")
