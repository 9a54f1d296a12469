"""시각화 모듈"""

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib import font_manager
import platform


def setup_korean_font():
    """한글 폰트 설정"""
    system = platform.system()
    if system == 'Darwin':
        fonts = ['AppleGothic', 'AppleSDGothicNeo', 'Nanum Gothic']
    elif system == 'Windows':
        fonts = ['Malgun Gothic', 'NanumGothic', 'Gulim']
    else:
        fonts = ['NanumGothic', 'Noto Sans CJK KR', 'UnDotum']

    available_fonts = {f.name for f in font_manager.fontManager.ttflist}
    for font in fonts:
        if font in available_fonts:
            plt.rcParams['font.family'] = font
            return font
    return None


def print_memory_report(memory):
    """메모리 스냅샷과 사용량 요약 출력"""
    print("메모리 상태:")
    print(memory.render())

    used = memory.used_space()
    print(f"  사용: {used}/{memory.total_size} "
          f"({used / memory.total_size * 100:.1f}%), "
          f"빈 구간: {len(memory.free_blocks())}개, "
          f"최대 빈 구간: {memory.largest_free_block()}, "
          f"외부 단편화: {memory.external_fragmentation():.2f}")


def visualize_memory(memory, strategy_name='', output_path='memory_layout.png', show=True):
    """주소 공간을 가로 막대로 그려 저장

    Args:
        memory: MemoryManager
        strategy_name: 제목에 표시할 전략 이름
        output_path: 저장할 이미지 경로 (None이면 저장 안 함)
        show: plt.show() 호출 여부

    Returns:
        matplotlib Figure
    """
    regions = memory.regions
    owners = sorted({str(r.owner) for r in regions})
    colors = {owner: plt.cm.Set3(i / max(len(owners), 1))
              for i, owner in enumerate(owners)}

    fig, ax = plt.subplots(figsize=(max(6, min(memory.total_size * 0.4, 20)), 2.5))

    ax.add_patch(patches.Rectangle((0, 0), memory.total_size, 1,
                                   fill=False, edgecolor='black', linewidth=2))

    for region in regions:
        owner = str(region.owner)
        ax.add_patch(patches.Rectangle((region.start, 0), region.length, 1,
                                       linewidth=1, edgecolor='black',
                                       facecolor=colors[owner], alpha=0.8))
        ax.text(region.start + region.length / 2, 0.5, owner,
                ha='center', va='center', fontsize=9, fontweight='bold')

    for start, length in memory.free_blocks():
        ax.add_patch(patches.Rectangle((start, 0), length, 1,
                                       facecolor='white', edgecolor='gray',
                                       hatch='//', linewidth=0.5))

    used = memory.used_space()
    usage = used / memory.total_size * 100
    title = f'메모리 {memory.total_size}'
    if strategy_name:
        title = f'{strategy_name} | {title}'
    ax.set_title(f'{title}\n사용률: {usage:.1f}% | 외부 단편화: {memory.external_fragmentation():.2f}',
                 fontsize=11, fontweight='bold')
    ax.set_xlim(0, memory.total_size)
    ax.set_ylim(0, 1)
    ax.set_yticks([])
    ax.set_xlabel('주소')

    if owners:
        legend_elements = [patches.Patch(facecolor=colors[o], alpha=0.8,
                                         edgecolor='black', label=o)
                           for o in owners]
        fig.legend(handles=legend_elements, loc='upper right', ncol=min(len(owners), 6))

    plt.tight_layout()
    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        print(f"시각화 파일 저장: {output_path}")
    if show:
        plt.show()
    return fig


# 폰트 설정 초기화
setup_korean_font()
plt.rcParams['axes.unicode_minus'] = False
