"""FastAPI 백엔드 서버 - 메모리 할당 시뮬레이터 웹 애플리케이션"""

from pathlib import Path
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from pydantic import BaseModel, Field

from ..memory import MemoryManager, next_cursor
from ..strategies import STRATEGIES, get_strategy

# 파일 디렉토리 경로
CURR_DIR = Path(__file__).parent
STATIC_DIR = CURR_DIR / "static"

# 요청 한 번이 스캔할 수 있는 범위 제한
MAX_TOTAL_SIZE = 4096
MAX_OPERATIONS = 1000

app = FastAPI(title="memalloc - 연속 메모리 할당 시뮬레이터")

# CORS 설정 (개발 환경용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class OperationInput(BaseModel):
    """할당/해제 연산 모델"""
    action: Literal["allocate", "release"]
    owner: str
    size: int = Field(default=0, le=MAX_TOTAL_SIZE)


class SimulationRequest(BaseModel):
    """시뮬레이션 요청 모델"""
    total_size: int = Field(default=10, gt=0, le=MAX_TOTAL_SIZE)
    strategy: str = "first_fit"
    cursor: int = 0
    operations: list[OperationInput] = Field(max_length=MAX_OPERATIONS)


class StepResult(BaseModel):
    """연산 한 단계의 결과"""
    action: str
    owner: str
    success: bool
    position: int | None = None
    reason: str | None = None
    released: int = 0
    cursor: int
    memory: str


class RegionOutput(BaseModel):
    owner: str
    start: int
    length: int


class SimulationResponse(BaseModel):
    """시뮬레이션 응답 모델"""
    strategy: str
    total_size: int
    steps: list[StepResult]
    regions: list[RegionOutput]
    free_blocks: list[tuple[int, int]]
    used: int
    free: int
    external_fragmentation: float
    memory: str


@app.get("/")
async def read_root():
    """루트 경로 - index.html 반환"""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/api/strategies")
async def list_strategies():
    """사용 가능한 전략 목록"""
    return [{"name": name, "label": cls.label} for name, cls in STRATEGIES.items()]


@app.post("/api/simulate", response_model=SimulationResponse)
def simulate(request: SimulationRequest):
    """연산 목록을 새 주소 공간에 순서대로 적용

    스캔은 CPU 작업이므로 동기 함수로 두어 스레드풀에서 실행된다.
    """
    try:
        memory = MemoryManager(request.total_size)
        strategy = get_strategy(request.strategy)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    cursor = request.cursor % memory.total_size
    steps = []
    for op in request.operations:
        if op.action == "allocate":
            result = memory.allocate(strategy, op.owner, op.size, cursor=cursor)
            if strategy.needs_cursor:
                cursor = next_cursor(cursor, op.size, result.success, memory.total_size)
            steps.append(StepResult(
                action=op.action,
                owner=op.owner,
                success=result.success,
                position=result.position,
                reason=result.reason,
                cursor=cursor,
                memory=memory.render(),
            ))
        else:
            released = memory.release(op.owner)
            steps.append(StepResult(
                action=op.action,
                owner=op.owner,
                success=True,
                released=released,
                cursor=cursor,
                memory=memory.render(),
            ))

    return SimulationResponse(
        strategy=strategy.name,
        total_size=memory.total_size,
        steps=steps,
        regions=[RegionOutput(owner=r.owner, start=r.start, length=r.length)
                 for r in memory.regions],
        free_blocks=memory.free_blocks(),
        used=memory.used_space(),
        free=memory.free_space(),
        external_fragmentation=memory.external_fragmentation(),
        memory=memory.render(),
    )


# 정적 파일 서빙 (HTML, CSS, JS)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR), follow_symlink=True), name="static")
