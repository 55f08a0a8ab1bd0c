"""
Bermuda Triangle - FastAPI Backend Server

Provides API endpoints for the puzzle data and the solver.
"""

import logging

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import uvicorn

from bermuda_solver import (
    ALL_PIECES,
    BOARD_SIDES,
    Arrangement,
    PuzzleConfigError,
    distinct_layouts,
    solve_puzzle,
)
from bermuda_solver.board import BOARD_ROWS
from bermuda_solver.config import CFG

logger = logging.getLogger(__name__)

app = FastAPI(title="Bermuda Triangle")
api_router = APIRouter(prefix="/api")

# Allow all origins for simplicity and robust public access
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class PieceModel(BaseModel):
    index: int
    dots: list[str]  # Clockwise


class PuzzleResponse(BaseModel):
    left: list[str]    # Top to bottom
    right: list[str]   # Top to bottom
    bottom: list[str]  # Left to right
    pieces: list[PieceModel]


class SolveRequest(BaseModel):
    rows: int = BOARD_ROWS
    max_solutions: int | None = None  # None: use server configuration
    unique: bool = False  # Collapse solutions that only swap identical pieces


class PlacementModel(BaseModel):
    piece: int
    rotation: int


class SolveResponse(BaseModel):
    success: bool
    count: int = 0
    # One entry per solution: rows of placements, None for open cells
    solutions: list[list[list[PlacementModel | None]]] = []
    error: str | None = None


def arrangement_to_rows(arrangement: Arrangement) -> list[list[PlacementModel | None]]:
    return [
        [
            None if cell is None else PlacementModel(piece=cell[0], rotation=cell[1])
            for cell in row
        ]
        for row in arrangement.to_indexes()
    ]


# Routes
@api_router.get("/puzzle", response_model=PuzzleResponse)
async def get_puzzle():
    """The board sides and piece list the solver works on."""
    return PuzzleResponse(
        left=[str(d) for d in BOARD_SIDES.left],
        right=[str(d) for d in BOARD_SIDES.right],
        bottom=[str(d) for d in BOARD_SIDES.bottom],
        pieces=[
            PieceModel(index=p.index, dots=[str(d) for d in p.dots])
            for p in ALL_PIECES
        ],
    )


@api_router.post("/solve", response_model=SolveResponse)
def solve_board(request: SolveRequest):
    """
    Solve the first `rows` rows of the board.

    Returns every solution as rows of piece index and rotation.
    """
    try:
        solutions = solve_puzzle(
            ALL_PIECES,
            BOARD_SIDES,
            rows=request.rows,
            max_solutions=request.max_solutions,
        )
    except PuzzleConfigError as e:
        logger.warning("Rejected solve request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    if request.unique:
        solutions = distinct_layouts(solutions)

    if not solutions:
        return SolveResponse(success=False, error="No solution found")

    return SolveResponse(
        success=True,
        count=len(solutions),
        solutions=[arrangement_to_rows(s) for s in solutions],
    )


app.include_router(api_router)


if __name__ == "__main__":
    logging.basicConfig(level=CFG.LOG_LEVEL, format=CFG.LOG_FORMAT, datefmt=CFG.LOG_DATEFMT)
    uvicorn.run(app, host="0.0.0.0", port=8000)
