# sudoku_tool_api.py
# FastAPI wrapper for the solver operations.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
# or through apps/api/serve.py, which reads the port and a YAML config.

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, StrictInt, StrictStr

from apps.api.config import ServiceConfig
from apps.logutil import log
from solver.errors import MalformedInputError
from solver.sudoku_tools import (
    compute_candidates_tool,
    ping,
    sanity_check,
    solve_sudoku,
    solve_sudoku_guessing,
    validate_sudoku,
)

# Blank cells may be sent as 0, null, "" or "."; digits as numbers or one-character strings.
# Anything else reaches Board, which rejects it with error_details.
RawGrid = list[list[StrictInt | StrictStr | None]]


class GridModel(BaseModel):
    grid: RawGrid


class SolveResponse(BaseModel):
    grid: list[list[int]]
    status: int


class StatusResponse(BaseModel):
    status: int


class SanityRequest(BaseModel):
    original: RawGrid
    current: RawGrid | None = None


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    cfg = config or ServiceConfig()
    app = FastAPI(title="Sudoku Service")
    app.state.config = cfg
    router = APIRouter(prefix=cfg.base_path.rstrip("/"))

    @app.exception_handler(MalformedInputError)
    async def malformed_input(request: Request, exc: MalformedInputError):
        log(f"Rejected malformed grid: {exc}", quiet=cfg.quiet)
        return JSONResponse(status_code=422, content={"detail": str(exc), "error_details": exc.error_details})

    @router.get("/ping")
    def api_ping():
        log("Ping requested.", quiet=cfg.quiet)
        return {"ok": ping()}

    @router.post("/solve", response_model=SolveResponse)
    def api_solve(req: GridModel):
        log("Sudoku solution requested.", quiet=cfg.quiet)
        grid = solve_sudoku(req.grid, cfg.max_difficulty)
        return {"grid": grid, "status": validate_sudoku(grid)}

    @router.post("/solve_guessing", response_model=SolveResponse)
    def api_solve_guessing(req: GridModel):
        log("Sudoku solution with backtracking requested.", quiet=cfg.quiet)
        grid = solve_sudoku_guessing(req.grid, cfg.max_difficulty)
        return {"grid": grid, "status": validate_sudoku(grid)}

    @router.post("/validate", response_model=StatusResponse)
    def api_validate(req: GridModel):
        log("Sudoku validation requested.", quiet=cfg.quiet)
        return {"status": validate_sudoku(req.grid)}

    @router.post("/compute_candidates")
    def api_cands(req: GridModel):
        return compute_candidates_tool(req.grid)

    @router.post("/sanity_check")
    def api_sanity(req: SanityRequest):
        return sanity_check(req.original, req.current)

    app.include_router(router)
    return app


app = create_app()
