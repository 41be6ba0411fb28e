"""Analysis API: dependency tree, cycles, warnings, dependents."""

from __future__ import annotations

import asyncio
import os

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from module_graph.models import ParseOptions, normalize_options
from module_graph.report import AnalysisReport, analyze
from module_graph.resolver import ResolutionError

router = APIRouter(prefix="/api")


class AnalyzeRequest(BaseModel):
    context: str
    imports: dict[str, list[str]]
    entries: list[str] | None = None
    extensions: list[str] | None = None
    transform: bool = False


class DependentsRequest(AnalyzeRequest):
    module: str
    transform: bool = True


def _options(req: AnalyzeRequest) -> ParseOptions:
    if not os.path.isdir(req.context):
        raise HTTPException(400, f"Context is not a directory: {req.context}")
    return normalize_options(context=req.context, extensions=req.extensions)


def _run(req: AnalyzeRequest) -> AnalysisReport:
    options = _options(req)
    entries = req.entries if req.entries is not None else list(req.imports)
    try:
        return analyze(entries, req.imports, options, transform=req.transform)
    except (ResolutionError, ValueError) as e:
        raise HTTPException(400, str(e))


@router.post("/analyze")
async def analyze_graph(req: AnalyzeRequest):
    report = await asyncio.to_thread(_run, req)
    return report.to_dict()


@router.post("/dependents")
async def get_dependents(req: DependentsRequest):
    report = await asyncio.to_thread(_run, req)
    issuers = report.dependents.get(req.module)
    if not issuers:
        raise HTTPException(404, f"Nothing imports {req.module}")
    return {"module": req.module, "dependents": issuers}
