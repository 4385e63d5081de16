"""
Declarative staged execution, used for the ordered startup sequence.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Callable, Dict, List, Optional

from touchpos.core.errors import Result


@dataclass
class StageResult:
    name: str
    status: str
    output: Any = None
    error: Optional[str] = None
    exception: Optional[BaseException] = None
    duration_ms: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PipelineResult:
    stages: List[StageResult] = field(default_factory=list)
    status: str = "success"

    def failed(self) -> bool:
        return self.status == "failed"

    @property
    def failed_stage(self) -> Optional[StageResult]:
        for stage in self.stages:
            if stage.status == "error":
                return stage
        return None

    def stage_names(self) -> List[str]:
        return [s.name for s in self.stages]


class PipelineStage:
    def __init__(
        self,
        name: str,
        run_fn: Callable[[Any], Any],
        *,
        is_critical: bool = True,
        skip_if: Optional[Callable[[Any], bool]] = None,
    ):
        self.name = name
        self.run_fn = run_fn
        self.is_critical = is_critical
        self.skip_if = skip_if

    def should_skip(self, ctx: Any) -> bool:
        return bool(self.skip_if and self.skip_if(ctx))

    async def run(self, ctx: Any) -> StageResult:
        if self.should_skip(ctx):
            return StageResult(name=self.name, status="skipped")

        start = perf_counter()
        try:
            raw = self.run_fn(ctx)
            if inspect.isawaitable(raw):
                raw = await raw
        except Exception as exc:  # noqa: BLE001
            return StageResult(
                name=self.name,
                status="error",
                error=str(exc),
                exception=exc,
                duration_ms=(perf_counter() - start) * 1000,
            )

        duration_ms = (perf_counter() - start) * 1000
        # A stage may report failure through a Result instead of raising
        if isinstance(raw, Result) and raw.is_err():
            return StageResult(
                name=self.name,
                status="error",
                error=str(raw.error),
                exception=raw.error,
                duration_ms=duration_ms,
            )
        output = raw.unwrap() if isinstance(raw, Result) else raw
        return StageResult(name=self.name, status="success", output=output, duration_ms=duration_ms)


class Pipeline:
    def __init__(self, name: str):
        self.name = name
        self.stages: List[PipelineStage] = []

    def add_stage(self, stage: PipelineStage) -> "Pipeline":
        self.stages.append(stage)
        return self

    async def run(self, ctx: Any = None) -> PipelineResult:
        results: List[StageResult] = []

        for stage in self.stages:
            stage_result = await stage.run(ctx)
            results.append(stage_result)

            if stage_result.status == "error" and stage.is_critical:
                return PipelineResult(stages=results, status="failed")

        return PipelineResult(stages=results, status="success")
