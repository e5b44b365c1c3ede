from __future__ import annotations
from cyclecheck.registry import TASKS
from cyclecheck.tasks.base import BaseGraphTask, TaskSpec
from cyclecheck.tasks.has_cycle import HasCycleTask

def build_task(spec: TaskSpec) -> BaseGraphTask:
    task_cls = TASKS.get(spec.name)
    return task_cls(**(spec.params or {}))

__all__ = ["BaseGraphTask", "TaskSpec", "HasCycleTask", "build_task"]
