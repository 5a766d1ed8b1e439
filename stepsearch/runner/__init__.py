"""
Run driver module.

Provides the step loop around search strategies:
- StepScheduler: Advances a strategy one step at a time
- SearchRun: Record of a finished or abandoned run
"""

from stepsearch.runner.scheduler import StepScheduler
from stepsearch.runner.state import SearchRun

__all__ = [
    "StepScheduler",
    "SearchRun",
]
