"""
CLI Command Handlers Facade.

Re-exports handlers from `ts_autoimport.cli.handlers` so the dispatcher and
tests have a single patch target.
"""

from ts_autoimport.cli.handlers.fix import handle_fix, handle_plan

__all__ = [
  "handle_fix",
  "handle_plan",
]
