from .fix import handle_fix, handle_plan

__all__ = [
  "handle_fix",
  "handle_plan",
]
