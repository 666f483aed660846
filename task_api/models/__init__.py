from .task import Task, utcnow

__all__ = ["Task", "utcnow"]
