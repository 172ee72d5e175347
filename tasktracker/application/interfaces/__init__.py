"""Application interfaces (ports): repository protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from tasktracker.infrastructure or tasktracker.api.
"""

from tasktracker.application.interfaces.repositories import ITaskRepository

__all__ = ["ITaskRepository"]
