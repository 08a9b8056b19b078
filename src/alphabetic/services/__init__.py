"""Service layer — letter operations returning ServiceResult.

Services may import from the domain and config layers.
They must never import from commands or output.
"""

from __future__ import annotations

from alphabetic.services.letters import LetterService
from alphabetic.services.result import ServiceError, ServiceResult

__all__ = ["LetterService", "ServiceError", "ServiceResult"]
