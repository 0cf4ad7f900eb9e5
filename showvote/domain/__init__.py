"""
Domain layer - Pure business logic for Show Vote.

This layer contains:
- Domain models (Show, DailySelection, Vote, ShowResult)
- The voting window classification
- Slate drawing
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from showvote.domain.exceptions import ShowVoteError

__all__: list[str] = ["ShowVoteError"]
