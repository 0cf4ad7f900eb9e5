"""Configuration for Show Vote.

All settings are frozen dataclasses built from environment variables via
from_environment().
"""

from showvote.config.app_config import AppConfig
from showvote.config.identity_config import IdentityConfig
from showvote.config.voting_config import VotingScheduleConfig

__all__: list[str] = [
    "AppConfig",
    "IdentityConfig",
    "VotingScheduleConfig",
]
