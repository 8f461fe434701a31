from .profiles import (
    AUTOPAY_PROFILE,
    DEPOSIT_PROFILE,
    CadenceWindow,
    DetectionProfile,
    ScoreWeights,
)
from .settings import Settings, get_settings

__all__ = [
    "AUTOPAY_PROFILE",
    "DEPOSIT_PROFILE",
    "CadenceWindow",
    "DetectionProfile",
    "ScoreWeights",
    "Settings",
    "get_settings",
]
