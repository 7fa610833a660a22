"""
aod_justify reformats text into optimally justified paragraphs.
"""

from __future__ import annotations

from .config import JustifyConfig, config_from_dict, config_from_yaml, load_config
from .errors import (
    ConfigurationError,
    EncodingError,
    InfeasibleParagraphError,
    InputError,
    InternalConsistencyError,
    JustifyError,
)
from .optimizer import JustificationPlan, optimize
from .pipeline import justify

__all__ = [
    "JustifyConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "JustifyError",
    "InputError",
    "EncodingError",
    "ConfigurationError",
    "InfeasibleParagraphError",
    "InternalConsistencyError",
    "JustificationPlan",
    "optimize",
    "justify",
]

__version__ = "0.1.0"
