from .loader import load_config
from .logging_config import configure_logging
from .models import (
    ExportConfig,
    Latex2DocConfig,
    LLMSettings,
    UploadConfig,
)

__all__ = [
    "ExportConfig",
    "LLMSettings",
    "Latex2DocConfig",
    "UploadConfig",
    "configure_logging",
    "load_config",
]
