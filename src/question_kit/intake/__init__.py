from .config import IntakeConfig
from .config_loader import load_intake_config
from .errors import EmptyTextError, IntakeError, TextTooShortError
from .models import ParseRequest, ParseResult
from .service import TextIntake

__all__ = [
    # Service
    "TextIntake",
    # Config
    "IntakeConfig",
    "load_intake_config",
    # Types
    "ParseRequest",
    "ParseResult",
    # Errors
    "IntakeError",
    "EmptyTextError",
    "TextTooShortError",
]
