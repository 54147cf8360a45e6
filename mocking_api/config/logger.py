from typing import Optional

from mocking_api.config.settings import get_settings
from mocking_api.shared.logger import StructuredLogger


def get_logger(name: Optional[str] = None) -> StructuredLogger:
    """
    Return a StructuredLogger configured from settings.
    Defaults to the application name when no component name is given.
    """
    settings = get_settings()
    return StructuredLogger(
        name=name or settings.app.app_name,
        log_file=settings.app.log_file,
        level=settings.app.log_level,
    )
