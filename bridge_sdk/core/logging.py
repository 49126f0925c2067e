"""
structlog setup for the Bridge Upload SDK.
Applications call configure_logging() once; the SDK never configures logging on import.
"""
import logging
from typing import Optional
import structlog
from bridge_sdk.core import config


def configure_logging(settings: Optional[config.Settings] = None) -> None:
    """
    Configure stdlib logging and structlog processors.
    
    Args:
        settings: Settings to read log_level and log_format from (defaults to global settings)
    """
    settings = settings or config.settings
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    
    logging.basicConfig(format="%(message)s", level=level, force=True)
    
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
