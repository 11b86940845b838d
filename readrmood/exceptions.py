"""
Exception hierarchy for readrmood

Evaluation itself never raises: malformed activity data is clamped and empty
collections simply fail thresholds. Errors are reserved for setup problems,
such as bad configuration or an inconsistent achievement catalog.
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class ReadrmoodError(Exception):
    """
    Base exception for all readrmood errors

    Provides:
    - Automatic timestamping
    - Structured context
    - Automatic logging

    Example:
        raise ReadrmoodError(
            message="Catalog could not be built",
            operation="build_catalog",
            context={"codes": ["first_steps", "first_steps"]}
        )
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.context = context or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

        # Auto-log on creation
        self._log_error()

    def _log_error(self) -> None:
        """Log error with full context"""
        log_data = {
            "error_type": self.__class__.__name__,
            "error_message": self.message,  # Avoid conflict with logging's 'message' field
            "operation": self.operation,
            "error_context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

        if self.cause:
            log_data["cause"] = str(self.cause)
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data, exc_info=self.cause)
        else:
            logger.error(f"{self.__class__.__name__}: {self.message}", extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for host applications"""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "operation": self.operation,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


# ==========================================
# Configuration Errors
# ==========================================

class ConfigurationError(ReadrmoodError):
    """
    Raised when an environment setting is missing or invalid

    Example:
        raise ConfigurationError(
            message="READRMOOD_TIMEZONE is not a known timezone",
            setting="READRMOOD_TIMEZONE"
        )
    """

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        self.setting = setting
        super().__init__(
            message=message,
            operation="validate_config",
            context={"setting": setting},
            **kwargs
        )


# ==========================================
# Catalog Errors
# ==========================================

class CatalogError(ReadrmoodError):
    """Raised when an achievement catalog is constructed inconsistently"""

    def __init__(self, message: str, codes: Optional[list[str]] = None, **kwargs):
        self.codes = codes or []
        super().__init__(
            message=message,
            operation="build_catalog",
            context={"codes": self.codes},
            **kwargs
        )
