"""
Exception classes for Resume Insight
"""
from typing import Any, Dict


class ResumeInsightError(Exception):
    """Base exception for Resume Insight"""

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None,
        cause: Exception = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/display"""
        result = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ConfigurationError(ResumeInsightError):
    """Raised when an environment setting is invalid"""

    def __init__(self, message: str, config_key: str = None, config_value: Any = None, **kwargs):
        details = kwargs.pop('details', {})
        if config_key:
            details['config_key'] = config_key
        if config_value is not None:
            details['config_value'] = str(config_value)
        super().__init__(message, error_code="CONFIGURATION_ERROR", details=details, **kwargs)


class DocumentError(ResumeInsightError):
    """Raised when an uploaded document cannot be analyzed"""

    def __init__(self, message: str, document_name: str = None, **kwargs):
        details = kwargs.pop('details', {})
        if document_name:
            details['document_name'] = document_name
        super().__init__(message, error_code="DOCUMENT_ERROR", details=details, **kwargs)
