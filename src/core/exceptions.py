from typing import Any, Dict, Iterable, Optional


class HindiReaderError(Exception):
    status_code: int = 500

    def __init__(self, message: str, error_code: Optional[str] = None, details: Any = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingInputError(HindiReaderError):
    status_code = 400

    def __init__(self, field_name: str):
        super().__init__(
            message=f"Missing {field_name}",
            error_code="MISSING_INPUT",
        )


class ProviderError(HindiReaderError):
    """An external provider call failed or returned something unusable."""

    status_code = 500

    def __init__(self, message: str, details: Any = None, error_code: Optional[str] = None):
        super().__init__(message=message, error_code=error_code or "PROVIDER_ERROR", details=details)


class ConfigurationError(HindiReaderError):
    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(
            message=f"Missing env vars: {', '.join(self.missing)}",
            error_code="MISSING_CONFIGURATION",
            details={"missing": self.missing},
        )
