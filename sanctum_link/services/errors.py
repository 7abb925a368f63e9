from typing import Any, Optional

class PipelineError(RuntimeError):
    def __init__(self, code: str, message: str, retryable: bool = False, details: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.retryable = retryable
        self.details = details

class InvalidArgumentsError(PipelineError):
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__("INVALID_ARGS", message, False, details)

class TransportError(PipelineError):
    """The HTTP layer reported an error marker. Message is always "Request failed"."""

    def __init__(self, details: Optional[Any] = None):
        super().__init__("REQUEST_FAILED", "Request failed", False, details)

class EncodingError(PipelineError):
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__("ENCODING_ERROR", message, False, details)
