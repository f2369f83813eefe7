from typing import Optional


class ScreenerError(RuntimeError):
    """Base error; status_code is the HTTP status the routes answer with."""

    status_code = 500


class MissingInputError(ScreenerError):
    status_code = 400


class UnsupportedDocumentError(ScreenerError):
    status_code = 400


class MissingCredentialError(ScreenerError):
    status_code = 500


class ExtractionError(ScreenerError):
    """Raised when a supported document cannot be read by its parser."""

    status_code = 500


class UpstreamError(ScreenerError):
    """Raised when the model API call itself fails."""

    status_code = 502


class NonJsonOutputError(UpstreamError):
    pass


class InvalidOutputError(UpstreamError):
    """Raised when the model returned JSON that does not fit AnalysisResult."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
