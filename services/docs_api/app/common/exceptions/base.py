from typing import Optional

from services.docs_api.app.common.error_codes import ErrorCodes


class AppException(Exception):
    """Base exception for all application errors"""

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.INTERNAL_ERROR,
        status_code: Optional[int] = None,
        details: Optional[str] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code or ErrorCodes.get_http_status(code)
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class UnauthorizedException(AppException):
    """Bearer credential missing (401) or rejected (403)"""

    def __init__(
        self,
        message: str = "Invalid or expired token",
        code: str = ErrorCodes.TOKEN_INVALID,
        details: Optional[str] = None
    ):
        super().__init__(message=message, code=code, details=details)


class GoogleAuthException(AppException):
    """Google access token could not be exchanged for an identity"""

    def __init__(self, details: Optional[str] = None):
        super().__init__(
            message="Authentication failed",
            code=ErrorCodes.GOOGLE_AUTH_FAILED,
            status_code=401,
            details=details
        )


class DocumentSaveException(AppException):
    """Create or batch update of a Google Doc failed"""

    def __init__(self, details: Optional[str] = None, code: str = ErrorCodes.DOC_UPDATE_FAILED):
        super().__init__(
            message="Failed to save document to Google Drive",
            code=code,
            status_code=500,
            details=details
        )


class DocumentListException(AppException):
    """Drive listing failed"""

    def __init__(self, details: Optional[str] = None):
        super().__init__(
            message="Failed to fetch documents from Google Drive",
            code=ErrorCodes.DOC_LIST_FAILED,
            status_code=500,
            details=details
        )
