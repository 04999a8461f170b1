from services.docs_api.app.common.exceptions.base import (
    AppException,
    UnauthorizedException,
    GoogleAuthException,
    DocumentSaveException,
    DocumentListException
)

__all__ = [
    'AppException',
    'UnauthorizedException',
    'GoogleAuthException',
    'DocumentSaveException',
    'DocumentListException'
]
