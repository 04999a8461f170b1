from services.docs_api.app.auth.jwt_authenticator import JwtAuthenticator
from services.docs_api.app.auth.protocol import Authenticator

__all__ = ["Authenticator", "JwtAuthenticator"]
