class ErrorCodes:
    # Bearer credential errors
    TOKEN_MISSING = "KA-SEC-0401"
    TOKEN_INVALID = "KA-SEC-0403"
    GOOGLE_TOKEN_MISSING = "KA-API-0401"

    # Identity provider
    GOOGLE_AUTH_FAILED = "KA-IDP-0401"

    # General API errors
    BAD_REQUEST = "KA-API-0400"
    INTERNAL_ERROR = "KA-API-0001"
    PAYLOAD_TOO_LARGE = "KA-API-0413"

    # Remote document store errors
    DOC_CREATE_FAILED = "KA-GDOC-0001"
    DOC_UPDATE_FAILED = "KA-GDOC-0002"
    DOC_LIST_FAILED = "KA-GDOC-0003"

    @staticmethod
    def get_http_status(error_code: str) -> int:
        """Extract HTTP status from error code"""
        if error_code and len(error_code) >= 4:
            try:
                status = int(error_code[-4:])
                if 100 <= status <= 599:
                    return status
            except ValueError:
                pass
        return 500
