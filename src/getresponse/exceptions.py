"""GetResponse exceptions module."""

# Error codes documented at https://apidocs.getresponse.com/v3/errors
ERROR_INTERNAL_ERROR = 1
ERROR_VALIDATION_ERROR = 1000
ERROR_RELATED_RESOURCE_NOT_FOUND = 1001
ERROR_FORBIDDEN = 1002
ERROR_INVALID_PARAMETER_FORMAT = 1003
ERROR_INVALID_HASH = 1004
ERROR_MISSING_PARAMETER = 1005
ERROR_INVALID_PARAMETER_TYPE = 1006
ERROR_INVALID_PARAMETER_LENGTH = 1007
ERROR_RESOURCE_ALREADY_EXISTS = 1008
ERROR_RESOURCE_IN_USE = 1009
ERROR_EXTERNAL_ERROR = 1010
ERROR_MESSAGE_ALREADY_SENDING = 1011
ERROR_MESSAGE_PARSING = 1012
ERROR_RESOURCE_NOT_FOUND = 1013
ERROR_AUTHENTICATION_FAILURE = 1014
ERROR_REQUEST_QUOTA_REACHED = 1015
ERROR_TEMPORARILY_BLOCKED = 1016
ERROR_PERMANENTLY_BLOCKED = 1017
ERROR_IP_BLOCKED = 1018
ERROR_INVALID_REQUEST_HEADERS = 1021

ERROR_DECODING_ERROR = "ERROR_DECODING_ERROR"
ERROR_DECODING_RESPONSE = "ERROR_DECODING_RESPONSE"


class GetResponseError(Exception):
    """Base exception for all GetResponse exceptions."""


class GetResponseInvalidBackendError(GetResponseError):
    """Exception raised when the backend is invalid."""


class GetResponseTransportError(GetResponseError):
    """Exception raised when the request could not reach the API."""


class GetResponseDecodingError(GetResponseError):
    """
    Exception raised when a response body cannot be decoded.

    The raw body is kept in `content` for diagnostics.
    """

    def __init__(self, message, content: bytes, status_code: int, code: str = ERROR_DECODING_ERROR):
        """Keep the raw body along with the decoding error marker."""
        super().__init__(message)
        self.code = code
        self.content = content
        self.status_code = status_code


class GetResponseApiError(GetResponseError):
    """Exception raised when the API answers with a structured error."""

    def __init__(self, error_response, status_code: int):
        """Build the error from the decoded error payload."""
        self.error_response = error_response
        self.status_code = status_code
        self.code = str(error_response.code)
        self.message = error_response.message
        if error_response.context:
            self.message = f"{self.message} | context: {', '.join(error_response.context)}"
        super().__init__(self.message)
