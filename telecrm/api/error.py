from fastapi import status

from telecrm.libs.result import Error


class ClientError(Exception):
    """A use-case Error the caller can act on, rendered with its own message"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """A failure the caller cannot fix; its message is logged, never returned"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
