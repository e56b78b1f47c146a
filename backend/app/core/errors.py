import logging

logger = logging.getLogger(__name__)

BAD_REQUEST_MESSAGE = "Bad Request. Check your payload."
CLIENT_ERROR_MESSAGE = "Known client error occurred. Check your payload."


class PeopleServiceException(Exception):
    """base exception for people-service errors"""
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class PersonNotFoundError(PeopleServiceException):
    """raised when no person matches the requested id"""
    status_code = 404

    def __init__(self, person_id: str):
        super().__init__("Not Found")
        self.person_id = person_id


class StoreError(PeopleServiceException):
    """raised when the data store rejects or fails a query"""
    status_code = 500

    def __init__(self, message: str = CLIENT_ERROR_MESSAGE):
        super().__init__(message)


class InvalidFieldError(PeopleServiceException):
    """raised when a search names a field or order outside the allow-list"""
    status_code = 400


def handle_store_error(operation: str, error: Exception):
    """
    centralized logging for store failures
    the client only ever sees the generic payload message
    """
    logger.error(f"{operation} failed: {error}", exc_info=error)
