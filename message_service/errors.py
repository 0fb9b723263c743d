class MessageError(Exception):
    """
    Base class for message store failures.
    """

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(MessageError):
    """
    A required field is missing or empty.
    """


class NotFoundError(MessageError):
    """
    No message with the requested ID exists.
    """
