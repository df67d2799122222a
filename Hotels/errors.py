'''
Error kinds raised by the hotel eligibility service.
'''


class HotelAccessError(Exception):
    """Base class for the service's classified failures."""

    kind = "HotelAccessError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(HotelAccessError):
    """A record required by the request does not exist."""

    kind = "NotFoundError"

    def __init__(self, message: str = "No result for this search!") -> None:
        super().__init__(message)


class ConflictError(HotelAccessError):
    """The request breaks a business rule on the user's ticket."""

    kind = "ConflictError"
