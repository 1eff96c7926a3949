class DomainError(Exception):
    pass


class FetchError(DomainError):
    """Raised by any upstream capability (fetch, detail, favorite) that fails"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
