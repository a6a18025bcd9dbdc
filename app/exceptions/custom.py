class ScrapeError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FetchError(ScrapeError):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class NetworkError(ScrapeError):
    pass


class InvalidInputError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
