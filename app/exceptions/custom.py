class ConfigUnavailableError(Exception):
    def __init__(self, message: str, resource: str | None = None):
        self.message = message
        self.resource = resource
        super().__init__(message)


class HeaderImageNotFoundError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
