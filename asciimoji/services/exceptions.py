"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class LookupFailure(ServiceError):
    """Keyword has no rendered text in the dataset."""

    def __init__(self, keyword: str) -> None:
        super().__init__(f"Unknown keyword: {keyword!r}")
        self.keyword = keyword


class DatasetError(ServiceError):
    pass


class ControllerStateError(ServiceError):
    pass
