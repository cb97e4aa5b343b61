from typing import Any, Mapping


class EncodeError(Exception):
    pass


class DataNotEncodableError(EncodeError):
    def __init__(self, parameters: Mapping[str, Any], reason: str = ""):
        self.parameters = parameters
        message = f"Data not encodable: {dict(parameters)!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
