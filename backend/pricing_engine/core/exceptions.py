"""Domain exceptions raised on the evaluation path."""


class MissingFieldError(ValueError):
    """A required request attribute was not supplied."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing required field: {field_name}")
