"""Exceptions raised while reading and processing SDF files."""


class MsdfError(Exception):
    """A generic error carrying a human readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __reduce__(self):
        return (type(self), (self.message,))


class BlockNotFoundError(MsdfError):
    """Raised when a named data block does not exist in a file."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Block '{name}' not found")
        self.name = name

    def __reduce__(self):
        return (type(self), (self.name,))


class BlockTypeUnsupportedError(MsdfError):
    """Raised when a block has a type that cannot be handled."""

    def __init__(self, block_name: str, block_type: str) -> None:
        super().__init__(
            f"Block type '{block_type}' unsupported in block '{block_name}'"
        )
        self.block_name = block_name
        self.block_type = block_type

    def __reduce__(self):
        return (type(self), (self.block_name, self.block_type))


class DataTypeUnsupportedError(MsdfError):
    """Raised when a block holds data of a type that cannot be handled."""

    def __init__(self, block_name: str, data_type: str) -> None:
        super().__init__(
            f"Data type '{data_type}' unsupported in block '{block_name}'"
        )
        self.block_name = block_name
        self.data_type = data_type

    def __reduce__(self):
        return (type(self), (self.block_name, self.data_type))