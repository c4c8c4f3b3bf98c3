"""Exceptions raised while turning XML into JSON values."""

from typing import Optional


class ConversionError(Exception):
    """Base class for every error this package raises."""
    pass


class DepthExceeded(ConversionError):
    """Raised when element nesting goes deeper than the configured bound."""

    def __init__(self, depth: int, limit: int, element: str):
        self.depth = depth
        self.limit = limit
        self.element = element
        super().__init__(
            f"Element '{element}' at depth {depth} exceeds max_depth={limit}"
        )


class KeyPrefixCollision(ConversionError):
    """Raised in strict mode when two entries of one element map to the same key."""

    def __init__(self, key: str, element: str):
        self.key = key
        self.element = element
        super().__init__(
            f"Key '{key}' written twice while converting element '{element}' "
            f"(check attribute_prefix/text_key/cdata_key)"
        )


class XmlReadError(ConversionError):
    """Raised when XML text cannot be read into a tree."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        where = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"{message}{where}")
