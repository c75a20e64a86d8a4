"""BuildError and BuildResult - typed outcome of a snapshot build.

Expected failures are returned, not raised:
- BuildResult.url holds the URL when the build succeeded
- BuildResult.error holds a BuildError when it did not
Never both. A failed build never carries a partial URL.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BuildError(ABC):
    """Abstract base class for snapshot build failures.

    Subclasses store their parameters and compute the message as a property.
    Use isinstance() to check the error type.
    """

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable error message."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class UrlTooLongError(BuildError):
    """The assembled URL exceeds what the remote service accepts.

    Attributes:
        length: Length of the assembled URL
        limit: Maximum accepted length
    """

    length: int
    limit: int

    @property
    def message(self) -> str:
        return f"The request url is too long: {self.length} characters (limit {self.limit})"


@dataclass(frozen=True)
class MissingViewportError(BuildError):
    """No viewport was supplied, so there is nothing to capture."""

    @property
    def message(self) -> str:
        return "Cannot build a snapshot without a viewport"


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a snapshot build: a URL or an error."""

    url: Optional[str] = None
    error: Optional[BuildError] = None

    def __post_init__(self) -> None:
        if (self.url is None) == (self.error is None):
            raise ValueError("BuildResult needs exactly one of url or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, url: str) -> "BuildResult":
        return cls(url=url)

    @classmethod
    def failure(cls, error: BuildError) -> "BuildResult":
        return cls(error=error)
