"""
Sentiment Engine Exceptions - Custom error hierarchy.

Only two errors ever reach a caller of the engine facade:
EmptyDatasetError (bootstrap must stop) and ConfigurationError.
UntrainedModelError is recovered by the combiner, and complex-case
faults are converted into degraded results.

SentimentEngineError (base)
├── EmptyDatasetError
├── UntrainedModelError
├── SnapshotError
└── ConfigurationError
"""

from datetime import datetime
from typing import Any, Optional


class SentimentEngineError(Exception):
    """
    Base exception for all sentiment engine errors.

    `recoverable` tells callers whether the engine can keep answering
    (degraded) after this error, or whether the caller must stop.
    """

    recoverable = False

    def __init__(
        self,
        message: str,
        component: str = "",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.component = component
        self.details = details or {}
        self.timestamp = datetime.utcnow()
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "component": self.component,
            "recoverable": self.recoverable,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class EmptyDatasetError(SentimentEngineError):
    """Training was requested with no usable examples."""

    def __init__(
        self,
        message: str = "Training data cannot be empty",
        component: str = "naive_bayes",
        received: int = 0,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, component, details)
        self.received = received

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "received": self.received,
        })
        return data


class UntrainedModelError(SentimentEngineError):
    """Prediction was requested before any successful train()."""

    # The combiner answers rule-based only until the model is trained
    recoverable = True

    def __init__(
        self,
        message: str = "Model must be trained before making predictions",
        component: str = "naive_bayes",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, component, details)


class SnapshotError(SentimentEngineError):
    """Model snapshot could not be read, verified or restored."""

    def __init__(
        self,
        message: str,
        component: str = "persistence",
        path: Optional[str] = None,
        schema_version: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, component, details)
        self.path = path
        self.schema_version = schema_version

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "path": self.path,
            "schema_version": self.schema_version,
        })
        return data


class ConfigurationError(SentimentEngineError):
    """Invalid tuning constants or model parameters."""

    def __init__(
        self,
        message: str,
        component: str = "config",
        errors: Optional[list[str]] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, component, details)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "errors": self.errors,
        })
        return data
