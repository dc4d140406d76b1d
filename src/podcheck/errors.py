"""
Error taxonomy for podcheck.

Fatal errors (configuration, file reads, decoding, cluster API) abort a
run. Per-pod conditions are recorded by the evaluation driver and never
abort a batch.
"""

from __future__ import annotations

from dataclasses import dataclass


class PodcheckError(Exception):
    """Base class for all podcheck errors."""


class ConfigError(PodcheckError):
    """An option value is missing, malformed, or conflicts with another."""


class FileReadError(PodcheckError):
    """A snapshot file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to read file {path}: {reason}")


class DecodeError(PodcheckError):
    """A snapshot document or one of its items has the wrong shape."""

    def __init__(
        self,
        path: str,
        message: str,
        index: int | None = None,
        kind: str | None = None,
    ):
        self.path = path
        self.message = message
        self.index = index
        self.kind = kind
        location = path
        if index is not None:
            location = f"{path} item {index}"
            if kind:
                location += f" ({kind})"
        super().__init__(f"failed to decode {location}: {message}")


class APIError(PodcheckError):
    """A live cluster query or client setup failed."""

    def __init__(self, resource: str, message: str, status: int | None = None):
        self.resource = resource
        self.status = status
        detail = f"{message} (HTTP {status})" if status else message
        super().__init__(f"failed to list {resource}: {detail}")


class PredicateError(PodcheckError):
    """A check could not classify a single pod."""


@dataclass(frozen=True)
class JoinWarning:
    """A pod whose namespace is missing from the namespace snapshot."""

    namespace: str
    pod: str

    def __str__(self) -> str:
        return f"namespace {self.namespace} not found for pod {self.pod}"
