"""Verdict — the result of validating a single string.

INVARIANT: ``ok`` is True exactly when ``error`` is None.
Malformed input produces a failure Verdict, never an exception.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from fqdncheck.domain.types import ErrorKind, HostKind


class Verdict(BaseModel):
    """Outcome of one validation call.

    Attributes:
        ok: Whether the string is usable as a host identifier.
        host_kind: How the string was recognized, set on success.
        error: The first rule the string broke, set on failure.
        label_index: Zero-based index of the offending label, if any.
        position: Byte offset into the input where the offending label starts.
    """

    model_config = {"frozen": True}

    ok: bool
    host_kind: HostKind | None = None
    error: ErrorKind | None = None
    label_index: int | None = None
    position: int | None = None

    @model_validator(mode="after")
    def check_consistency(self) -> Verdict:
        if self.ok and self.error is not None:
            raise ValueError("a successful verdict cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("a failed verdict must carry an error")
        return self

    @classmethod
    def success(cls, host_kind: HostKind) -> Verdict:
        return cls(ok=True, host_kind=host_kind)

    @classmethod
    def failure(
        cls,
        error: ErrorKind,
        *,
        label_index: int | None = None,
        position: int | None = None,
    ) -> Verdict:
        return cls(ok=False, error=error, label_index=label_index, position=position)
