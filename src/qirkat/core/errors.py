"""Exceptions raised by the Qirkat core.

- QirkatError: base class for every error the core raises on purpose
- InvalidConfigurationError: a board description or side indicator was
  malformed; reported to the caller before any state changes
- ContractViolationError: the caller broke a precondition (bad square index,
  undo without history, mutation through a read-only view); not meant to be
  caught and retried
"""

from __future__ import annotations


class QirkatError(Exception):
    """Base exception for all Qirkat errors."""


class InvalidConfigurationError(QirkatError, ValueError):
    """Malformed board description or missing side to move."""


class ContractViolationError(QirkatError, RuntimeError):
    """A programming-contract violation detected by the core."""
