"""Deferred arithmetic over Money, resolved against a rate table."""

from monet.domain.operation.operation import DeferredOperation, OperationKind, sum_of
from monet.domain.operation.resolution import Resolution, ResolutionAction, ResolutionState

__all__ = [
    "DeferredOperation",
    "OperationKind",
    "sum_of",
    "Resolution",
    "ResolutionAction",
    "ResolutionState",
]
