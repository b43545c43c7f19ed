from .operation import Operation, OperationKind

__all__ = ["Operation", "OperationKind"]
