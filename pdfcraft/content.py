"""Content stream operations."""

from dataclasses import dataclass, field

from .objects import write_object


@dataclass
class Operation:
    """An operator with its operands."""

    operator: str
    operands: list = field(default_factory=list)


@dataclass
class Content:
    """A sequence of content stream operations."""

    operations: list = field(default_factory=list)

    def encode(self):
        """Serialise the operations, one per line."""
        return b"\n".join(
            b"".join(write_object(op) + b" " for op in operation.operands)
            + operation.operator.encode("latin-1")
            for operation in self.operations
        )