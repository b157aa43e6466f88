from .array_sequence import ArraySequence, DEFAULT_CAPACITY
from .linked_sequence import LinkedSequence
from .errors import SequenceError, InvalidArgument, IndexOutOfRange, ConcurrentStructuralChange

__all__ = [
    "ArraySequence",
    "LinkedSequence",
    "DEFAULT_CAPACITY",
    "SequenceError",
    "InvalidArgument",
    "IndexOutOfRange",
    "ConcurrentStructuralChange",
]
