#!/usr/bin/env python3

"""Method information model for ObjC metadata."""

from dataclasses import dataclass, field

# Hidden arguments supplied by the compiler: receiver (self) and selector (_cmd)
RECEIVER_INDEX = 0
SELECTOR_INDEX = 1
FIRST_EXPLICIT_ARGUMENT = 2


@dataclass(frozen=True)
class MethodInfo:
    """Information about an instance or class method.

    ``argument_types`` follows the ObjC calling convention: index 0 is the
    receiver, index 1 the selector, explicit arguments start at index 2.
    All types are declaration style.
    """

    name: str
    return_type: str = "void"
    argument_types: tuple[str, ...] = field(default_factory=tuple)

    @property
    def number_of_arguments(self) -> int:
        return len(self.argument_types)

    def argument_type(self, index: int) -> str:
        """Return the declaration-style type of argument ``index``."""
        return self.argument_types[index]

    @property
    def explicit_argument_types(self) -> tuple[str, ...]:
        return self.argument_types[FIRST_EXPLICIT_ARGUMENT:]
