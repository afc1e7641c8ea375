#!/usr/bin/env python3

"""Classification of ObjC type-encoding strings into type references.

Ivar encodings use the runtime form (``@"NSString"``, ``@"<NSCopying>"``,
``@"NSObject<Foo>"``) while property and method-argument types are written
in declaration style (``NSString *``, ``id<Foo>``). The classifier is a small
parser with four named productions:

- ``object_pointer``: ``@"Name"`` -> class ``Name``
- ``declared_pointer``: ``Name *`` (uppercase ASCII start, trailing ``*``)
  -> class ``Name``; declaration style only
- ``protocol_qualified``: ``NSObject<P1,P2>`` -> protocol ``P1``
- ``protocol_list``: ``<P1,P2>`` anywhere in the string -> protocols ``P1``, ``P2``

A string containing ``<`` or ``>`` is evaluated against both protocol
productions, so one field can yield duplicate protocol candidates; they
collapse during import normalization.
"""

from dataclasses import dataclass
from enum import Enum

from ....infrastructure.logging import get_logger

logger = get_logger(__name__)

ROOT_OBJECT_PREFIX = "NSObject<"


class ReferenceKind(Enum):
    """What a type reference names."""

    CLASS = "class"
    PROTOCOL = "protocol"


class EncodingStyle(Enum):
    """How a type string is written."""

    RUNTIME = "runtime"  # ivar encodings
    DECLARATION = "declaration"  # property and method-argument types


@dataclass(frozen=True)
class TypeReference:
    """A class or protocol name referenced from a type string."""

    kind: ReferenceKind
    name: str


class TypeEncodingClassifier:
    """Classifies type strings into class and protocol references.

    All methods are static as they operate on plain strings without state.
    """

    @staticmethod
    def classify(type_string: str, style: EncodingStyle) -> list[TypeReference]:
        """Classify one type string.

        Args:
            type_string: Raw ivar encoding or declaration-style type
            style: Which form ``type_string`` is written in

        Returns:
            Zero or more references, in production order
        """
        if not type_string:
            return []

        if "<" in type_string or ">" in type_string:
            text = TypeEncodingClassifier._unquote(type_string)
            refs: list[TypeReference] = []
            qualified = TypeEncodingClassifier.protocol_qualified(text)
            if qualified:
                refs.append(TypeReference(ReferenceKind.PROTOCOL, qualified))
            refs.extend(
                TypeReference(ReferenceKind.PROTOCOL, name)
                for name in TypeEncodingClassifier.protocol_list(text)
            )
            return refs

        class_name = TypeEncodingClassifier.object_pointer(type_string)
        if class_name is None and style is EncodingStyle.DECLARATION:
            class_name = TypeEncodingClassifier.declared_pointer(type_string)
        if class_name:
            return [TypeReference(ReferenceKind.CLASS, class_name)]

        return []

    @staticmethod
    def object_pointer(type_string: str) -> str | None:
        """Match ``@"Name"`` and return ``Name``.

        Examples:
            - ``@"NSString"``: ``NSString``
            - ``@`` (bare id): None
            - ``@?`` (block): None
        """
        if not type_string.startswith('@"'):
            return None
        name = type_string[2:]
        if name.endswith('"'):
            name = name[:-1]
        return name or None

    @staticmethod
    def declared_pointer(type_string: str) -> str | None:
        """Match a declaration-style object pointer such as ``NSString *``.

        The heuristic separating ObjC object pointers from C scalars and
        structs: the type starts with an uppercase ASCII letter and ends with
        ``*`` once surrounding spaces are ignored.
        """
        text = type_string.strip(" ")
        if not text or not ("A" <= text[0] <= "Z") or not text.endswith("*"):
            return None
        name = text.strip(" *")
        return name or None

    @staticmethod
    def protocol_qualified(text: str) -> str | None:
        """Match ``NSObject<P1,...>`` and return the first protocol name."""
        if not text.startswith(ROOT_OBJECT_PREFIX):
            return None
        names = TypeEncodingClassifier._split_protocols(text[len(ROOT_OBJECT_PREFIX) :])
        return names[0] if names else None

    @staticmethod
    def protocol_list(text: str) -> list[str]:
        """Return every protocol named in the ``<...>`` list of ``text``."""
        start = text.find("<")
        if start == -1:
            return []
        return TypeEncodingClassifier._split_protocols(text[start + 1 :])

    @staticmethod
    def _split_protocols(text: str) -> list[str]:
        end = text.find(">")
        if end != -1:
            text = text[:end]
        names = []
        for token in text.split(","):
            name = token.strip(" <>")
            # Generic arguments such as NSArray<NSString *> are pointers, not protocols
            if "*" in name or not name.isidentifier():
                continue
            names.append(name)
        return names

    @staticmethod
    def _unquote(type_string: str) -> str:
        """Strip ``@"``/``"`` wrapping, then surrounding ``*`` and spaces."""
        return type_string.strip('@"').strip(" *")
