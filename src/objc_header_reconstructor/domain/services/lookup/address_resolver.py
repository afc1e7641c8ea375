#!/usr/bin/env python3

"""Lookup of the image and function containing a shared-cache address.

Independent of header reconstruction; shares no state with it.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, TextIO

from ....infrastructure.logging import get_logger
from ...errors import ConfigurationError
from ...repositories import AddressSpace

logger = get_logger(__name__)


def parse_address(text: str) -> int:
    """Parse a ``0x``-prefixed hexadecimal or a decimal address.

    Raises:
        ConfigurationError: If ``text`` is not a valid address
    """
    value = text.strip()
    try:
        if value.lower().startswith("0x"):
            return int(value[2:], 16)
        return int(value, 10)
    except ValueError as e:
        raise ConfigurationError(f"invalid address {text!r}") from e


@dataclass(frozen=True)
class FunctionMatch:
    """A resolved function for one looked-up address."""

    addr: int
    start: int
    end: int
    name: str = ""
    image: str = ""

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def offset(self) -> int:
        return self.addr - self.start

    def to_dict(self) -> dict[str, Any]:
        """JSON form; zero and empty fields are omitted."""
        data: dict[str, Any] = {
            "addr": self.addr,
            "start": self.start,
            "end": self.end,
            "size": self.size,
            "name": self.name,
            "image": self.image,
        }
        return {key: value for key, value in data.items() if value}


class AddressResolver:
    """Resolve virtual addresses to functions of a shared cache."""

    def __init__(self, address_space: AddressSpace, slide: int = 0):
        """Initialize address resolver.

        Args:
            address_space: Shared cache lookups
            slide: Slide subtracted from every looked-up address
        """
        self.address_space = address_space
        self.slide = slide

    def unslide(self, addr: int) -> int:
        if self.slide > 0:
            return addr - self.slide
        return addr

    def lookup(self, addr: int) -> FunctionMatch | None:
        """Find the function containing ``addr``.

        Returns:
            The match, or None when the image has no function at ``addr``

        Raises:
            AddressNotFoundError: If no image contains the address
        """
        unslid = self.unslide(addr)
        image = self.address_space.image_containing(unslid)
        function = image.function_for_addr(unslid)
        if function is None:
            return None

        name = self.address_space.symbol_at(function.start) or function.name
        return FunctionMatch(
            addr=unslid,
            start=function.start,
            end=function.end,
            name=name,
            image=PurePosixPath(image.name).name,
        )

    def lookup_many(self, addrs: Iterable[int]) -> list[FunctionMatch]:
        """Resolve a batch of addresses, grouped by containing image.

        Every address must fall inside some image; addresses that are not
        inside a known function are skipped.
        """
        by_image: dict[str, list[int]] = {}
        for addr in addrs:
            unslid = self.unslide(addr)
            image = self.address_space.image_containing(unslid)
            by_image.setdefault(image.name, []).append(addr)

        matches: list[FunctionMatch] = []
        for image_name, image_addrs in by_image.items():
            for addr in image_addrs:
                match = self.lookup(addr)
                if match is None:
                    logger.debug(f"{self.unslide(addr):#x} is not in any function of {image_name}")
                    continue
                matches.append(match)
        return matches

    @staticmethod
    def describe(addr: int, match: FunctionMatch) -> str:
        """Human-readable line for a single-address lookup."""
        bounds = f"(start: {match.start:#x}, end: {match.end:#x})"
        if not match.name:
            return f"{addr:#x}: func_{addr:x} {bounds}"
        if match.offset == 0:
            return f"{addr:#x}: {match.name} {bounds}"
        return f"{addr:#x}: {match.name} + {match.offset} {bounds}"


def read_addresses(stream: TextIO) -> list[int]:
    """Read newline-delimited addresses, skipping blank lines."""
    return [parse_address(line) for line in stream if line.strip()]


def write_matches(matches: Iterable[FunctionMatch], stream: TextIO) -> None:
    """Write matches as a JSON array followed by a newline."""
    json.dump([match.to_dict() for match in matches], stream)
    stream.write("\n")
