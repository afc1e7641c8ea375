#!/usr/bin/env python3

"""Shared-cache address lookup services."""

from .address_resolver import (
    AddressResolver,
    FunctionMatch,
    parse_address,
    read_addresses,
    write_matches,
)

__all__ = [
    "AddressResolver",
    "FunctionMatch",
    "parse_address",
    "read_addresses",
    "write_matches",
]
