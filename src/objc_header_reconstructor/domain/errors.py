#!/usr/bin/env python3

"""Exception hierarchy for ObjC header reconstruction.

Only the ``ObjcSectionNotFoundError`` signal is recoverable: a binary that
simply lacks a metadata section yields an empty entity list. Every other
error is fatal to the current operation and propagates unchanged to the
caller.
"""


class ReconstructorError(Exception):
    """Base class for all reconstructor errors."""


class ConfigurationError(ReconstructorError):
    """Invalid run configuration (missing shared cache, bad filter pattern)."""


class ObjcSectionNotFoundError(ReconstructorError):
    """The requested ObjC metadata section is not present in a binary."""


class NoObjcMetadataError(ReconstructorError):
    """The binary carries no ObjC metadata at all."""


class MetadataParseError(ReconstructorError):
    """Typed descriptors could not be decoded from a binary."""


class ImageNotFoundError(ReconstructorError):
    """An image could not be located in the shared cache."""


class HeaderWriteError(ReconstructorError):
    """A generated header could not be written to disk."""


class AddressNotFoundError(ReconstructorError):
    """A virtual address is not contained in any known image."""
