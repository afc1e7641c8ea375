#!/usr/bin/env python3

"""Unit tests for Foundation index construction."""

from unittest.mock import Mock

import pytest

from objc_header_reconstructor.domain.errors import ImageNotFoundError, MetadataParseError
from objc_header_reconstructor.domain.services.generation import build_foundation_index


@pytest.mark.unit
class TestBuildFoundationIndex:
    """Test suite for build_foundation_index."""

    def test_without_shared_cache(self):
        """Test no cache means an empty index."""
        index = build_foundation_index(None)

        assert len(index) == 0

    def test_collects_both_images(self, foundation_images):
        """Test classes and protocols of Foundation and CoreFoundation are merged."""
        index = build_foundation_index(foundation_images)

        assert index.classes == ("NSArray", "NSObject", "NSString")
        assert index.protocols == ("NSCopying", "NSObject")
        assert foundation_images.requested == ["Foundation", "CoreFoundation"]

    def test_missing_sections_are_empty(self, make_binary, make_images):
        """Test an image without ObjC sections contributes nothing."""
        images = make_images(
            {"Foundation": make_binary("Foundation"), "CoreFoundation": make_binary("CF")}
        )

        assert len(build_foundation_index(images)) == 0

    def test_missing_image_is_fatal(self, make_binary, make_images):
        """Test a missing reference image propagates."""
        images = make_images({"Foundation": make_binary("Foundation", classes=[])})

        with pytest.raises(ImageNotFoundError):
            build_foundation_index(images)

    def test_parse_error_is_fatal(self):
        """Test malformed reference metadata propagates."""
        image = Mock()
        image.objc_classes.side_effect = MetadataParseError("bad classes")
        provider = Mock()
        provider.image.return_value = image

        with pytest.raises(MetadataParseError):
            build_foundation_index(provider)

    def test_custom_image_names(self, foundation_images):
        """Test only the requested images are scanned."""
        index = build_foundation_index(foundation_images, image_names=("CoreFoundation",))

        assert index.classes == ("NSArray",)
        assert index.protocols == ()
