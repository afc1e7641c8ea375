#!/usr/bin/env python3

"""ObjC header text assembly and output.

Each generated header has the following fixed layout::

    //
    //   Generated by <tool> (<version>)
    //
    //    - LC_BUILD_VERSION:  <build version>     (one line per version)
    //    - LC_SOURCE_VERSION: <source version>
    //
    #ifndef <Name>_h
    #define <Name>_h
    @import Foundation;                          (not in umbrella headers)

    #include "<Local>.h"                          (one per local, then a blank)
    @class A, B;
    @protocol P, Q;
                                                  (blank if any forward decls)
    <body>
    #endif /* <Name>_h */
"""

from pathlib import Path

from ....infrastructure.config import get_config
from ....infrastructure.logging import get_logger
from ...errors import HeaderWriteError
from ...models.objc import HeaderInfo

logger = get_logger(__name__)


def include_guard_name(name: str) -> str:
    """Identifier used in the ``#ifndef``/``#define`` guard, without ``_h``."""
    return name.replace("-", "_")


class HeaderAssembler:
    """Renders HeaderInfo values and writes them to disk."""

    def __init__(self, tool_name: str | None = None):
        """Initialize header assembler.

        Args:
            tool_name: Name shown in the generated-by banner (defaults to config)
        """
        config = get_config()
        self.tool_name = tool_name or config["TOOL_NAME"]
        self.directory_mode = config["DIRECTORY_MODE"]
        self.root_framework = config["ROOT_FRAMEWORK"]

    def render(self, info: HeaderInfo) -> str:
        """Render the complete header text for ``info``."""
        guard = include_guard_name(info.name)
        lines = [
            "//",
            f"//   Generated by {self.tool_name} ({info.tool_version})",
            "//",
        ]
        lines.extend(f"//    - LC_BUILD_VERSION:  {version}" for version in info.build_versions)
        lines.append(f"//    - LC_SOURCE_VERSION: {info.source_version}")
        lines.extend(["//", f"#ifndef {guard}_h", f"#define {guard}_h"])

        if not info.is_umbrella:
            lines.append(f"@import {self.root_framework};")
            lines.extend(
                f"@import {framework};"
                for framework in info.imports.imports
                if framework != self.root_framework
            )
        lines.append("")

        if info.imports.locals:
            lines.extend(f'#include "{local}"' for local in info.imports.locals)
            lines.append("")

        if info.imports.classes:
            lines.append(f"@class {', '.join(info.imports.classes)};")
        if info.imports.protos:
            lines.append(f"@protocol {', '.join(info.imports.protos)};")
        if info.imports.classes or info.imports.protos:
            lines.append("")

        lines.append(info.body)
        lines.append(f"#endif /* {guard}_h */")
        return "\n".join(lines) + "\n"

    def write(self, info: HeaderInfo) -> Path:
        """Render ``info`` and write it, creating parent directories.

        Existing files are overwritten.

        Returns:
            Path of the written header

        Raises:
            HeaderWriteError: If the directory or file cannot be written
        """
        content = self.render(info)
        try:
            info.path.parent.mkdir(mode=self.directory_mode, parents=True, exist_ok=True)
            logger.info(f"Creating {info.path}")
            info.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise HeaderWriteError(f"failed to write header {info.path}: {e}") from e
        return info.path
