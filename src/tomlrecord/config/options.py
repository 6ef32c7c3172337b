# topmark:header:start
#
#   project      : TomlRecord
#   file         : options.py
#   file_relpath : src/tomlrecord/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Codec options (frozen runtime view and mutable tri-state builder).

Design:
    * ``MutableCodecOptions`` uses tri-state fields (``None`` = unset) so that
      option sources (defaults, option file, CLI flags) merge without clobbering
      explicit values.
    * ``CodecOptions`` is the fully-resolved, immutable view handed to the codec.

TOML mapping (``tomlrecord.toml``, or ``[tool.tomlrecord]`` in ``pyproject.toml``):

    multiline_strings = true
    narrow_integral_floats = true
    max_depth = 64
    strict = false
    section_spacing = true
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from tomlrecord.config.keys import Toml
from tomlrecord.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tomlrecord.config.logging import TomlRecordLogger

logger: TomlRecordLogger = get_logger(__name__)

DEFAULT_MAX_DEPTH: Final[int] = 64


@dataclass(frozen=True, slots=True)
class CodecOptions:
    """Immutable options used by the reader and the writer.

    Attributes:
        multiline_strings (bool): Emit text containing newlines as multi-line strings.
        narrow_integral_floats (bool): Emit integral floats (e.g. ``3.0``) as TOML
            integers when they fit the signed 64-bit range.
        max_depth (int): Maximum nesting depth of tables and arrays.
        strict (bool): Raise `UnsupportedValueError` instead of skipping values that
            have no mapping.
        section_spacing (bool): Emit a blank line before each section header.
    """

    multiline_strings: bool = True
    narrow_integral_floats: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    strict: bool = False
    section_spacing: bool = True

    def thaw(self) -> MutableCodecOptions:
        """Return a mutable builder initialized from these options."""
        return MutableCodecOptions(
            multiline_strings=self.multiline_strings,
            narrow_integral_floats=self.narrow_integral_floats,
            max_depth=self.max_depth,
            strict=self.strict,
            section_spacing=self.section_spacing,
        )


@dataclass
class MutableCodecOptions:
    """Mutable builder for `CodecOptions`, merged last-wins.

    Every field mirrors `CodecOptions`; ``None`` means "inherit".
    """

    multiline_strings: bool | None = None
    narrow_integral_floats: bool | None = None
    max_depth: int | None = None
    strict: bool | None = None
    section_spacing: bool | None = None

    def merge_with(self, other: MutableCodecOptions) -> MutableCodecOptions:
        """Return new options with ``other`` applied over ``self``.

        ``None`` fields in ``other`` do not override explicit values in ``self``.
        """

        def pick(current: Any, override: Any) -> Any:
            return override if override is not None else current

        return MutableCodecOptions(
            multiline_strings=pick(self.multiline_strings, other.multiline_strings),
            narrow_integral_floats=pick(self.narrow_integral_floats, other.narrow_integral_floats),
            max_depth=pick(self.max_depth, other.max_depth),
            strict=pick(self.strict, other.strict),
            section_spacing=pick(self.section_spacing, other.section_spacing),
        )

    def resolve(self, base: CodecOptions) -> CodecOptions:
        """Fill unset fields from ``base`` and return frozen options."""
        return CodecOptions(
            multiline_strings=(
                base.multiline_strings if self.multiline_strings is None else self.multiline_strings
            ),
            narrow_integral_floats=(
                base.narrow_integral_floats
                if self.narrow_integral_floats is None
                else self.narrow_integral_floats
            ),
            max_depth=base.max_depth if self.max_depth is None else self.max_depth,
            strict=base.strict if self.strict is None else self.strict,
            section_spacing=(
                base.section_spacing if self.section_spacing is None else self.section_spacing
            ),
        )

    def freeze(self) -> CodecOptions:
        """Freeze using the default `CodecOptions` for unset fields."""
        return self.resolve(CodecOptions())

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None) -> MutableCodecOptions:
        """Create options from a TOML table mapping.

        Unknown keys are ignored with a warning. ``max_depth`` must be a positive
        integer; every other key must be a boolean.

        Raises:
            ValueError: If a value has the wrong type or ``max_depth`` is not positive.
        """
        if not tbl:
            return cls()

        for key in tbl:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown option %r", key)

        def pick(key: str) -> bool | None:
            if key not in tbl:
                return None
            raw: Any = tbl[key]
            if not isinstance(raw, bool):
                raise ValueError(f"{key} must be true or false, got {raw!r}")
            return raw

        max_depth: int | None = None
        if Toml.KEY_MAX_DEPTH in tbl:
            raw: Any = tbl[Toml.KEY_MAX_DEPTH]
            if isinstance(raw, bool) or not isinstance(raw, int) or raw < 1:
                raise ValueError(f"{Toml.KEY_MAX_DEPTH} must be a positive integer, got {raw!r}")
            max_depth = raw

        return cls(
            multiline_strings=pick(Toml.KEY_MULTILINE_STRINGS),
            narrow_integral_floats=pick(Toml.KEY_NARROW_INTEGRAL_FLOATS),
            max_depth=max_depth,
            strict=pick(Toml.KEY_STRICT),
            section_spacing=pick(Toml.KEY_SECTION_SPACING),
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize only explicitly set keys to a TOML-friendly dict."""
        out: dict[str, Any] = {}
        if self.multiline_strings is not None:
            out[Toml.KEY_MULTILINE_STRINGS] = self.multiline_strings
        if self.narrow_integral_floats is not None:
            out[Toml.KEY_NARROW_INTEGRAL_FLOATS] = self.narrow_integral_floats
        if self.max_depth is not None:
            out[Toml.KEY_MAX_DEPTH] = self.max_depth
        if self.strict is not None:
            out[Toml.KEY_STRICT] = self.strict
        if self.section_spacing is not None:
            out[Toml.KEY_SECTION_SPACING] = self.section_spacing
        return out
