"""Appliance version model.

Versions are compared field by field as integers. Dotted strings are never
compared lexically, so ``3.9.0`` sorts below ``3.10.0``.
"""

import re
from dataclasses import dataclass
from typing import Final

_LEADING_DIGITS: Final = re.compile(r"^\d+")


@dataclass(frozen=True, order=True)
class Version:
    """Release version ordered by (major, minor, patch)."""

    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise ValueError(f"Version {name} must be non-negative")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a dotted version string.

        Only the first three dot-separated fields are significant and each
        contributes its leading digits, so ``"3.5.0-rc1"`` parses as 3.5.0.
        A leading ``v`` is accepted. Missing minor/patch fields default to 0.

        Raises:
            ValueError: If the major field has no leading digits.
        """
        value = text.strip()
        if value[:1] in ("v", "V"):
            value = value[1:]

        fields: list[int] = []
        for part in value.split(".")[:3]:
            match = _LEADING_DIGITS.match(part)
            if match is None:
                break
            fields.append(int(match.group()))
            # Anything after a non-numeric suffix is not part of the version
            if match.end() != len(part):
                break

        if not fields:
            raise ValueError(f"Unparseable version: {text!r}")

        return cls(*fields)

    @property
    def ordinal(self) -> int:
        """Single integer encoding, monotonic for fields below 100."""
        return self.major * 10000 + self.minor * 100 + self.patch

    @property
    def release(self) -> "Version":
        """The major.minor release line this version belongs to."""
        return Version(self.major, self.minor, 0)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
