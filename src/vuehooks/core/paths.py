"""
Output path rules.

A rule maps the physical path of a host component to the path, relative
to the output directory, under which its generated hooks are written.
"""

from __future__ import annotations

from collections.abc import Callable

from .errors import InvalidArgumentError

OutputPathRule = Callable[[str], str]

DEFAULT_VENDOR_SEGMENT = "/vendor/"


class VendorSegmentRule:
    """
    Strip everything up to and including a vendoring directory segment.

    Example:
        rule = VendorSegmentRule()
        rule("/srv/app/vendor/guzaba-platform/navigation/components/AddLink.vue")
        # -> "guzaba-platform/navigation/components/AddLink.vue"
    """

    def __init__(self, segment: str = DEFAULT_VENDOR_SEGMENT):
        if not segment:
            raise ValueError("segment must not be empty")
        self.segment = segment

    def __call__(self, physical_path: str) -> str:
        pos = physical_path.find(self.segment)
        if pos == -1:
            raise InvalidArgumentError(
                f'Component {physical_path} is not under a "{self.segment}" directory.'
            )
        return physical_path[pos + len(self.segment):]

    def __repr__(self) -> str:
        return f"VendorSegmentRule({self.segment!r})"
