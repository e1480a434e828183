"""Result of resolving a single candidate path."""

from dataclasses import dataclass

from .LinkStatus import LinkStatus


@dataclass(frozen=True)
class LinkResolution:
    """Tagged outcome of reading a candidate as a symlink.

    ``target`` is the raw readlink string when the path is a link.
    ``error`` carries the filesystem error text for RESOLUTION_ERROR.
    """

    path: str
    status: LinkStatus
    target: str | None = None
    error: str | None = None
