"""Classify one candidate path as a link with present or missing target."""

import errno
import os

from .LinkResolution import LinkResolution
from .LinkStatus import LinkStatus

# readlink errnos meaning "this is not a link here"
_NOT_A_LINK_ERRNOS = frozenset({errno.EINVAL, errno.ENOENT, errno.ENOTDIR})
# stat errnos meaning "the link target is absent"
_MISSING_TARGET_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR})


def resolve_link(path: str) -> LinkResolution:
    """Read ``path`` as a symlink and check whether its target exists.

    The raw target is resolved relative to the link's own directory. Failures
    other than "not a link" or "target missing" become RESOLUTION_ERROR.
    """
    try:
        target = os.readlink(path)
    except OSError as exc:
        if exc.errno in _NOT_A_LINK_ERRNOS:
            return LinkResolution(path=path, status=LinkStatus.NOT_A_LINK)
        return LinkResolution(path=path, status=LinkStatus.RESOLUTION_ERROR, error=f"Cannot read link: {exc}")

    target_path = os.path.join(os.path.dirname(path), target)
    try:
        os.stat(target_path)
    except OSError as exc:
        if exc.errno in _MISSING_TARGET_ERRNOS:
            return LinkResolution(path=path, status=LinkStatus.TARGET_MISSING, target=target)
        return LinkResolution(
            path=path,
            status=LinkStatus.RESOLUTION_ERROR,
            target=target,
            error=f"Cannot check link target {target}: {exc}",
        )
    return LinkResolution(path=path, status=LinkStatus.TARGET_EXISTS, target=target)
