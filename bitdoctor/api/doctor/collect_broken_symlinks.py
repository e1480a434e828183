"""Resolve candidates concurrently and collect the broken ones."""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from ...utils.get_logger import get_logger
from .BrokenSymlink import BrokenSymlink
from .get_path_to_delete import get_path_to_delete
from .LinkStatus import LinkStatus
from .ResolutionFailure import ResolutionFailure
from .resolve_link import resolve_link

logger = get_logger("doctor.collect")


def collect_broken_symlinks(
    paths: Sequence[str],
    max_workers: int | None = None,
) -> tuple[list[BrokenSymlink], list[ResolutionFailure]]:
    """Resolve every path on a thread pool and gather the outcomes.

    Each task returns its own LinkResolution; the lists are built only after
    all tasks have completed, in the order of ``paths``.

    Args:
        paths: Candidate paths from the scanner
        max_workers: Thread pool size (None uses the executor default)

    Returns:
        (broken symlinks, resolution failures)
    """
    if not paths:
        return [], []

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="bitdoctor-resolve") as executor:
        resolutions = list(executor.map(resolve_link, paths))

    broken: list[BrokenSymlink] = []
    failures: list[ResolutionFailure] = []
    for resolution in resolutions:
        if resolution.status == LinkStatus.TARGET_MISSING:
            broken.append(
                BrokenSymlink(
                    symlink_path=resolution.path,
                    broken_path=resolution.target or "",
                    path_to_delete=get_path_to_delete(resolution.path),
                )
            )
        elif resolution.status == LinkStatus.RESOLUTION_ERROR:
            logger.warning("Could not resolve %s: %s", resolution.path, resolution.error)
            failures.append(ResolutionFailure(symlink_path=resolution.path, error=resolution.error or "unknown error"))

    logger.debug("Resolved %d path(s): %d broken, %d failed", len(resolutions), len(broken), len(failures))
    return broken, failures
