from __future__ import annotations

from typing import List, Sequence

from .logging_utils import get_logger

KNOWN_CRITERIA = ("latest", "first")


def _normalize_vods(specific_vods: Sequence[str] | str) -> List[str]:
    if isinstance(specific_vods, str):
        return [p.strip() for p in specific_vods.split(",") if p.strip()]
    return list(specific_vods)


def filter_video_ids(
    video_ids: Sequence[str],
    criteria: str | None = None,
    specific_vods: Sequence[str] | str | None = None,
) -> List[str]:
    """Select the video IDs to process.

    An explicit ``specific_vods`` allow-list (sequence or comma-separated
    string) wins over ``criteria`` and is returned as-is, without checking
    membership in ``video_ids``. Criteria are case-insensitive:
    ``latest`` picks the head of the list and ``first`` the tail.
    Bad input never raises; it degrades to ``[]`` or an unmodified copy.
    """
    log = get_logger()
    if not isinstance(video_ids, (list, tuple)):
        log.error("❌ video IDs must be a list")
        return []

    if len(video_ids) == 0:
        log.info("ℹ️ Empty video ID list provided")
        return []

    if specific_vods is not None:
        log.info("🎯 Using specific VODs filter")
        if not isinstance(specific_vods, (str, list, tuple)):
            log.warning("⚠️ Specific VODs must be a list or comma-separated string")
            return []
        vods = _normalize_vods(specific_vods)
        if not vods:
            log.warning("⚠️ No valid VOD IDs provided in specific VODs")
            return []
        return vods

    if not isinstance(criteria, str) or not criteria.strip():
        log.info("ℹ️ No filtering criteria - processing all videos")
        return list(video_ids)

    log.info("🔍 Applying filter criteria: %s", criteria)
    key = criteria.strip().lower()
    if key == "latest":
        return [video_ids[0]]
    if key == "first":
        return [video_ids[-1]]
    log.warning('⚠️ Unknown filter criteria: "%s", processing all videos', criteria)
    return list(video_ids)


__all__ = ["filter_video_ids", "KNOWN_CRITERIA"]
