"""Group annotated clips by clipper and rank them."""

from collections.abc import Iterable

from clipstats.models.clip import AnnotatedClip, ClipperSummary


def aggregate(annotated: Iterable[AnnotatedClip]) -> list[ClipperSummary]:
    """
    Build one summary per clipper, ranked by total views (highest first).

    Summaries keep clips in input order. Ties keep first-seen order
    (``sorted`` is stable), there is no secondary key.
    """
    summaries: dict[str, ClipperSummary] = {}

    for item in annotated:
        name = item.clip.clipper
        summary = summaries.get(name)
        if summary is None:
            summary = summaries[name] = ClipperSummary(clipper=name)
        summary.add(item)

    return sorted(summaries.values(), key=lambda s: s.total_views, reverse=True)
