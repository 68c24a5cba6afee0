"""Data models for clips, metrics snapshots and clipper summaries."""

from clipstats.models.clip import AnnotatedClip, Clip, ClipperSummary, MetricsSnapshot, Platform

__all__ = ["AnnotatedClip", "Clip", "ClipperSummary", "MetricsSnapshot", "Platform"]
