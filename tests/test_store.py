"""Tests for the JSON clip store and clip ingestion."""

import json
from unittest.mock import patch

import pytest

from clipstats.core.store import ClipStore, ClipStoreError, get_clip_store, reset_clip_store
from clipstats.models.clip import Clip, Platform
from clipstats.services.clips import create_clip

from conftest import make_clip


class TestClipStore:
    """File-backed list/append/remove."""

    def test_missing_file_is_empty(self, store):
        assert store.list_clips() == []

    def test_append_and_list_in_order(self, store):
        first = make_clip("A", offset=0)
        second = make_clip("B", platform="twitter", video_id="55", offset=1)
        store.append_clip(first)
        store.append_clip(second)

        assert store.list_clips() == [first, second]

    def test_wire_format(self, store):
        store.append_clip(make_clip("A", video_id=None, clip_id="c1"))
        raw = json.loads(store.path.read_text())

        assert list(raw) == ["clips"]
        assert raw["clips"][0]["id"] == "c1"
        assert raw["clips"][0]["videoId"] is None
        assert raw["clips"][0]["addedAt"].startswith("2024-05-01T12:00:00")

    def test_remove(self, store):
        store.append_clip(make_clip("A", clip_id="keep"))
        store.append_clip(make_clip("B", clip_id="drop"))

        assert store.remove_clip("drop") is True
        assert [c.id for c in store.list_clips()] == ["keep"]
        assert store.remove_clip("drop") is False

    def test_corrupt_file_raises(self, store):
        store.path.write_text("[1, 2")
        with pytest.raises(ClipStoreError):
            store.list_clips()

    def test_wrong_shape_raises(self, store):
        store.path.write_text(json.dumps({"items": []}))
        with pytest.raises(ClipStoreError):
            store.list_clips()

    def test_malformed_record_raises(self, store):
        store.path.write_text(json.dumps({"clips": [{"id": "1"}]}))
        with pytest.raises(ClipStoreError):
            store.list_clips()

    @pytest.mark.parametrize("record", ["x", None, 5, [1]])
    def test_non_object_record_raises(self, store, record):
        """Every clip entry must be a JSON object."""
        store.path.write_text(json.dumps({"clips": [record]}))
        with pytest.raises(ClipStoreError):
            store.list_clips()
        with pytest.raises(ClipStoreError):
            store.remove_clip("1")

    def test_reads_original_records(self, tmp_path):
        """Records with a Z timestamp and numeric-string ids load."""
        path = tmp_path / "clips.json"
        path.write_text(json.dumps({"clips": [{
            "id": "1715000000000",
            "clipper": "sam",
            "platform": "youtube",
            "url": "https://youtube.com/shorts/abc",
            "videoId": "abc",
            "addedAt": "2024-05-06T12:53:20.000Z",
        }]}))

        clip = ClipStore(path).list_clips()[0]
        assert clip.video_id == "abc"
        assert clip.added_at.tzinfo is not None


class TestCreateClip:
    """Ingestion derives the id once, at creation."""

    def test_extracts_id_and_stores(self, store):
        clip = create_clip(store, " sam ", "YouTube", "https://youtube.com/shorts/abc_1")

        assert clip.clipper == "sam"
        assert clip.platform == "youtube"
        assert clip.video_id == "abc_1"
        assert store.list_clips() == [clip]

    def test_unrecognized_url_stored_without_id(self, store):
        clip = create_clip(store, "sam", Platform.TWITTER, "https://x.com/sam")

        assert clip.video_id is None
        assert store.list_clips()[0].video_id is None

    def test_unique_ids(self, store):
        a = create_clip(store, "sam", "twitter", "https://x.com/a/status/1")
        b = create_clip(store, "sam", "twitter", "https://x.com/a/status/1")
        assert a.id != b.id

    def test_blank_clipper_rejected(self, store):
        with pytest.raises(ValueError):
            create_clip(store, "   ", "youtube", "https://youtube.com/shorts/x")
        assert store.list_clips() == []

    def test_round_trip_preserves_clip(self, store):
        clip = create_clip(store, "sam", "facebook", "https://facebook.com/p/videos/42")
        assert Clip.from_dict(clip.to_dict()) == clip


class TestClipStoreSingleton:
    """get_clip_store follows the configured clips_file."""

    @pytest.fixture(autouse=True)
    def fresh_singleton(self):
        reset_clip_store()
        yield
        reset_clip_store()

    def test_uses_settings_path(self, settings):
        with patch("clipstats.core.store.get_settings", return_value=settings):
            store = get_clip_store()
            assert store.path == settings.clips_file
            assert get_clip_store() is store

    def test_reset_rereads_settings(self, settings, tmp_path):
        other = settings.model_copy(update={"clips_file": tmp_path / "other.json"})
        with patch("clipstats.core.store.get_settings", return_value=settings):
            first = get_clip_store()
        reset_clip_store()
        with patch("clipstats.core.store.get_settings", return_value=other):
            second = get_clip_store()

        assert first is not second
        assert second.path == tmp_path / "other.json"
