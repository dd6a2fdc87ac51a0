"""Unit tests for destination path derivation."""
import os

import pytest

from batch_rotate.application.services.path_resolver import build_suffix, resolve_destination_path

pytestmark = pytest.mark.unit


class TestBuildSuffix:
    """Tests for build_suffix."""

    @pytest.mark.parametrize("template", ["", "   ", "\t", None])
    def test_blank_template_uses_default(self, template):
        assert build_suffix(template, 90) == "_r90"

    def test_default_suffix_with_zero_angle(self):
        assert build_suffix("", 0) == "_r0"

    def test_placeholder_is_replaced(self):
        assert build_suffix("_rot{angle}", 270) == "_rot270"

    @pytest.mark.parametrize("template", ["_rot{ANGLE}", "_rot{Angle}", "_rot{aNgLe}"])
    def test_placeholder_match_is_case_insensitive(self, template):
        assert build_suffix(template, 270) == "_rot270"

    def test_every_placeholder_occurrence_is_replaced(self):
        assert build_suffix("-{angle}-{ANGLE}", 180) == "-180-180"

    def test_template_without_placeholder_is_verbatim(self):
        assert build_suffix("_turned", 90) == "_turned"


class TestResolveDestinationPath:
    """Tests for resolve_destination_path."""

    def test_candidate_keeps_source_extension(self, tmp_path):
        result = resolve_destination_path(str(tmp_path), "/some/where/photo.JPG", 90, "", False)
        assert result == os.path.join(str(tmp_path), "photo_r90.JPG")

    def test_only_last_extension_is_split(self, tmp_path):
        result = resolve_destination_path(str(tmp_path), "archive.tar.png", 180, "", True)
        assert result == os.path.join(str(tmp_path), "archive.tar_r180.png")

    def test_overwrite_returns_existing_candidate(self, tmp_path):
        (tmp_path / "photo_r90.png").write_bytes(b"x")
        result = resolve_destination_path(str(tmp_path), "photo.png", 90, "", True)
        assert result == os.path.join(str(tmp_path), "photo_r90.png")

    def test_collision_appends_counter(self, tmp_path):
        (tmp_path / "photo_r90.png").write_bytes(b"x")
        result = resolve_destination_path(str(tmp_path), "photo.png", 90, "", False)
        assert result == os.path.join(str(tmp_path), "photo_r90_1.png")

    def test_collision_counter_increments(self, tmp_path):
        (tmp_path / "photo_r90.png").write_bytes(b"x")
        (tmp_path / "photo_r90_1.png").write_bytes(b"x")
        result = resolve_destination_path(str(tmp_path), "photo.png", 90, "", False)
        assert result == os.path.join(str(tmp_path), "photo_r90_2.png")

    def test_directory_counts_as_collision(self, tmp_path):
        (tmp_path / "photo_r90.png").mkdir()
        result = resolve_destination_path(str(tmp_path), "photo.png", 90, "", False)
        assert result == os.path.join(str(tmp_path), "photo_r90_1.png")

    def test_counter_goes_after_custom_suffix(self, tmp_path):
        (tmp_path / "photo_rot270.png").write_bytes(b"x")
        result = resolve_destination_path(str(tmp_path), "photo.png", 270, "_rot{angle}", False)
        assert result == os.path.join(str(tmp_path), "photo_rot270_1.png")

    def test_resolution_is_idempotent(self, tmp_path):
        (tmp_path / "photo_r90.png").write_bytes(b"x")
        first = resolve_destination_path(str(tmp_path), "photo.png", 90, "", False)
        second = resolve_destination_path(str(tmp_path), "photo.png", 90, "", False)
        assert first == second

    def test_resolution_has_no_side_effects(self, tmp_path):
        resolve_destination_path(str(tmp_path / "missing"), "photo.png", 90, "", False)
        assert not (tmp_path / "missing").exists()
