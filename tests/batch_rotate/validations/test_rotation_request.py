"""Unit tests for rotation request validation."""
import pytest
from pydantic import ValidationError

from batch_rotate.domain.exceptions import RotationValidationError
from batch_rotate.validations.rotation_request import (
    RotationRequestModel,
    resolve_output_folder,
    validate_angle,
    validate_suffix,
)

pytestmark = pytest.mark.unit


class TestValidateAngle:
    """Tests for validate_angle."""

    @pytest.mark.parametrize("angle,expected", [(0, 0), (90, 90), (-90, 270), (540, 180), (360, 0)])
    def test_multiples_of_90(self, angle, expected):
        assert validate_angle(angle) == expected

    @pytest.mark.parametrize("angle", [1, 45, -30, 100, 359])
    def test_other_angles_rejected(self, angle):
        with pytest.raises(RotationValidationError, match="multiple of 90"):
            validate_angle(angle)


class TestValidateSuffix:
    """Tests for validate_suffix."""

    def test_strips_whitespace(self):
        assert validate_suffix("  _rot{angle} ") == "_rot{angle}"

    def test_none_is_empty(self):
        assert validate_suffix(None) == ""

    @pytest.mark.parametrize("suffix", ["a/b", "a\\b", "x:y", "what?", "star*", "<>", "pipe|", 'q"', "tab\there"])
    def test_illegal_characters_rejected(self, suffix):
        with pytest.raises(RotationValidationError):
            validate_suffix(suffix)


class TestResolveOutputFolder:
    """Tests for resolve_output_folder."""

    def test_explicit_output(self):
        assert resolve_output_folder("/out", "/in") == "/out"

    def test_falls_back_to_input(self):
        assert resolve_output_folder("  ", "/in") == "/in"

    def test_nothing_to_fall_back_to(self):
        with pytest.raises(RotationValidationError):
            resolve_output_folder("", None)


class TestRotationRequestModel:
    """Tests for RotationRequestModel."""

    def test_valid_request_with_files(self):
        model = RotationRequestModel(files=["a.png"], output_folder="/out", angle=-90, suffix=" _x ")
        assert model.angle == 270
        assert model.suffix == "_x"
        assert model.overwrite is False

    def test_output_defaults_to_input_folder(self):
        model = RotationRequestModel(input_folder="/in")
        assert model.output_folder == "/in"
        assert model.angle == 90

    def test_requires_files_or_input_folder(self):
        with pytest.raises(ValidationError):
            RotationRequestModel(output_folder="/out")

    def test_files_without_any_folder_rejected(self):
        with pytest.raises(ValidationError):
            RotationRequestModel(files=["a.png"])

    def test_bad_angle(self):
        with pytest.raises(ValidationError) as exc_info:
            RotationRequestModel(files=["a.png"], output_folder="/out", angle=45)
        assert exc_info.value.errors()[0]["loc"] == ("angle",)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            RotationRequestModel(files=["a.png"], output_folder="/out", rotate_left=True)

    def test_callback_url_must_be_url(self):
        with pytest.raises(ValidationError):
            RotationRequestModel(files=["a.png"], output_folder="/out", callback_url="not a url")
