"""Pytest configuration and shared fixtures."""
from pathlib import Path
from typing import Callable, List, Tuple

import pytest
from PIL import Image

from batch_rotate.domain.events.rotation_events import RotationProgress
from batch_rotate.infrastructure.repositories import job_repository


def _pattern_image(size: Tuple[int, int], mode: str = "RGB") -> Image.Image:
    """Image whose every pixel differs, so any wrong transform shows up."""
    width, height = size
    img = Image.new("RGB", size)
    img.putdata([((x * 40) % 256, (y * 60) % 256, (x + y * width) % 256) for y in range(height) for x in range(width)])
    if mode != "RGB":
        img = img.convert(mode)
    return img


@pytest.fixture
def make_image() -> Callable[..., Path]:
    """Write a patterned image to path; format defaults to the one implied by the extension."""
    def _make(path: Path, size: Tuple[int, int] = (4, 2), mode: str = "RGB", fmt: str = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _pattern_image(size, mode).save(path, format=fmt)
        return path
    return _make


@pytest.fixture
def pattern_image() -> Callable[..., Image.Image]:
    return _pattern_image


@pytest.fixture
def input_folder(tmp_path: Path, make_image) -> Path:
    """Folder holding a.jpg and b.png."""
    folder = tmp_path / "input"
    make_image(folder / "a.jpg", size=(8, 4))
    make_image(folder / "b.png", size=(6, 3))
    return folder


@pytest.fixture
def output_folder(tmp_path: Path) -> Path:
    return tmp_path / "output"


@pytest.fixture
def progress_sink() -> Tuple[List[RotationProgress], Callable[[RotationProgress], None]]:
    """A list and the callback that appends to it."""
    events: List[RotationProgress] = []
    return events, events.append


@pytest.fixture
def clean_job_repository():
    job_repository.clear_jobs()
    yield
    job_repository.clear_jobs()
