import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import pdf_converter
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def write_image(path: Path, size=(200, 100), mode="RGB", fmt=None, color="white") -> Path:
    """Save a solid-colour test image and return its path."""
    img = Image.new(mode, size, color=color)
    img.save(path, format=fmt)
    return path


# Common test fixtures
@pytest.fixture
def make_image(tmp_path: Path):
    """Factory writing test images into tmp_path."""
    def _create(name: str, size=(200, 100), mode="RGB", fmt=None, color="white") -> Path:
        return write_image(tmp_path / name, size=size, mode=mode, fmt=fmt, color=color)
    return _create


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    return write_image(tmp_path / "sample.png", size=(200, 100))


@pytest.fixture
def truncated_jpeg(tmp_path: Path) -> Path:
    """A JPEG cut off halfway through its scan data."""
    img = Image.effect_noise((256, 256), 64).convert("RGB")
    full = tmp_path / "full.jpg"
    img.save(full, format="JPEG", quality=95)
    data = full.read_bytes()
    full.unlink()

    path = tmp_path / "broken.jpg"
    path.write_bytes(data[: len(data) // 2])
    return path
