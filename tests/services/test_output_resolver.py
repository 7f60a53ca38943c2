import pytest

from gridcollage.domain.enums import ImageFormat
from gridcollage.domain.errors import (
    DirectoryCreateFailed,
    InvalidFilename,
    UnsafeOutputPath,
    UnsupportedFormat,
)
from gridcollage.services.collage.output_resolver import resolve_output_target, split_output_path

ALL = frozenset({ImageFormat.PNG, ImageFormat.JPEG, ImageFormat.BMP, ImageFormat.GIF})


@pytest.mark.parametrize(
    "requested, expected",
    [
        ("out.png", (".", "out", "png")),
        ("./folder/image.jpg", ("folder", "image", "jpg")),
        ("a/b/archive.tar.gif", ("a/b", "archive.tar", "gif")),
        (".png", (".", "", "png")),
        ("noext", (".", "noext", "")),
    ],
)
def test_split_output_path(requested, expected):
    assert split_output_path(requested) == expected


def test_defaults_when_nothing_requested(tmp_path):
    for requested in (None, ""):
        t = resolve_output_target(requested, ALL, default_dir=tmp_path)
        assert t.path == tmp_path / "result.png"
        assert t.format is ImageFormat.PNG


def test_default_extension_must_be_supported(tmp_path):
    with pytest.raises(UnsupportedFormat):
        resolve_output_target(None, {ImageFormat.JPEG}, default_dir=tmp_path)


def test_missing_default_directory_is_created(tmp_path):
    t = resolve_output_target(None, ALL, default_dir=tmp_path / "fresh")
    assert t.directory.is_dir()


def test_bare_filename_goes_to_default_dir(tmp_path):
    t = resolve_output_target("collage.jpg", ALL, default_dir=tmp_path)
    assert t.path == tmp_path / "collage.jpg"
    assert t.format is ImageFormat.JPEG
    assert t.extension == "jpg"


def test_unknown_extension_rejected(tmp_path):
    with pytest.raises(UnsupportedFormat) as ei:
        resolve_output_target("out.xyz", ALL, default_dir=tmp_path)
    assert ei.value.extension == "xyz"
    assert "png" in str(ei.value)


def test_missing_extension_rejected(tmp_path):
    with pytest.raises(UnsupportedFormat):
        resolve_output_target("out", ALL, default_dir=tmp_path)


def test_known_but_unsupported_extension_rejected(tmp_path):
    with pytest.raises(UnsupportedFormat):
        resolve_output_target("out.wbmp", ALL, default_dir=tmp_path)


def test_empty_stem_rejected(tmp_path):
    with pytest.raises(InvalidFilename):
        resolve_output_target(str(tmp_path / ".png"), ALL, default_dir=tmp_path)


def test_nested_directory_created(tmp_path):
    requested = str(tmp_path / "newdir" / "sub" / "out.png")
    t = resolve_output_target(requested, ALL, default_dir=tmp_path / "unused")
    assert t.directory == tmp_path / "newdir" / "sub"
    assert t.directory.is_dir()
    assert not (tmp_path / "unused").exists()


def test_rejected_request_creates_nothing(tmp_path):
    with pytest.raises(UnsupportedFormat):
        resolve_output_target(str(tmp_path / "never" / "out.xyz"), ALL, default_dir=tmp_path)
    assert not (tmp_path / "never").exists()


def test_directory_create_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    with pytest.raises(DirectoryCreateFailed) as ei:
        resolve_output_target(str(blocker / "sub" / "out.png"), ALL, default_dir=tmp_path)
    assert ei.value.path == blocker / "sub"


def test_confined_relative_directory(tmp_path):
    t = resolve_output_target("shots/out.gif", ALL, default_dir=tmp_path, confine_to=tmp_path)
    assert t.directory == tmp_path.resolve() / "shots"
    assert t.directory.is_dir()


@pytest.mark.parametrize("requested", ["../escape/out.png", "/etc/out.png"])
def test_confined_escape_rejected(tmp_path, requested):
    root = tmp_path / "root"
    root.mkdir()
    with pytest.raises(UnsafeOutputPath):
        resolve_output_target(requested, ALL, default_dir=root, confine_to=root)
    assert not (tmp_path / "escape").exists()
