"""Baseline tests ensuring the package layout loads correctly."""

import zxdisplay


def test_package_exports() -> None:
    for name in ("video", "system", "ui", "utils"):
        assert hasattr(zxdisplay, name), f"missing submodule: {name}"


def test_video_exports() -> None:
    from zxdisplay import video

    for name in ("DisplayMemory", "Renderer", "RenderResult", "FontSet", "pack_attribute", "unpack_attribute"):
        assert hasattr(video, name), f"video missing symbol: {name}"


def test_geometry_constants() -> None:
    from zxdisplay.video import geometry

    assert (geometry.COLUMNS, geometry.LINES) == (32, 24)
    assert (geometry.XMAX, geometry.YMAX) == (256, 192)
    assert geometry.CHAR_SIZE == 8
    assert geometry.PIXEL_PLANE_SIZE == 256 * 192 // 8
    assert geometry.ATTRIBUTE_PLANE_SIZE == 32 * 24
