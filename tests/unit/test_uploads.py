"""Unit tests for upload ingestion and the image tray."""

import asyncio
from unittest.mock import patch

import pytest

from fakes import make_data_url, run
from foodshot.core.errors import InputImageError
from foodshot.core.uploads import ImageTray, UploadedImage, read_as_data_url


def _tray(*names: str) -> ImageTray:
    colors = ["red", "green", "blue", "white", "black"]
    return ImageTray(
        images=[UploadedImage(data=make_data_url("PNG", colors[i]), name=name) for i, name in enumerate(names)]
    )


class TestReadAsDataUrl:
    """Tests for read_as_data_url()."""

    @pytest.mark.parametrize(
        "key,mime_type",
        [("png", "image/png"), ("jpeg", "image/jpeg"), ("webp", "image/webp")],
    )
    def test_mime_from_content(self, image_files, key, mime_type):
        assert read_as_data_url(image_files[key]).startswith(f"data:{mime_type};base64,")

    def test_mime_ignores_extension(self, image_files, temp_dir):
        misnamed = temp_dir / "really_jpeg.png"
        misnamed.write_bytes(image_files["jpeg"].read_bytes())
        assert read_as_data_url(misnamed).startswith("data:image/jpeg;base64,")

    def test_not_an_image(self, image_files):
        with pytest.raises(InputImageError, match="notes.txt"):
            read_as_data_url(image_files["text"])

    def test_truncated_image(self, image_files):
        with pytest.raises(InputImageError, match="truncated.jpg"):
            read_as_data_url(image_files["truncated"])

    def test_missing_file(self, temp_dir):
        with pytest.raises(InputImageError):
            read_as_data_url(temp_dir / "missing.png")

    def test_unsupported_format(self, temp_dir):
        from PIL import Image

        path = temp_dir / "anim.gif"
        Image.new("RGB", (4, 4), "red").save(path, format="GIF")
        with pytest.raises(InputImageError, match="Unsupported image type"):
            read_as_data_url(path)


class TestIngest:
    """Tests for ImageTray.ingest()."""

    def test_all_valid(self, image_files):
        tray = ImageTray()
        added = run(tray.ingest([image_files["png"], image_files["jpeg"], image_files["webp"]]))

        assert [image.name for image in added] == ["salad.png", "pasta.jpg", "cake.webp"]
        assert tray.images == added

    def test_failures_skipped(self, image_files):
        """N files with M successes append exactly M entries."""
        tray = ImageTray()
        files = [image_files[k] for k in ("text", "png", "broken", "jpeg")]
        added = run(tray.ingest(files))

        assert len(added) == 2
        assert [image.name for image in tray.images] == ["salad.png", "pasta.jpg"]

    def test_truncated_file_skipped(self, image_files):
        tray = ImageTray()
        added = run(tray.ingest([image_files["truncated"], image_files["webp"]]))

        assert [image.name for image in added] == ["cake.webp"]
        assert len(tray) == 1

    def test_empty_batch(self):
        tray = _tray("a.png")
        assert run(tray.ingest([])) == []
        assert len(tray) == 1

    def test_appends_after_existing(self, image_files):
        tray = _tray("first.png")
        run(tray.ingest([image_files["webp"]]))
        assert [image.name for image in tray.images] == ["first.png", "cake.webp"]

    def test_accepts_string_paths(self, image_files):
        tray = ImageTray()
        run(tray.ingest([str(image_files["png"])]))
        assert tray.images[0].name == "salad.png"

    def test_batch_committed_at_once(self, image_files):
        """Nothing from a batch is visible until every file has decoded."""
        tray = ImageTray()
        observed = []
        original = read_as_data_url

        def slow_read(path):
            observed.append(len(tray.images))
            return original(path)

        with patch("foodshot.core.uploads.read_as_data_url", side_effect=slow_read):
            run(tray.ingest([image_files["png"], image_files["jpeg"]]))

        assert observed == [0, 0]
        assert len(tray) == 2

    def test_concurrent_batches_do_not_interleave(self, image_files):
        tray = ImageTray()

        async def both():
            await asyncio.gather(
                tray.ingest([image_files["png"], image_files["jpeg"]]),
                tray.ingest([image_files["webp"], image_files["png"]]),
            )

        run(both())

        names = [image.name for image in tray.images]
        assert names in (
            ["salad.png", "pasta.jpg", "cake.webp", "salad.png"],
            ["cake.webp", "salad.png", "salad.png", "pasta.jpg"],
        )


class TestRemove:
    """Tests for ImageTray.remove()."""

    def test_remove_selected_clears_selection(self):
        tray = _tray("a.png", "b.png", "c.png")
        tray.select(tray.images[1].data)

        removed = tray.remove(1)

        assert removed.name == "b.png"
        assert tray.selected is None
        assert [image.name for image in tray.images] == ["a.png", "c.png"]

    def test_remove_other_keeps_selection(self):
        tray = _tray("a.png", "b.png", "c.png")
        selected = tray.images[2].data
        tray.select(selected)

        tray.remove(0)

        assert tray.selected == selected
        assert tray.selected_name == "c.png"
        assert tray.images[1].data == selected

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range_ignored(self, index):
        tray = _tray("a.png", "b.png", "c.png")
        tray.select(tray.images[0].data)

        assert tray.remove(index) is None
        assert len(tray) == 3
        assert tray.has_selection

    def test_remove_duplicate_of_selection_clears(self):
        """Selection is by value, so removing an identical image clears it."""
        data = make_data_url("PNG", "red")
        tray = ImageTray(images=[UploadedImage(data, "a.png"), UploadedImage(data, "copy.png")])
        tray.select(data)

        tray.remove(1)

        assert tray.selected is None


class TestSelect:
    """Tests for selection helpers."""

    def test_select(self):
        tray = _tray("a.png", "b.png")
        tray.select(tray.images[1].data)

        assert tray.has_selection
        assert tray.selected_name == "b.png"

    def test_reselect_replaces(self):
        tray = _tray("a.png", "b.png")
        tray.select(tray.images[1].data)
        tray.select(tray.images[0].data)

        assert tray.selected_name == "a.png"

    def test_empty_tray(self):
        tray = ImageTray()
        assert not tray.has_selection
        assert tray.selected_name is None
        assert len(tray) == 0
