"""Uploaded image ingestion and selection.

``ImageTray`` holds the images the user has uploaded, in upload order, and
the single image currently selected as input for re-creation.

Ingestion
---------
``ImageTray.ingest()`` decodes a batch of files concurrently, one task per
file, each running in a worker thread. The batch is joined with
``asyncio.gather`` and committed with a single ``list.extend`` once every
task has finished, so a batch never becomes partially visible and two
batches never interleave. Files that fail to decode are logged and skipped;
the rest of the batch is still committed.

Selection
---------
The selection is the inline data string of an image, not its position.
Removing any entry whose data equals the selection clears it; removing
other entries leaves it alone even though positions shift.
"""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from .errors import InputImageError
from .inline_image import ALLOWED_MIME_TYPES, to_data_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedImage:
    """An uploaded image as an inline data string plus its original filename."""

    data: str
    name: str


def read_as_data_url(path: str | Path) -> str:
    """Read an image file into an inline data string.

    The whole image is decoded, so truncated files are rejected here rather
    than when the thumbnail is first drawn. The MIME type is taken from the
    decoded image format, not the file extension.

    Args:
        path: Image file on disk

    Returns:
        ``data:<mime>;base64,<content>`` string

    Raises:
        InputImageError: If the file cannot be read, is not an image, or is
            not PNG, JPEG or WEBP
    """
    path = Path(path)
    try:
        content = path.read_bytes()
        with Image.open(path) as image:
            image_format = image.format
            image.load()
    except (OSError, Image.DecompressionBombError) as e:
        raise InputImageError(f"Could not read image {path.name}: {e}") from e

    mime_type = Image.MIME.get(image_format or "")
    if mime_type not in ALLOWED_MIME_TYPES:
        raise InputImageError(f"Unsupported image type for {path.name}: {mime_type or image_format}")

    return to_data_url(content, mime_type)


@dataclass
class ImageTray:
    """Ordered uploaded images and the current selection."""

    images: list[UploadedImage] = field(default_factory=list)
    selected: str | None = None

    async def ingest(self, files: Iterable[str | Path]) -> list[UploadedImage]:
        """Decode a batch of files and append the successful ones together.

        Args:
            files: Paths of the files in the batch

        Returns:
            The images appended by this batch, in the order given
        """
        paths = [Path(f) for f in files]
        if not paths:
            return []

        results = await asyncio.gather(*(self._decode(path) for path in paths))
        decoded = [image for image in results if image is not None]

        self.images.extend(decoded)
        logger.info(f"Ingested {len(decoded)}/{len(paths)} uploaded images")
        return decoded

    @staticmethod
    async def _decode(path: Path) -> UploadedImage | None:
        try:
            data = await asyncio.to_thread(read_as_data_url, path)
        except InputImageError as e:
            logger.warning(f"Skipping upload: {e}")
            return None
        return UploadedImage(data=data, name=path.name)

    def remove(self, index: int) -> UploadedImage | None:
        """Remove the image at a position.

        Clears the selection when the removed image was the selected one.
        An index outside the tray is ignored.

        Returns:
            The removed image, or None if nothing was removed
        """
        if not 0 <= index < len(self.images):
            logger.warning(f"Ignoring removal of image {index}: tray has {len(self.images)}")
            return None

        removed = self.images.pop(index)
        if removed.data == self.selected:
            self.selected = None
        return removed

    def select(self, data: str) -> None:
        """Select an image by its inline data string."""
        self.selected = data

    @property
    def has_selection(self) -> bool:
        return self.selected is not None

    @property
    def selected_name(self) -> str | None:
        """Filename of the first image matching the selection, if any."""
        for image in self.images:
            if image.data == self.selected:
                return image.name
        return None

    def __len__(self) -> int:
        return len(self.images)
