# materials/texture_loader.py
import logging
import os
from PIL import Image, UnidentifiedImageError
from materials.textures import ImageTexture, SolidColor, MISSING_TEXTURE_COLOR, Texture

logger = logging.getLogger(__name__)


def load_texture(image_path: str) -> ImageTexture:
    """
    Decode an image file into an ImageTexture of 8-bit RGB pixels.

    Raises FileNotFoundError when the file is absent and ValueError when
    Pillow cannot decode it.
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            rgb = img.convert('RGB') if img.mode != 'RGB' else img
            width, height = rgb.size
            data = rgb.tobytes()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Cannot decode texture {image_path}: {e}") from e

    logger.info("Loaded texture %s (%dx%d)", image_path, width, height)
    return ImageTexture(data, width, height)


def load_texture_or_placeholder(image_path: str) -> Texture:
    """load_texture, falling back to the solid missing-texture color."""
    try:
        return load_texture(image_path)
    except (FileNotFoundError, ValueError) as e:
        logger.warning("%s; using placeholder color", e)
        return SolidColor(MISSING_TEXTURE_COLOR)
