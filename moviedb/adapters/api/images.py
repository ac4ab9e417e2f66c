"""
Materialisation des images a partir des octets recus.

Des octets qui ne forment pas une image lisible donnent None: ce n'est
pas une erreur pour l'appelant.
"""

from io import BytesIO
from typing import Optional

from loguru import logger
from PIL import Image, UnidentifiedImageError


def load_image(data: bytes) -> Optional[Image.Image]:
    """
    Decode les octets en image Pillow entierement chargee.

    Args:
        data: Corps brut de la reponse du CDN

    Returns:
        L'image, ou None si les octets sont vides, illisibles ou trop volumineux
    """
    if not data:
        return None
    try:
        image = Image.open(BytesIO(data))
        # Force le decodage complet: open() est paresseux
        image.load()
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
    ) as e:
        logger.warning("Octets d'image illisibles ({} octets): {}", len(data), e)
        return None
    return image
