"""QR badge rendering and decoding.

The badge payload is the user's ID as a plain decimal string.
"""

from __future__ import annotations

import io
from typing import BinaryIO, Optional

import qrcode
from PIL import Image, UnidentifiedImageError

from ..core.exceptions import ValidationError


def encode_badge(badge_id: int | str) -> bytes:
    """Render the badge payload as a printable PNG."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(str(badge_id))
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def decode_badge(stream: BinaryIO) -> Optional[str]:
    """Return the first QR payload found in the image, or None if there is none."""
    # pyzbar loads the native zbar library at import time.
    from pyzbar.pyzbar import ZBarSymbol
    from pyzbar.pyzbar import decode as pyzbar_decode

    try:
        img = Image.open(stream).convert("RGB")
    except (UnidentifiedImageError, OSError) as exc:
        raise ValidationError("Invalid image file") from exc

    decoded = pyzbar_decode(img, symbols=[ZBarSymbol.QRCODE])
    if not decoded:
        return None

    # Undecodable bytes become U+FFFD, which no badge ID matches.
    payload = decoded[0].data.decode("utf-8", errors="replace").strip()
    return payload or None
