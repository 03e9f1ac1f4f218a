from __future__ import annotations

import io

import qrcode

from ..core.enums import PortalMode


def portal_link(base_url: str, mode: PortalMode) -> str:
    return f"{base_url.rstrip('/')}/?portal={mode.value}"


def qr_png(data: str) -> io.BytesIO:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return buf
