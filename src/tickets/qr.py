from io import BytesIO

import qrcode
from qrcode import constants
from PIL import Image


def render_qr_png(data: str, size: int = 300, border: int = 4) -> bytes:
    """Render `data` as a square PNG QR code of `size` pixels"""

    qr = qrcode.QRCode(
        version=1,
        error_correction=constants.ERROR_CORRECT_M,
        box_size=10,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)

    qr_image = qr.make_image(fill_color="black", back_color="white")
    qr_image = qr_image.resize((size, size), Image.LANCZOS)

    buffer = BytesIO()
    qr_image.save(buffer, format="PNG")
    return buffer.getvalue()
