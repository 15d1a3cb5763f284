# cancer_api/utils/image_io.py
import io
import numpy as np
from PIL import Image, UnidentifiedImageError

from cancer_api.core.errors import DecodeError

# Ukuran input model (H, W)
IMG_SIZE = (224, 224)

# Batas ukuran file gambar (bytes)
MAX_IMAGE_BYTES = 1_000_000

# MPO = JPEG multi-picture dari kamera HP, frame pertama tetap JPEG biasa
JPEG_FORMATS = ("JPEG", "MPO")

# Batas W*H sebelum decode penuh. File < 1 MB bisa mengklaim dimensi raksasa.
MAX_DECODE_PIXELS = 50_000_000


def load_image_from_bytes(image_bytes: bytes) -> np.ndarray:
    """
    Konversi bytes JPEG -> batch numpy (1, 224, 224, 3) float32.
    - decode JPEG (termasuk MPO), paksa RGB (3 channel)
    - resize nearest-neighbor
    - tambah dimensi batch
    Tidak ada normalisasi, nilai piksel tetap 0..255.
    """
    if not image_bytes:
        raise DecodeError("Empty image payload")

    try:
        img = Image.open(io.BytesIO(image_bytes), formats=JPEG_FORMATS)
        # header sudah terbaca, piksel belum: cek dimensi dulu
        if img.width * img.height > MAX_DECODE_PIXELS:
            raise DecodeError(f"Image too large to decode: {img.width}x{img.height}")
        img = img.convert("RGB")
        # PIL pakai (W, H)
        img = img.resize((IMG_SIZE[1], IMG_SIZE[0]), resample=Image.Resampling.NEAREST)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e

    # Ke numpy array float32
    arr = np.asarray(img, dtype=np.float32)

    # Tambah dimensi batch
    return np.expand_dims(arr, axis=0)
