import io

import numpy as np
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from cancer_api.services.save_service import PredictionStore


class FakeModel:
    """Keras-like model returning fixed probabilities, counts calls."""

    def __init__(self, probs=(0.999, 0.001), output_shape=(None, 2)):
        self.probs = np.asarray([probs], dtype=np.float32)
        self.output_shape = output_shape
        self.calls = 0
        self.last_batch = None

    def predict(self, batch, verbose=0):
        self.calls += 1
        self.last_batch = batch
        return self.probs


class BrokenModel:
    output_shape = (None, 2)

    def predict(self, batch, verbose=0):
        raise ValueError("Incompatible input shape")


def memory_store() -> PredictionStore:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    store = PredictionStore(engine)
    store.create_tables()
    return store


def jpeg_bytes(width=64, height=48, color=(200, 30, 60)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="JPEG")
    return buf.getvalue()


def png_bytes(width=32, height=32) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), (10, 20, 30)).save(buf, format="PNG")
    return buf.getvalue()


def noisy_jpeg_bytes(width=200, height=200, seed=0) -> bytes:
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
    buf = io.BytesIO()
    Image.fromarray(pixels).save(buf, format="JPEG", quality=95)
    return buf.getvalue()


def mpo_bytes(width=64, height=48) -> bytes:
    """Dua frame, seperti foto kamera HP (MPO)."""
    first = Image.new("RGB", (width, height), (220, 40, 40))
    second = Image.new("RGB", (width, height), (40, 40, 220))
    buf = io.BytesIO()
    first.save(buf, format="MPO", save_all=True, append_images=[second])
    return buf.getvalue()
