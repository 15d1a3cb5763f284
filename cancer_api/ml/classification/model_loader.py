# cancer_api/ml/classification/model_loader.py
import logging
import os
from urllib.parse import urlparse

import tensorflow as tf

from cancer_api.core.config import Config
from cancer_api.core.errors import ModelLoadError
from .predict import CLASSES

log = logging.getLogger(__name__)


def _is_remote(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def resolve_model_path(source: str, cache_dir: str | None = None) -> str:
    """
    MODEL_URL bisa path lokal atau URL.
    Kalau URL, file di-download sekali ke cache_dir lalu dipakai ulang.
    """
    if not source:
        raise ModelLoadError("MODEL_URL belum diset")

    if not _is_remote(source):
        if not os.path.exists(source):
            raise ModelLoadError(f"Model tidak ditemukan: {source}")
        return source

    cache_dir = cache_dir or Config.MODEL_CACHE_DIR
    os.makedirs(cache_dir, exist_ok=True)
    fname = os.path.basename(urlparse(source).path) or "model.keras"
    log.info("Downloading model %s -> %s", source, cache_dir)
    try:
        return tf.keras.utils.get_file(fname, origin=source, cache_dir=cache_dir, cache_subdir="")
    except Exception as e:
        raise ModelLoadError(f"Gagal download model dari {source}: {e}") from e


def check_output_classes(model) -> None:
    """
    Output model harus tepat len(CLASSES) unit.
    Kalau shape tidak diketahui (mis. SavedModel tanpa metadata), cek ditunda ke inference.
    """
    shape = getattr(model, "output_shape", None)
    if not shape:
        log.warning("Output shape model tidak diketahui, cek jumlah kelas dilewati")
        return
    if isinstance(shape, list):
        if len(shape) != 1:
            raise ModelLoadError(f"Model harus punya 1 output, dapat {len(shape)}")
        shape = shape[0]
    if shape[-1] != len(CLASSES):
        raise ModelLoadError(
            f"Output model {shape[-1]} kelas, harus {len(CLASSES)} ({', '.join(CLASSES)})"
        )


def is_saved_model_dir(path: str) -> bool:
    return os.path.isdir(path) and os.path.exists(os.path.join(path, "saved_model.pb"))


class SavedModelClassifier:
    """
    Bungkus signature SavedModel supaya bisa dipakai seperti Keras model
    (predict + output_shape). Keras 3 tidak bisa load_model folder SavedModel.
    """

    def __init__(self, path: str, signature: str = "serving_default"):
        loaded = tf.saved_model.load(path)
        if signature not in loaded.signatures:
            raise ModelLoadError(f"Signature {signature!r} tidak ada di {path}")
        # simpan objek hasil load supaya variabel tidak di-garbage-collect
        self._loaded = loaded
        self._fn = loaded.signatures[signature]

        _, input_specs = self._fn.structured_input_signature
        if len(input_specs) != 1:
            raise ModelLoadError(f"Model harus punya 1 input, dapat {len(input_specs)}")
        self._input_name, spec = next(iter(input_specs.items()))
        self._input_dtype = spec.dtype

        shapes = [
            tuple(t.shape.as_list()) if t.shape.rank is not None else None
            for t in self._fn.structured_outputs.values()
        ]
        self.output_shape = shapes[0] if len(shapes) == 1 else shapes

    def predict(self, batch, verbose=0):
        x = tf.convert_to_tensor(batch, dtype=self._input_dtype)
        outputs = self._fn(**{self._input_name: x})
        return next(iter(outputs.values())).numpy()


def load_classification_model(source: str | None = None, cache_dir: str | None = None):
    """
    Load model sekali saat startup:
    - resolve path / download
    - folder SavedModel -> SavedModelClassifier, file .keras / .h5 -> Keras model
      (tanpa compile, hanya untuk inference)
    - validasi jumlah kelas output
    Semua kegagalan dijadikan ModelLoadError (fatal).
    """
    source = source if source is not None else Config.MODEL_URL
    path = resolve_model_path(source, cache_dir)

    try:
        if is_saved_model_dir(path):
            model = SavedModelClassifier(path)
        else:
            model = tf.keras.models.load_model(path, compile=False)
    except ModelLoadError:
        raise
    except Exception as e:
        raise ModelLoadError(f"Gagal load model dari {path}: {e}") from e

    check_output_classes(model)
    log.info("Classification model loaded: %s", path)
    return model
