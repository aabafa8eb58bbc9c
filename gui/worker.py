"""Background workers for ThumbHash encode/decode."""

import numpy as np
from PySide6.QtCore import QObject, Signal

from engines.pipeline import rgba_to_thumbhash, thumbhash_to_rgba
from engines.png_encoder import thumbhash_image_to_png
from utils.image_io import fit_within
from models.encode_params import EncodeParams


class DecodeWorker(QObject):
    """Decodes a hash and renders its PNG in a background thread."""
    
    finished = Signal(object, object)
    error = Signal(str)
    
    def __init__(self, blob: bytes):
        super().__init__()
        self.blob = bytes(blob)
    
    def run(self):
        try:
            image = thumbhash_to_rgba(self.blob)
            png = thumbhash_image_to_png(image)
            self.finished.emit(image, png)
        except Exception as e:
            self.error.emit(str(e))


class EncodeWorker(QObject):
    """Fits an RGBA image into the encoder cap and hashes it in a background thread."""
    
    finished = Signal(object)
    error = Signal(str)
    progress = Signal(str)
    
    def __init__(self, image: np.ndarray, params: EncodeParams | None = None):
        super().__init__()
        self.image = image
        self.params = params or EncodeParams()
    
    def run(self):
        try:
            h, w = self.image.shape[:2]
            self.progress.emit(f"Fitting ({w}×{h}) into {self.params.max_size}px...")
            fitted = fit_within(self.image, self.params.max_size, self.params.interpolation)
            
            fh, fw = fitted.shape[:2]
            self.progress.emit(f"Encoding ({fw}×{fh})...")
            self.finished.emit(rgba_to_thumbhash(fw, fh, fitted))
        except Exception as e:
            self.error.emit(str(e))
