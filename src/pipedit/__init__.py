"""pipedit: pipeline JSON ⇄ editor tree conversion."""

from . import catalog
from .convert import decode_pipeline, encode_pipeline
from .errors import ConversionError

__all__ = [
    "ConversionError",
    "__version__",
    "catalog",
    "decode_pipeline",
    "encode_pipeline",
]

__version__ = "0.0.1"
