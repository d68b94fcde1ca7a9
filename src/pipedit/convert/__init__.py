"""Conversion between pipeline JSON and the editor tree."""

from .binder import UNNAMED, UNNAMED_LISTED, decode_arguments, encode_arguments
from .decoder import decode_pipeline, decode_stage, decode_step, decode_steps
from .encoder import encode_pipeline, encode_stage, encode_step, encode_steps

__all__ = [
    "UNNAMED",
    "UNNAMED_LISTED",
    "decode_arguments",
    "decode_pipeline",
    "decode_stage",
    "decode_step",
    "decode_steps",
    "encode_arguments",
    "encode_pipeline",
    "encode_stage",
    "encode_step",
    "encode_steps",
]
