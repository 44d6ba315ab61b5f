"""Base64 encoding with an explicit output size limit."""

from __future__ import annotations

import base64


def base64_encode(data: bytes, result_size: int | None = None) -> str:
    """Encode ``data`` as padded base64.

    ``result_size`` is the room available for the result including a
    terminator, so the encoded text must be shorter than it.  A
    ValueError is raised when it does not fit.
    """
    encoded = base64.b64encode(bytes(data)).decode("ascii")
    if result_size is not None and len(encoded) >= result_size:
        raise ValueError("buffer too small for base64 result")
    return encoded