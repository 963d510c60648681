"""Parsing and building of self-describing ``data:`` URLs."""

import base64
import binascii
import math
import re
from dataclasses import dataclass
from urllib.parse import unquote

from callsheet.document.exceptions import InvalidInputFormatError

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[^;,]*)(?P<params>(?:;[^;,]*)*),(?P<payload>.*)$", re.DOTALL)


@dataclass(frozen=True)
class DataUrl:
    mime_type: str
    is_base64: bool
    payload: str

    def decode(self) -> bytes:
        """Decode the payload to raw bytes.

        Raises:
            InvalidInputFormatError: if the base64 payload is malformed.
        """
        if not self.is_base64:
            return unquote(self.payload).encode("utf-8")
        try:
            return base64.b64decode(self.payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidInputFormatError(f"Malformed base64 payload: {exc}") from exc


def parse_data_url(content: str) -> DataUrl | None:
    """Split a data URL into MIME type, encoding flag and payload.

    Returns None when *content* is not a data URL.
    """
    match = _DATA_URL_RE.match(content)
    if match is None:
        return None
    params = [p for p in match.group("params").split(";") if p]
    return DataUrl(
        mime_type=match.group("mime").lower(),
        is_base64="base64" in params,
        payload=match.group("payload"),
    )


def encode_data_url(raw: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(raw).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def approximate_decoded_size(payload: str) -> int:
    """Estimate decoded byte size from base64 length without decoding."""
    return math.ceil(len(payload) * 3 / 4)
