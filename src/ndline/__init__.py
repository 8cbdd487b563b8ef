"""ndline — newline-delimited JSON (NDJSON) encoding and decoding.

Each line of an NDJSON stream is one complete JSON document terminated by
``\\n`` (optionally ``\\r\\n``).  Decoding is all-or-nothing: the first line
that is not valid JSON is reported with its line number and nothing else
is returned.

    >>> import ndline
    >>> ndline.marshal([{"id": 1}, [1, 2, 3]])
    '{"id":1}\\n[1,2,3]\\n'
    >>> ndline.unmarshal(b"true\\nfalse\\r\\nnull\\n").unwrap()
    [True, False, None]
"""

__version__ = "0.1.0"

from ndline.api import marshal, marshal_to_file, unmarshal, unmarshal_file
from ndline.codec import DecodeOutcome, Invalid, LineDecodeError, LineError, Valid
from ndline.files import ResourceError

__all__ = [
    "DecodeOutcome",
    "Invalid",
    "LineDecodeError",
    "LineError",
    "ResourceError",
    "Valid",
    "marshal",
    "marshal_to_file",
    "unmarshal",
    "unmarshal_file",
]
