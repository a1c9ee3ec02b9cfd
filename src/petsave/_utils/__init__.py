from ._coalescer import Coalescer
from ._decoders import (
    BytesResponseDecoder,
    EmptyResponseDecoder,
    JSONResponseDecoder,
    ResponseDecoder,
)
from ._logs import setup_logging
from ._request_spec import (
    FormBody,
    JSONBody,
    PreparedRequest,
    RawBody,
    RequestBody,
    RequestMethod,
    RequestSpec,
    prepare_request,
)
from ._url import build_url

__all__ = [
    "Coalescer",
    "ResponseDecoder",
    "JSONResponseDecoder",
    "BytesResponseDecoder",
    "EmptyResponseDecoder",
    "setup_logging",
    "RequestSpec",
    "RequestMethod",
    "RequestBody",
    "JSONBody",
    "FormBody",
    "RawBody",
    "PreparedRequest",
    "prepare_request",
    "build_url",
]
