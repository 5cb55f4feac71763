"""
svckit: JSON-over-HTTP Transport Binding
===========================================

What:  Binds an Endpoint to HTTP: raw body in, JSON body out.
How:   HTTPServer.handle() runs four steps for every request:

    1. Read the raw request body
    2. decode(body) → request model
       (MalformedRequestError here is the only short-circuit)
    3. Run the endpoint in Starlette's threadpool
    4. encode(response) → JSONResponse, always HTTP 200

    The response's `err` (if any) is also left on request.state.rpc_err
    for the access log.

    Domain errors arrive as data inside the response model, so the
    transport only distinguishes "could not parse the request" from
    "request was parsed and processed".
Who:   Built per operation by svckit.routes.dispatch.
"""

from typing import Any, Callable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from svckit.endpoints.base import Endpoint
from svckit.exceptions import MalformedRequestError

M = TypeVar("M", bound=BaseModel)

DecodeRequestFunc = Callable[[bytes], Any]
EncodeResponseFunc = Callable[[Any], Response]


def decode_json_request(model: Type[M]) -> Callable[[bytes], M]:
    """
    Build a decoder that parses a JSON body into `model`.

    Raises:
        MalformedRequestError: Empty body, invalid JSON, or a value of the
            wrong JSON type. The pydantic errors are kept in `errors`
            (location, message, type only) for the 400 response.
    """

    def decode(body: bytes) -> M:
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise MalformedRequestError(
                message=f"Request body could not be decoded as {model.__name__}",
                errors=[
                    {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
                    for err in e.errors()
                ],
            ) from e

    return decode


def encode_json_response(response: BaseModel) -> Response:
    """Encode a response model with wire aliases, omitting None fields."""
    return JSONResponse(
        status_code=200,
        content=response.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


class HTTPServer:
    """
    One transport binding: an endpoint plus its request decoder and
    response encoder.

    Attributes:
        endpoint: Call unit invoked with the decoded request
        decode:   bytes → request model
        encode:   response model → HTTP response
        name:     Operation name used for route names and logging
    """

    def __init__(
        self,
        endpoint: Endpoint,
        decode: DecodeRequestFunc,
        encode: EncodeResponseFunc = encode_json_response,
        name: Optional[str] = None,
    ) -> None:
        self.endpoint = endpoint
        self.decode = decode
        self.encode = encode
        self.name = name or getattr(endpoint, "__name__", "endpoint")

    async def handle(self, request: Request) -> Response:
        body = await request.body()

        # Raises MalformedRequestError; the global handler answers 400
        decoded = self.decode(body)

        response = await run_in_threadpool(self.endpoint, decoded)
        # Read by the access log; "" means the call succeeded
        request.state.rpc_err = getattr(response, "err", None) or ""
        return self.encode(response)
