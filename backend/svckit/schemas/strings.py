"""
svckit: String Operation Schemas
===================================

What:  Request/response bodies for POST /uppercase and POST /count.

Wire format:
    /uppercase  {"s": "abc"} → {"v": "ABC", "err": ""}
    /count      {"s": "abc"} → {"v": 3}
"""

from pydantic import Field

from svckit.schemas.base import KitModel


class UppercaseRequest(KitModel):
    s: str = Field(default="", strict=True, description="Text to convert")


class UppercaseResponse(KitModel):
    """
    What:  Result of the uppercase call unit.
    How:   On success `v` holds the converted text and `err` is "".
           On failure `v` is "" and `err` holds the error description.
    """
    v: str = Field(default="", description="Upper-cased text")
    err: str = Field(default="", description="Error description, empty on success")


class CountRequest(KitModel):
    s: str = Field(default="", strict=True, description="Text to measure")


class CountResponse(KitModel):
    v: int = Field(default=0, description="Length of the text in UTF-8 code units")
