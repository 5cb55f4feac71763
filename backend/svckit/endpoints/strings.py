"""
svckit: String Endpoints
===========================

What:  Call units for the StringService: Uppercase and Count.
"""

from svckit.endpoints.base import Endpoint
from svckit.exceptions import SvcKitError
from svckit.schemas.strings import (
    CountRequest,
    CountResponse,
    UppercaseRequest,
    UppercaseResponse,
)
from svckit.services.base import StringService


def make_uppercase_endpoint(svc: StringService) -> Endpoint:
    def uppercase(request: UppercaseRequest) -> UppercaseResponse:
        try:
            v = svc.uppercase(request.s)
        except SvcKitError as e:
            return UppercaseResponse(v="", err=e.message)
        return UppercaseResponse(v=v, err="")

    return uppercase


def make_count_endpoint(svc: StringService) -> Endpoint:
    def count(request: CountRequest) -> CountResponse:
        return CountResponse(v=svc.count(request.s))

    return count
