"""
svckit: String Service
=========================

What:  Concrete StringService: upper-casing and length in UTF-8 code units.
"""

from svckit.exceptions import EmptyInputError
from svckit.services.base import StringService


class BasicStringService(StringService):
    """Stateless StringService; one instance is shared by all requests."""

    def uppercase(self, text: str) -> str:
        if text == "":
            raise EmptyInputError()
        return text.upper()

    def count(self, text: str) -> int:
        # UTF-8 code units, so "héllo" counts 6
        return len(text.encode("utf-8"))
