"""
Cookie directives.

Services describe the cookies a response should carry instead of mutating
the response themselves; the router applies them at the transport edge.
"""

from dataclasses import dataclass

from starlette.responses import Response


@dataclass(frozen=True)
class CookieDirective:
    """A single Set-Cookie instruction."""

    name: str
    value: str
    max_age: int
    httponly: bool = True
    samesite: str = "strict"
    secure: bool = False
    path: str = "/"

    @property
    def clears(self) -> bool:
        """True when the directive expires the cookie immediately."""
        return self.max_age == 0

    def apply(self, response: Response) -> None:
        """Write this directive onto a response."""
        response.set_cookie(
            key=self.name,
            value=self.value,
            max_age=self.max_age,
            path=self.path,
            secure=self.secure,
            httponly=self.httponly,
            samesite=self.samesite,
        )
