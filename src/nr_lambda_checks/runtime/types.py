"""Data types passed into the extension checks."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config.parser import Configuration


@dataclass
class RegistrationResponse:
    """Fields of the extension registration response used by the checks.

    Attributes:
        function_name: Name of the Lambda function
        function_version: Published version (e.g., "$LATEST")
        handler: Handler identifier as configured on the platform
    """

    function_name: str = ""
    function_version: str = ""
    handler: str = ""


@dataclass
class HandlerInvocation:
    """Handler being checked plus the configuration it is checked against."""

    handler_name: str
    config: "Configuration"

    def __repr__(self) -> str:
        return f"<HandlerInvocation {self.handler_name!r}>"
