"""Errors reported by the startup checks."""


class CheckError(Exception):
    """A startup check failed."""


class MissingHandlerError(CheckError):
    """The configured handler has no source file in the deployment bundle."""

    def __init__(self, handler_name: str, nr_handler: str):
        self.handler_name = handler_name
        self.nr_handler = nr_handler
        super().__init__(
            f"missing handler file {handler_name} "
            f"(NEW_RELIC_LAMBDA_HANDLER={nr_handler})"
        )
