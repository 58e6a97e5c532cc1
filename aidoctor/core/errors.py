# error taxonomy for the gateway
# every GatewayError carries the HTTP status the route boundary should answer with

class GatewayError(Exception):
    status_code = 500


# bad input shape (the request itself is wrong)
class InvalidRequestError(GatewayError):
    status_code = 400


class MethodNotAllowedError(GatewayError):
    status_code = 405


# no usable credential for the chosen/available provider
class ConfigurationError(GatewayError):
    status_code = 400


class UpstreamError(GatewayError):
    """Provider answered with a non-success status. `detail` is its raw body."""

    status_code = 500

    def __init__(self, provider: str, detail: str) -> None:
        self.provider = provider
        self.detail = detail
        super().__init__(f"{provider} error: {detail}")
