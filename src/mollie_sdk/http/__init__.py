from mollie_sdk.http.transport import MollieTransport, validate_base_url

__all__ = ["MollieTransport", "validate_base_url"]
