class SearchError(Exception):
    code = "SEARCH_ERROR"
    message = "Search failed"

    def __init__(self, message: str | None = None, details=None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

class ConfigurationError(SearchError):
    code = "CONFIGURATION_ERROR"
    message = "The search service is not configured"

class GatewayTransportError(SearchError):
    """The index could not be reached or its answer could not be read."""
    code = "GATEWAY_TRANSPORT_ERROR"
    message = "The search index call failed before a response was received"
