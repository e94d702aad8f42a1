from avanza.transport.http import HttpClient, RawResponse

__all__ = ["HttpClient", "RawResponse"]
