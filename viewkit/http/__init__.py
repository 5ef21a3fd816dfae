"""
HTTP Package
"""
from viewkit.http.request_factory import RequestFactory


def request_target(request) -> str:
    """
    Get the request target (path plus query string) of a request

    Example:
        request_target(request)  # '/articles?page=2'
    """
    if request is None:
        return '/'
    path = getattr(request, 'path', None) or '/'
    query = getattr(request, 'query_string', None)
    return f'{path}?{query}' if query else path


__all__ = [
    'RequestFactory',
    'request_target',
]
