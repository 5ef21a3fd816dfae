"""
Request Factory
Builds a Sanic request from process-level CGI style variables
"""
import os
from typing import Mapping, Optional
from sanic import Request
from sanic.compat import Header


class RequestFactory:
    """
    Creates requests outside of Sanic's own request cycle

    Used when an error has to be rendered but no request object was handed
    over, e.g. for failures during bootstrap or in CLI contexts.

    Example:
        request = RequestFactory.from_globals()
        request = RequestFactory.from_globals({'REQUEST_URI': '/missing?page=2'})
    """

    @classmethod
    def from_globals(cls, environ: Optional[Mapping[str, str]] = None) -> Request:
        """
        Build a request from CGI variables

        Args:
            environ: Variable mapping (defaults to os.environ)

        Returns:
            Sanic Request
        """
        if environ is None:
            environ = os.environ

        method = environ.get('REQUEST_METHOD', 'GET').upper()
        target = environ.get('REQUEST_URI')
        if not target:
            target = environ.get('PATH_INFO') or '/'
            query = environ.get('QUERY_STRING')
            if query:
                target = f'{target}?{query}'

        protocol = environ.get('SERVER_PROTOCOL', 'HTTP/1.1')
        version = protocol.split('/', 1)[-1]

        headers = Header()
        for key, value in environ.items():
            if key.startswith('HTTP_'):
                headers[key[5:].replace('_', '-').lower()] = value
        for key in ('CONTENT_TYPE', 'CONTENT_LENGTH'):
            if environ.get(key):
                headers[key.replace('_', '-').lower()] = environ[key]

        return Request(target.encode('utf-8'), headers, version, method, None, None)
