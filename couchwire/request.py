# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Construction of request descriptors.

A descriptor fully specifies one HTTP exchange with the server (scheme,
host, port, method, path and headers) without performing any I/O.

>>> from couchwire.config import ConnectionProperties
>>> req = build(ConnectionProperties('localhost'), 'GET', path('mydb', 'doc 1'))
>>> req.path
'/mydb/doc%201'
>>> req.headers
{'Accept': 'application/json'}
"""
import collections

import furl
import requests.utils

__all__ = ['RequestDescriptor', 'build', 'path', 'quote']


JSON_MIME = "application/json"
FORM_MIME = "application/x-www-form-urlencoded"
BIN_MIME = "application/octet-stream"


def quote(value, safe=''):
    """Percent-escape a single path segment or query value."""
    return requests.utils.quote(value, safe=safe)


def path(*segments, **kwargs):
    """Join escaped path segments into an absolute path.

    :param query: an optional, already encoded query string appended as-is
                  (with or without its leading ``?``)
    """
    query = kwargs.pop('query', None)
    if kwargs:
        raise TypeError('unexpected keyword arguments: %s' % ', '.join(sorted(kwargs)))
    result = '/' + '/'.join(quote(segment) for segment in segments)
    if query:
        result += query if query.startswith('?') else '?' + query
    return result


class RequestDescriptor(collections.namedtuple('RequestDescriptor', ['scheme', 'host', 'port', 'method', 'path', 'headers'])):
    __slots__ = ()

    @property
    def url(self):
        origin = furl.furl(scheme=self.scheme, host=self.host, port=self.port).url
        return origin + self.path


def build(properties, method, path, has_body=False, content_type=JSON_MIME, headers=None):
    """Build the descriptor for a request against the configured server.

    ``Accept`` is always ``application/json``; ``Content-Type`` is only set
    when the request carries a body. The path must already be escaped.

    :param properties: the `ConnectionProperties` of the server
    :param method: the HTTP method
    :param path: the escaped request path, including any query string
    :param has_body: whether a body will be sent with the request
    :param content_type: content type of the body
    :param headers: additional headers sent verbatim, e.g. ``Cookie``
    :rtype: `RequestDescriptor`
    """
    request_headers = {'Accept': JSON_MIME}
    if has_body:
        request_headers['Content-Type'] = content_type or JSON_MIME
    if headers:
        request_headers.update(headers)
    return RequestDescriptor(
        scheme=properties.scheme,
        host=properties.host,
        port=properties.port,
        method=method,
        path=path,
        headers=request_headers,
    )
