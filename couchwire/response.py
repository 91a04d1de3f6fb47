# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Classification of server responses into results or errors."""
import requests

from couchwire import exceptions

__all__ = ['classify', 'exists', 'READ_CODES', 'WRITE_CODES', 'DELETE_CODES', 'BULK_CODES']


READ_CODES = frozenset([requests.codes.ok])
WRITE_CODES = frozenset([requests.codes.created, requests.codes.accepted])
DELETE_CODES = frozenset([requests.codes.ok, requests.codes.accepted])
BULK_CODES = frozenset([requests.codes.ok, requests.codes.created])


def _error_details(response):
    """Return ``(message, error, reason)`` from a CouchDB error body.

    CouchDB reports errors as ``{"error": ..., "reason": ...}``. Proxies and
    load balancers in front of it may answer with anything at all, in which
    case only the status code is known.
    """
    try:
        body = response.json()
    except ValueError:
        return None, None, None
    if not isinstance(body, dict):
        return None, None, None
    error = body.get('error')
    reason = body.get('reason')
    if error and reason:
        message = '{}: {}'.format(error, reason)
    else:
        message = reason or error
    return message, error, reason


def classify(response, success_codes=READ_CODES, not_found_tolerant=False, id=None, rev=None, wrapper=None, raw=False):
    """Turn a response into the operation's result, or raise its error.

    :param response: the `requests.Response`, or ``None`` if the transport
                     did not obtain one
    :param success_codes: the status codes that denote success
    :param not_found_tolerant: treat ``404 Not Found`` as success without
                               a body (``None`` is returned)
    :param id: the document id the operation concerned, if any
    :param rev: the document revision the operation concerned, if any
    :param wrapper: an optional callable applied to the decoded body
    :param raw: return the body bytes instead of decoding JSON
    :raise InternalError: if there is no response
    :raise DecodeError: if a success body does not have the expected shape
    :raise HTTPError: for any other status code
    """
    if response is None:
        raise exceptions.InternalError(id=id, rev=rev)

    status_code = response.status_code
    if status_code in success_codes:
        try:
            data = response.content if raw else response.json()
            return wrapper(data) if wrapper is not None else data
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            raise exceptions.DecodeError(str(exc), status_code=status_code, id=id, rev=rev) from exc

    if not_found_tolerant and status_code == requests.codes.not_found:
        return None

    message, error, reason = _error_details(response)
    raise exceptions.http_error_lookup(status_code, message, id=id, rev=rev, error=error, reason=reason)


def exists(response):
    """Existence checks: only ``200 OK`` means the resource is there."""
    if response is None:
        raise exceptions.InternalError()
    return response.status_code == requests.codes.ok
