INTERNAL_ERROR = "Internal Error"


class CouchDBException(Exception):
    """There was an ambiguous error interacting with CouchDB.

    Every error raised by an operation carries the same record: the HTTP
    status code (``None`` when no response was obtained), a description,
    the error kind and reason reported by the server (if any), and the
    document id and revision the operation concerned.
    """
    status_code = None

    def __init__(self, message=None, status_code=None, id=None, rev=None, error=None, reason=None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message or self.__class__.__doc__.splitlines()[0]
        self.id = id
        self.rev = rev
        self.error = error
        self.reason = reason
        super(CouchDBException, self).__init__(self.message)


class UpdateConflict(CouchDBException):
    """A revision conflict occurred."""
    pass


class MissingResource(CouchDBException):
    """A requested resource (database, document, view) does not exist"""
    pass


class InternalError(CouchDBException):
    """Internal Error"""

    def __init__(self, message=INTERNAL_ERROR, **details):
        details.pop("status_code", None)
        super(InternalError, self).__init__(message, **details)


class Timeout(InternalError):
    """The request timed out."""

    def __init__(self, message="The request timed out.", **details):
        super(Timeout, self).__init__(message, **details)


class DecodeError(CouchDBException):
    """The response body could not be decoded."""
    pass


class EncodeError(CouchDBException):
    """The request payload could not be encoded."""
    pass


class HTTPError(CouchDBException):
    """An HTTP error occurred."""

    def __init__(self, status_code=None, message=None, **details):
        status_code = status_code if status_code is not None else self.__class__.status_code
        message = message or "HTTP error {status_code}".format(status_code=status_code)
        super(HTTPError, self).__init__(message, status_code=status_code, **details)


class HTTPBadRequest(HTTPError):
    """400 Bad Request"""
    status_code = 400


class HTTPUnauthorized(HTTPError):
    """401 Unauthorized"""
    status_code = 401


class HTTPForbidden(HTTPError):
    """403 Forbidden"""
    status_code = 403


class HTTPNotFound(HTTPError, MissingResource):
    """404 Not Found"""
    status_code = 404


class HTTPConflict(HTTPError, UpdateConflict):
    """409 Conflict"""
    status_code = 409


class HTTPPreconditionFailed(HTTPError):
    """412 Precondition Failed"""
    status_code = 412


_http_error_lookup = {
    exc.status_code: exc for exc in [HTTPBadRequest, HTTPUnauthorized, HTTPForbidden, HTTPNotFound, HTTPConflict, HTTPPreconditionFailed]
}


def http_error_lookup(status_code, message=None, **details):
    """Return the classified error for a non-success status code."""
    if status_code in _http_error_lookup:
        return _http_error_lookup[status_code](message=message, **details)
    else:
        return HTTPError(status_code=status_code, message=message, **details)
