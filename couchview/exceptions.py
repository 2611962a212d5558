class CouchDBException(Exception):
    """There was an ambiguous error interacting with CouchDB."""
    pass


class ConfigurationError(CouchDBException):
    """The client was not given what it needs to complete an operation."""
    pass


class MissingResource(CouchDBException):
    """A requested resource (database, document, view) does not exist"""
    pass


class MissingDatabase(MissingResource):
    """A requested database does not exist."""
    pass


class RequestsException(CouchDBException):
    """There was an ambiguous exception that occurred while handling your request."""
    pass


class Timeout(RequestsException):
    """The request timed out."""
    pass


class HTTPError(RequestsException):
    """An HTTP error occurred.

    ``error`` and ``reason`` hold the fields of the JSON error body CouchDB
    sends along with the status, or `None` if the body had none.
    """
    def __init__(self, status_code, message=None, error=None, reason=None):
        self.status_code = status_code
        self.error = error
        self.reason = reason
        if error is not None or reason is not None:
            message = "Error [{status_code}]: {error} {reason}".format(
                status_code=status_code, error=error, reason=reason)
        self.message = message or "HTTP error {status_code}".format(status_code=status_code)
        super(HTTPError, self).__init__(self.message)


class HTTPBadRequest(HTTPError):
    """400 Bad Request"""
    status_code = 400

    def __init__(self, message="Bad Request", **kwargs):
        super(HTTPBadRequest, self).__init__(self.__class__.status_code, message, **kwargs)


class HTTPUnauthorized(HTTPError):
    """401 Unauthorized"""
    status_code = 401

    def __init__(self, message="Unauthorized", **kwargs):
        super(HTTPUnauthorized, self).__init__(self.__class__.status_code, message, **kwargs)


class HTTPForbidden(HTTPError):
    """403 Forbidden"""
    status_code = 403

    def __init__(self, message="Forbidden", **kwargs):
        super(HTTPForbidden, self).__init__(self.__class__.status_code, message, **kwargs)


class HTTPNotFound(HTTPError):
    """404 Not Found"""
    status_code = 404

    def __init__(self, message="Not Found", **kwargs):
        super(HTTPNotFound, self).__init__(self.__class__.status_code, message, **kwargs)


class HTTPConflict(HTTPError):
    status_code = 409

    def __init__(self, message="Conflict", **kwargs):
        super(HTTPConflict, self).__init__(self.__class__.status_code, message, **kwargs)


class HTTPPreconditionFailed(HTTPError):
    status_code = 412

    def __init__(self, message="Precondition failed", **kwargs):
        super(HTTPPreconditionFailed, self).__init__(self.__class__.status_code, message, **kwargs)


_http_error_lookup = {
    exc.status_code: exc for exc in [HTTPBadRequest, HTTPUnauthorized, HTTPForbidden, HTTPNotFound, HTTPConflict, HTTPPreconditionFailed]
}


def http_error_lookup(status_code, message=None, error=None, reason=None):
    if status_code in _http_error_lookup:
        exc_class = _http_error_lookup[status_code]
        if message:
            return exc_class(message, error=error, reason=reason)
        return exc_class(error=error, reason=reason)
    else:
        return HTTPError(status_code=status_code, message=message, error=error, reason=reason)
