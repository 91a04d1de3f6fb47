import logging

from requests_toolbelt import sessions

LOGGER = logging.getLogger('couchwire')


class Session(object):
    """Wrapper around BaseUrlSession that issues request descriptors.

    Connection errors raised by `requests` propagate to the caller; status
    codes are left for the response classifier to interpret.
    """

    def __init__(self, base_url=None):
        self._base_session = sessions.BaseUrlSession(base_url=base_url)

    @property
    def base_url(self):
        return self._base_session.base_url

    @base_url.setter
    def base_url(self, url):
        self._base_session.base_url = url

    def send(self, request, data=None, auth=None, timeout=None):
        """Issue a request and return the `requests.Response`.

        :param request: the `RequestDescriptor` to issue
        :param data: the request body (bytes, or a dict to form-encode)
        :param auth: optional ``(username, password)`` for basic auth
        :param timeout: optional timeout in seconds
        """
        LOGGER.debug("%s %s", request.method, request.path)
        resp = self._base_session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=data,
            auth=auth,
            timeout=timeout,
        )
        LOGGER.debug("%s %s -> %s", request.method, request.path, resp.status_code)
        return resp

    def close(self):
        self._base_session.close()
