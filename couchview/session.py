from timeit import default_timer

import requests.exceptions
from requests_toolbelt import sessions

from couchview import exceptions
from couchview.logging import log_request


def _error_fields(response):
    """Return the ``error`` and ``reason`` of a CouchDB error response."""
    try:
        body = response.json()
    except ValueError:
        return None, None
    if not isinstance(body, dict):
        return None, None
    return body.get('error'), body.get('reason')


class Session(object):
    """Wrapper around BaseUrlSession that automatically wraps certain exceptions when making requests"""

    def __init__(self, base_url=None):
        self._base_session = sessions.BaseUrlSession(base_url=base_url)

    @property
    def base_url(self):
        return self._base_session.base_url

    @base_url.setter
    def base_url(self, url):
        self._base_session.base_url = url

    def mount(self, prefix, adapter):
        """Register a `requests` transport adapter for URLs starting with `prefix`."""
        self._base_session.mount(prefix, adapter)

    def request(self, method, url, *args, **kwargs):
        start = default_timer()
        status_code = None
        try:
            resp = self._base_session.request(method, str(url), *args, **kwargs)
            status_code = resp.status_code
            resp.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            error, reason = _error_fields(exc.response)
            raise exceptions.http_error_lookup(
                exc.response.status_code, exc.response.reason, error=error, reason=reason) from exc
        except requests.exceptions.Timeout as exc:
            raise exceptions.Timeout(str(exc)) from exc
        except requests.exceptions.RequestException as exc:
            raise exceptions.RequestsException(str(exc)) from exc
        finally:
            log_request(method, url, status_code, default_timer() - start)
        return resp

    def head(self, url, **kwargs):
        return self.request("HEAD", url=url, **kwargs)

    def get(self, url, **kwargs):
        return self.request("GET", url=url, **kwargs)

    def put(self, url, data=None, **kwargs):
        return self.request("PUT", url=url, data=data, **kwargs)

    def post(self, url, data=None, json=None, **kwargs):
        return self.request("POST", url=url, data=data, json=json, **kwargs)

    def delete(self, url, **kwargs):
        return self.request("DELETE", url=url, **kwargs)
