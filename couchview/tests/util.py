# -*- coding: utf-8 -*-

import json

import requests
from requests.adapters import BaseAdapter

from couchview.session import Session

BASE_URL = 'http://localhost:5984/'

REASONS = {
    200: 'OK',
    201: 'Created',
    400: 'Bad Request',
    404: 'Not Found',
    409: 'Conflict',
    500: 'Internal Server Error',
}


class FakeAdapter(BaseAdapter):
    """Transport adapter answering requests from a queue of canned replies.

    Each reply is either a ``(status_code, body)`` tuple or an exception
    instance, which is raised instead of answering. Sent requests are kept in
    ``requests``.
    """

    def __init__(self, *replies):
        super(FakeAdapter, self).__init__()
        self.replies = list(replies)
        self.requests = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        status_code, body = reply
        resp = requests.Response()
        resp.status_code = status_code
        resp.reason = REASONS.get(status_code, 'Unknown')
        resp.headers['Content-Type'] = 'application/json'
        resp._content = json.dumps(body).encode('utf-8') if body is not None else b''
        resp.encoding = 'utf-8'
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass

    @property
    def methods(self):
        return [r.method for r in self.requests]


def fake_session(*replies):
    """Return a `Session` on `BASE_URL` together with its `FakeAdapter`."""
    adapter = FakeAdapter(*replies)
    session = Session(base_url=BASE_URL)
    session.mount('http://', adapter)
    return session, adapter
