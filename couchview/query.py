# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Query objects for CouchDB views.

>>> query = ViewQuery(Session('http://localhost:5984/'), 'docs', 'app', 'by_type')
>>> rows = query.set_key('abc').set_limit(10).set_include_docs(True).execute()

If the view does not exist yet and the query was given a design document
source, the design document is created from it and the read is retried once.
"""
import json

import furl

from couchview import exceptions
from couchview.logging import logger

__all__ = ['ViewQuery', 'PARAMETERS']
__docformat__ = 'restructuredtext en'


PARAMETERS = frozenset([
    'key', 'startkey', 'endkey', 'startkey_docid', 'endkey_docid',
    'limit', 'skip', 'stale', 'descending', 'group', 'group_level',
    'reduce', 'include_docs', 'inclusive_end',
])


def _jsons(data, indent=None):
    """Convert data into JSON string."""
    return json.dumps(data, ensure_ascii=False, indent=indent)


class ViewQuery(object):
    """Query of a single view in a design document.

    Setters return the query itself so calls can be chained. Every parameter
    value is sent JSON encoded, so ``set_key('abc')`` ends up as
    ``key=%22abc%22`` in the query string.

    :param session: the `Session` used to talk to the server
    :param database_name: the name of the database holding the view
    :param design_doc_name: the name of the design document, without the
                            ``_design/`` prefix
    :param view_name: the name of the view
    :param design_doc: an optional `DesignDocument` used to create the design
                       document when the view is missing
    """

    def __init__(self, session, database_name, design_doc_name, view_name, design_doc=None):
        self._session = session
        self._database_name = database_name
        self._design_doc_name = design_doc_name
        self._view_name = view_name
        self._design_doc = design_doc
        self._params = {}

    def __repr__(self):
        return '<%s %s/_design/%s/_view/%s %r>' % (
            type(self).__name__, self._database_name, self._design_doc_name,
            self._view_name, self._params)

    @property
    def design_doc_path(self):
        return furl.Path([self._database_name, '_design', self._design_doc_name])

    @property
    def path(self):
        return self.design_doc_path.add(['_view', self._view_name])

    def execute(self):
        """Query the view with the current parameters.

        :return: the ``rows`` of the response, as decoded
        :rtype: `list`
        :raise ConfigurationError: if the view has to be created but no
                                   design document was given
        :raise HTTPError: if the server answers the final read with an error
        """
        path = self.path
        params = dict((name, _jsons(value)) for name, value in self._params.items())
        try:
            resp = self._session.get(path, params=params)
        except exceptions.RequestsException as exc:
            logger.debug("Querying view %s failed (%s), creating it", path, exc)
            self.create_view()
            resp = self._session.get(path, params=params)
        return resp.json()['rows']

    def create_view(self):
        """Create the design document holding this view.

        The outcome of the write is not checked; if it did not work, the read
        that follows fails instead.
        """
        if self._design_doc is None:
            raise exceptions.ConfigurationError(
                "No design document is connected to the query of view %r, "
                "cannot create design document %r automatically"
                % (self._view_name, self._design_doc_name))
        doc = {
            '_id': '_design/' + self._design_doc_name,
            'views': self._design_doc.get_views(),
        }
        logger.info("Creating design document %s", self.design_doc_path)
        try:
            self._session.put(self.design_doc_path, json=doc)
        except exceptions.RequestsException as exc:
            logger.warning("Creating design document %s failed: %s", self.design_doc_path, exc)

    def get_parameter(self, key):
        """Return the value set for the parameter `key`, or `None`."""
        return self._params.get(key)

    def set_key(self, val):
        """Find rows with exactly this key."""
        self._params['key'] = val
        return self

    def set_start_key(self, val):
        """Set the key to start returning rows at."""
        self._params['startkey'] = val
        return self

    def set_end_key(self, val):
        """Set the key to stop returning rows at."""
        self._params['endkey'] = val
        return self

    def set_start_key_doc_id(self, val):
        """Document id to start with, among the rows with the start key."""
        self._params['startkey_docid'] = val
        return self

    def set_end_key_doc_id(self, val):
        """Last document id to include, among the rows with the end key."""
        self._params['endkey_docid'] = val
        return self

    def set_limit(self, val):
        """Limit the number of rows in the output."""
        self._params['limit'] = int(val)
        return self

    def set_skip(self, val):
        """Skip this number of rows."""
        self._params['skip'] = int(val)
        return self

    def set_stale(self, flag):
        """Allow CouchDB to answer from the index without refreshing it."""
        self._params['stale'] = bool(flag)
        return self

    def set_descending(self, flag):
        """Reverse the output. CouchDB swaps the roles of start and end key."""
        self._params['descending'] = bool(flag)
        return self

    def set_group(self, flag):
        """Reduce to a set of distinct keys instead of a single row."""
        self._params['group'] = bool(flag)
        return self

    def set_group_level(self, level):
        self._params['group_level'] = int(level)
        return self

    def set_reduce(self, flag):
        """Use the reduce function of the view.

        CouchDB defaults to `True` if the view defines a reduce function.
        """
        self._params['reduce'] = bool(flag)
        return self

    def set_include_docs(self, flag):
        """Include the document that emitted each row."""
        self._params['include_docs'] = bool(flag)
        return self

    def set_inclusive_end(self, flag):
        """Whether rows with the end key are included. CouchDB defaults to `True`."""
        self._params['inclusive_end'] = bool(flag)
        return self
