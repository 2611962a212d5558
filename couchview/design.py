"""Sources of view definitions for design documents.

A design document source knows the views of one design document and hands
them out as a mapping of view name to function sources::

    {'by_type': {'map': 'function(doc) { emit(doc.type, null); }',
                 'reduce': '_count'}}

`couchview.query.ViewQuery` embeds that mapping verbatim when it has to create
a missing design document on the server.
"""
import io
import os

__all__ = ['DesignDocument', 'DictDesignDocument', 'FolderDesignDocument']

MAP_FILE = 'map.js'
REDUCE_FILE = 'reduce.js'


class DesignDocument(object):
    """Base class of design document sources."""

    def get_views(self):
        """Return the mapping of view name to ``{'map': ..., 'reduce': ...}``.

        :rtype: `dict`
        """
        raise NotImplementedError


class DictDesignDocument(DesignDocument):
    """Design document whose views are given as a mapping."""

    def __init__(self, views):
        self._views = dict(views)

    def get_views(self):
        return dict(self._views)

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, sorted(self._views))


class FolderDesignDocument(DesignDocument):
    """Design document read from a folder on disk.

    The folder follows the usual couchapp layout, one directory per view::

        <path>/views/by_type/map.js
        <path>/views/by_type/reduce.js   (optional)

    View directories without a ``map.js`` are ignored.
    """

    def __init__(self, path):
        self._path = path

    @property
    def path(self):
        return self._path

    def get_views(self):
        views_dir = os.path.join(self._path, 'views')
        if not os.path.isdir(views_dir):
            return {}
        views = {}
        for name in sorted(os.listdir(views_dir)):
            view_dir = os.path.join(views_dir, name)
            map_path = os.path.join(view_dir, MAP_FILE)
            if not os.path.isfile(map_path):
                continue
            view = {'map': _read(map_path)}
            reduce_path = os.path.join(view_dir, REDUCE_FILE)
            if os.path.isfile(reduce_path):
                view['reduce'] = _read(reduce_path)
            views[name] = view
        return views

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self._path)


def _read(path):
    with io.open(path, encoding='utf-8') as f:
        return f.read()
