# -*- coding: utf-8 -*-

import io
import os
import shutil
import tempfile
import unittest

from couchview.design import DesignDocument, DictDesignDocument, FolderDesignDocument


class DesignDocumentTestCase(unittest.TestCase):

    def test_base_class(self):
        self.assertRaises(NotImplementedError, DesignDocument().get_views)

    def test_dict(self):
        views = {'by_type': {'map': 'function(doc) { emit(doc.type, null); }'}}
        doc = DictDesignDocument(views)
        self.assertEqual(doc.get_views(), views)
        doc.get_views()['other'] = {}
        self.assertEqual(list(doc.get_views()), ['by_type'])


class FolderDesignDocumentTestCase(unittest.TestCase):

    def setUp(self):
        self.tempdir = tempfile.mkdtemp(prefix='couchview-')

    def tearDown(self):
        shutil.rmtree(self.tempdir)

    def write(self, *parts, **kwargs):
        path = os.path.join(self.tempdir, *parts)
        if not os.path.isdir(os.path.dirname(path)):
            os.makedirs(os.path.dirname(path))
        with io.open(path, 'w', encoding='utf-8') as f:
            f.write(kwargs['content'])

    def test_views(self):
        self.write('views', 'by_type', 'map.js', content=u'function(doc) { emit(doc.type, 1); }')
        self.write('views', 'by_type', 'reduce.js', content=u'_sum')
        self.write('views', 'by_name', 'map.js', content=u'function(doc) { emit(doc.name, null); }')
        self.write('views', 'broken', 'README', content=u'no map here')
        doc = FolderDesignDocument(self.tempdir)
        self.assertEqual(doc.get_views(), {
            'by_type': {'map': 'function(doc) { emit(doc.type, 1); }', 'reduce': '_sum'},
            'by_name': {'map': 'function(doc) { emit(doc.name, null); }'},
        })

    def test_no_views_folder(self):
        self.assertEqual(FolderDesignDocument(self.tempdir).get_views(), {})
