# -*- coding: utf-8 -*-

import unittest
import couchview


class TestPackage(unittest.TestCase):

    def test_exports(self):
        expected = set([
            # couchview.client
            'Server', 'Database',
            # couchview.query
            'ViewQuery',
            # couchview.design
            'DesignDocument', 'DictDesignDocument', 'FolderDesignDocument',
            'Session', 'exceptions',
        ])
        exported = set(e for e in dir(couchview) if not e.startswith('_'))
        self.assertTrue(expected <= exported)
