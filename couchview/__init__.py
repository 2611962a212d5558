# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from couchview import exceptions
from couchview.client import Server, Database
from couchview.design import DesignDocument, DictDesignDocument, FolderDesignDocument
from couchview.query import ViewQuery
from couchview.session import Session

__version__ = '0.1.0'
