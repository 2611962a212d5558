#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from setuptools import setup

setup(
    name='couchview',
    version='0.1.0',
    description='CouchDB view queries with automatic design document creation',
    long_description="""
    Query builder and client for CouchDB views. Queries are configured through
    chained setters and create their design document on the server when the
    view does not exist yet.""",
    license = 'BSD',
    classifiers = [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database :: Front-Ends',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages = ['couchview', 'couchview.tests'],
    python_requires='>=3.6',
    install_requires=[
        "furl",
        "requests",
        "requests_toolbelt",
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
)
