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
    name='CouchWire',
    version='1.0.0',
    description='HTTP/JSON client library for CouchDB',
    long_description="""
    This is a Python library for CouchDB. It translates document, bulk,
    attachment, view, session and server administration operations into
    single HTTP round trips, and server responses into results or
    classified errors.""",
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
    packages = ['couchwire', 'couchwire.tests'],
    python_requires='>=3.6',
    install_requires=[
        "furl",
        "requests",
        "requests_toolbelt",
    ],
    zip_safe=True,
)
