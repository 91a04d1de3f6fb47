# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from couchwire.client import Server, Database, UsersDatabase, Document, BulkResult
from couchwire.config import ConnectionProperties
from couchwire.views import QueryParameter, ViewResult, Row, EMPTY_OBJECT, STALE_OK, STALE_UPDATE_AFTER
from couchwire import exceptions

__version__ = '1.0.0'
