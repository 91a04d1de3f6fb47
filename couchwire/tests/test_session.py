# -*- coding: utf-8 -*-

import unittest
from unittest import mock

from requests_toolbelt import sessions

from couchwire import request
from couchwire.client import Server
from couchwire.config import ConnectionProperties
from couchwire.session import Session
from couchwire.tests.testutil import make_response


class SessionTestCase(unittest.TestCase):

    def test_base_url(self):
        session = Session(base_url='http://localhost:5984/')
        self.assertEqual(session.base_url, 'http://localhost:5984/')
        session.base_url = 'http://example.com:5984/'
        self.assertEqual(session.base_url, 'http://example.com:5984/')

    @mock.patch.object(sessions.BaseUrlSession, 'request')
    def test_send(self, mock_request):
        mock_request.return_value = make_response(201, {'ok': True})
        req = request.build(ConnectionProperties('localhost'), 'PUT', '/db/doc1', has_body=True)
        resp = Session(base_url='http://localhost:5984/').send(req, data=b'{}', auth=('a', 'b'), timeout=3)
        self.assertEqual(resp.status_code, 201)
        mock_request.assert_called_with(
            'PUT', 'http://localhost:5984/db/doc1',
            headers={'Accept': 'application/json', 'Content-Type': 'application/json'},
            data=b'{}', auth=('a', 'b'), timeout=3,
        )

    @mock.patch.object(sessions.BaseUrlSession, 'request')
    def test_send_uses_descriptor_address(self, mock_request):
        mock_request.return_value = make_response(200, {'uuids': ['a']})
        props = ConnectionProperties('127.0.0.1', 43843)
        server = Server(props, session=Session(base_url='http://127.0.0.1:36869/'))
        self.assertEqual(server.get_uuids(), ['a'])
        self.assertEqual(mock_request.call_args[0][1], 'http://127.0.0.1:43843/_uuids?count=1')

    @mock.patch.object(sessions.BaseUrlSession, 'request')
    def test_send_secured(self, mock_request):
        mock_request.return_value = make_response(200, {})
        req = request.build(ConnectionProperties('example.com', 6984, secured=True), 'GET', '/db')
        Session().send(req)
        self.assertEqual(mock_request.call_args[0][1], 'https://example.com:6984/db')
