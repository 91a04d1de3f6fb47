# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""View query parameters and view results.

Parameters are built with the `QueryParameter` constructors and encoded in
the order given:

>>> encode([QueryParameter.start_key(['a']), QueryParameter.limit(10)])
ViewQuery(query_string='?startkey="a"&limit=10', method='GET', body=None)

A ``keys`` parameter with more than one key is sent in a ``POST`` body:

>>> encode([QueryParameter.keys(['a', 'b'])])
ViewQuery(query_string='', method='POST', body={'keys': ['a', 'b']})
"""
import collections
import json

from couchwire.request import quote

__all__ = ['QueryParameter', 'ViewQuery', 'ViewResult', 'Row', 'encode',
           'EMPTY_OBJECT', 'STALE_OK', 'STALE_UPDATE_AFTER']


STALE_OK = 'ok'
STALE_UPDATE_AFTER = 'update_after'


class _EmptyObject(object):
    """Marker for an empty JSON object (``{}``) inside a key.

    Commonly used as the high end of a compound key range, e.g.
    ``end_key(['smith', EMPTY_OBJECT])``.
    """

    def __repr__(self):
        return 'EMPTY_OBJECT'

    def __eq__(self, other):
        return isinstance(other, _EmptyObject) or other == {}

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(_EmptyObject)


EMPTY_OBJECT = _EmptyObject()


class QueryParameter(collections.namedtuple('QueryParameter', ['kind', 'value'])):
    """A single view query parameter.

    Instances are created through one class method per parameter kind;
    `encode` knows how to render each of them.
    """
    __slots__ = ()

    @classmethod
    def conflicts(cls, value=True):
        """Include conflicts information (only with ``include_docs``)."""
        return cls('conflicts', bool(value))

    @classmethod
    def descending(cls, value=True):
        return cls('descending', bool(value))

    @classmethod
    def end_key(cls, key):
        """Stop returning rows when the given key is reached.

        :param key: a sequence of key elements; a single element is the key
                    itself, several elements form a compound key
        """
        return cls('end_key', _key_elements(key))

    @classmethod
    def end_key_doc_id(cls, value):
        return cls('end_key_doc_id', value)

    @classmethod
    def group(cls, value=True):
        return cls('group', bool(value))

    @classmethod
    def group_level(cls, value):
        return cls('group_level', int(value))

    @classmethod
    def include_docs(cls, value=True):
        return cls('include_docs', bool(value))

    @classmethod
    def attachments(cls, value=True):
        return cls('attachments', bool(value))

    @classmethod
    def attachment_encoding_info(cls, value=True):
        return cls('attachment_encoding_info', bool(value))

    @classmethod
    def inclusive_end(cls, value=True):
        return cls('inclusive_end', bool(value))

    @classmethod
    def limit(cls, value):
        return cls('limit', int(value))

    @classmethod
    def reduce(cls, value=True):
        return cls('reduce', bool(value))

    @classmethod
    def skip(cls, value):
        return cls('skip', int(value))

    @classmethod
    def stale(cls, value=STALE_OK):
        """Allow stale view results: `STALE_OK` or `STALE_UPDATE_AFTER`."""
        if value not in (STALE_OK, STALE_UPDATE_AFTER):
            raise ValueError('stale must be %r or %r, got %r' % (STALE_OK, STALE_UPDATE_AFTER, value))
        return cls('stale', value)

    @classmethod
    def start_key(cls, key):
        """Return rows starting with the given key, see `end_key`."""
        return cls('start_key', _key_elements(key))

    @classmethod
    def start_key_doc_id(cls, value):
        return cls('start_key_doc_id', value)

    @classmethod
    def update_sequence(cls, value=True):
        return cls('update_sequence', bool(value))

    @classmethod
    def keys(cls, keys):
        """Return only rows matching one of the given keys.

        Each entry may be a scalar or a list (a compound key).
        """
        return cls('keys', _key_elements(keys))


def _key_elements(key):
    if isinstance(key, (str, bytes)) or not hasattr(key, '__iter__'):
        raise TypeError('expected a sequence of key elements, got %r' % (key,))
    elements = tuple(key)
    if not elements:
        raise ValueError('at least one key element is required')
    return elements


ViewQuery = collections.namedtuple('ViewQuery', ['query_string', 'method', 'body'])


def _literal(value):
    """Render a non-string key element as literal query text."""
    if isinstance(value, _EmptyObject) or value == {}:
        return '{}'
    if value is None or isinstance(value, (bool, int, float)):
        return json.dumps(value)
    if isinstance(value, (list, tuple, dict, set)):
        raise TypeError('nested key element not supported: %r' % (value,))
    return str(value)


def _string(value):
    return '"%s"' % quote(value)


def _array(elements):
    """Render a compound key as ``[e0,e1,...]``."""
    return '[%s]' % ','.join(_string(e) if isinstance(e, str) else _literal(e) for e in elements)


def _single(value):
    if isinstance(value, str):
        return _string(value)
    if isinstance(value, (list, tuple)):
        return _array(value)
    return _literal(value)


def _key(elements):
    if len(elements) == 1:
        return _single(elements[0])
    return _array(elements)


def _json_key(value):
    if isinstance(value, _EmptyObject):
        return {}
    if isinstance(value, (list, tuple)):
        return [_json_key(v) for v in value]
    return value


def _scalar(value):
    return json.dumps(value)


_NAMES = {
    'conflicts': 'conflicts',
    'descending': 'descending',
    'end_key': 'endkey',
    'end_key_doc_id': 'endkey_docid',
    'group': 'group',
    'group_level': 'group_level',
    'include_docs': 'include_docs',
    'attachments': 'attachments',
    'attachment_encoding_info': 'att_encoding_info',
    'inclusive_end': 'inclusive_end',
    'limit': 'limit',
    'reduce': 'reduce',
    'skip': 'skip',
    'stale': 'stale',
    'start_key': 'startkey',
    'start_key_doc_id': 'startkey_docid',
    'update_sequence': 'update_seq',
    'keys': 'key',
}

_RENDERERS = {
    'conflicts': _scalar,
    'descending': _scalar,
    'end_key': _key,
    'end_key_doc_id': quote,
    'group': _scalar,
    'group_level': _scalar,
    'include_docs': _scalar,
    'attachments': _scalar,
    'attachment_encoding_info': _scalar,
    'inclusive_end': _scalar,
    'limit': _scalar,
    'reduce': _scalar,
    'skip': _scalar,
    'stale': quote,
    'start_key': _key,
    'start_key_doc_id': quote,
    'update_sequence': _scalar,
    'keys': _key,
}


def encode(parameters):
    """Encode view query parameters.

    Parameters are rendered as ``name=value`` in the order given. A ``keys``
    parameter holding more than one key adds nothing to the query string;
    instead the query is switched to ``POST`` with a ``{"keys": [...]}``
    body. Only one such parameter may be given.

    :param parameters: a sequence of `QueryParameter`
    :return: the query string (empty or starting with ``?``), the HTTP
             method and the body to send (``None`` for ``GET``)
    :rtype: `ViewQuery`
    """
    fragments = []
    body = None
    for parameter in parameters:
        kind, value = parameter
        if kind not in _RENDERERS:
            raise ValueError('unknown query parameter %r' % (kind,))
        if kind == 'keys' and len(value) > 1:
            if body is not None:
                raise ValueError('only one multi-key keys parameter is allowed')
            body = {'keys': [_json_key(v) for v in value]}
            continue
        fragments.append('%s=%s' % (_NAMES[kind], _RENDERERS[kind](value)))

    query_string = '?' + '&'.join(fragments) if fragments else ''
    if body is not None:
        return ViewQuery(query_string, 'POST', body)
    return ViewQuery(query_string, 'GET', None)


class ViewResult(object):
    """Result of view query; contains rows, offset, total_rows.
    Instances of this class are not supposed to be created by client software.
    """

    def __init__(self, rows, offset, total_rows, update_seq=None):
        self.rows = rows
        self.offset = offset
        self.total_rows = total_rows
        self.update_seq = update_seq

    @classmethod
    def from_json(cls, data):
        """Build a view result from the decoded response of a view query."""
        return cls(
            [
                Row(r.get("id"), r.get("key"), r.get("value"), r.get("doc"), r.get("error"))
                for r in data.get("rows", [])
            ],
            data.get("offset"),
            data.get("total_rows"),
            data.get("update_seq"),
        )

    def __len__(self):
        return len(self.rows)

    def __getitem__(self, i):
        return self.rows[i]

    def __iter__(self):
        return iter(self.rows)

    def __repr__(self):
        return '<%s %d rows>' % (type(self).__name__, len(self.rows))

    def json(self):
        "Return data in a JSON-like representation."
        result = dict()
        result["total_rows"] = self.total_rows
        result["offset"] = self.offset
        result["rows"] = [row._asdict() for row in self.rows]
        if self.update_seq is not None:
            result["update_seq"] = self.update_seq
        return result


Row = collections.namedtuple("Row", ["id", "key", "value", "doc", "error"])
