"""Tests for UserApiClient against a scripted session."""

import pytest
import requests

from ulm.api.client import RateLimited, UserApiClient, _retry_after_seconds

from ..mocks import FakeResponse, FakeSession


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr('ulm.api.client.time.sleep', lambda s: None)


def make_client(responses, **kwargs):
    session = FakeSession(responses)
    return UserApiClient('http://api.test/', session=session, **kwargs), session


class TestListUsers:
    def test_request_shape(self):
        body = {'users': [{'id': 1, 'name': 'a', 'email': 'a@x'}], 'more': True}
        client, session = make_client([FakeResponse(200, body)])
        result = client.list_users(1, 10)
        assert result.more is True
        assert [u.name for u in result.users] == ['a']
        call = session.calls[0]
        assert call['url'] == 'http://api.test/api/user'
        assert call['params'] == {'page': 1, 'limit': 10}
        assert call['timeout'] is None

    def test_name_filter_param(self):
        client, session = make_client([FakeResponse(200, {'users': [], 'more': False})])
        client.list_users(1, 10, '*nonexistent*')
        assert list(session.calls[0]['params'].items()) == [
            ('page', 1), ('limit', 10), ('name', '*nonexistent*'),
        ]

    def test_wildcards_percent_encoded_on_the_wire(self):
        client, session = make_client([FakeResponse(200, {'users': [], 'more': False})])
        client.list_users(1, 10, '*nonexistent*')
        call = session.calls[0]
        prepared = requests.Request('GET', call['url'], params=call['params']).prepare()
        assert prepared.url == 'http://api.test/api/user?page=1&limit=10&name=%2Anonexistent%2A'

    def test_bearer_token(self):
        client, session = make_client([FakeResponse(200, {'users': []})], token='t0k')
        client.list_users(1, 10)
        assert session.calls[0]['headers']['Authorization'] == 'Bearer t0k'

    def test_no_auth_header_without_token(self):
        client, session = make_client([FakeResponse(200, {'users': []})])
        client.list_users(1, 10)
        assert 'Authorization' not in session.calls[0]['headers']

    def test_http_error_raises(self):
        client, _ = make_client([FakeResponse(500, {'message': 'boom'})])
        with pytest.raises(requests.HTTPError):
            client.list_users(1, 10)

    def test_retries_after_rate_limit(self):
        client, session = make_client([
            FakeResponse(429, headers={'Retry-After': '0'}),
            FakeResponse(200, {'users': [], 'more': False}),
        ])
        assert client.list_users(1, 10).users == ()
        assert len(session.calls) == 2

    def test_gives_up_after_max_retries(self):
        client, session = make_client([FakeResponse(429, headers={'Retry-After': '0'})], max_retries=2)
        with pytest.raises(requests.RequestException) as excinfo:
            client.list_users(1, 10)
        assert isinstance(excinfo.value, RateLimited)
        assert len(session.calls) == 2

    def test_http_date_retry_after_still_retries(self):
        client, session = make_client([
            FakeResponse(429, headers={'Retry-After': 'Wed, 21 Oct 2026 07:28:00 GMT'}),
            FakeResponse(200, {'users': [], 'more': False}),
        ])
        assert client.list_users(1, 10).more is False
        assert len(session.calls) == 2

    def test_server_error_not_retried(self):
        client, session = make_client([FakeResponse(503), FakeResponse(200, {'users': []})])
        with pytest.raises(requests.HTTPError):
            client.list_users(1, 10)
        assert len(session.calls) == 1

    def test_malformed_body(self):
        client, _ = make_client([FakeResponse(200, ['not', 'an', 'object'])])
        with pytest.raises(ValueError):
            client.list_users(1, 10)


class TestDeleteUser:
    @pytest.mark.parametrize('status', [200, 204])
    def test_success(self, status):
        client, session = make_client([FakeResponse(status)])
        assert client.delete_user(42).ok
        assert session.calls[0]['method'] == 'DELETE'
        assert session.calls[0]['url'] == 'http://api.test/api/user/42'

    def test_server_error_is_failure(self):
        client, session = make_client([FakeResponse(500), FakeResponse(200)])
        outcome = client.delete_user('7')
        assert not outcome.ok
        assert outcome.message == 'HTTP 500'
        assert len(session.calls) == 1

    def test_transport_error_is_failure(self):
        client, _ = make_client([requests.ConnectionError('refused')])
        outcome = client.delete_user('7')
        assert not outcome.ok
        assert 'refused' in outcome.message


def test_current_user():
    body = {'id': 1, 'name': 'root', 'email': 'r@x', 'roles': [{'role': 'admin'}]}
    client, session = make_client([FakeResponse(200, body)])
    me = client.current_user()
    assert me.is_admin
    assert session.calls[0]['url'] == 'http://api.test/api/user/me'


@pytest.mark.parametrize('header,expected', [
    ('0', 0),
    ('3', 3),
    (None, 1),
    ('Wed, 21 Oct 2026 07:28:00 GMT', 1),
    ('-5', 0),
])
def test_retry_after_seconds(header, expected):
    assert _retry_after_seconds(header) == expected


def test_rate_limited_current_user_is_request_exception():
    client, _ = make_client([FakeResponse(429, headers={'Retry-After': '0'})], max_retries=2)
    with pytest.raises(requests.RequestException):
        client.current_user()
