"""Tests for wire models and request building."""

import pytest

from ulm.api.models import DeleteOutcome, ListResult, Role, User, UserListQuery


class TestUserListQuery:
    @pytest.mark.parametrize('frontend_page', [0, 1, 2, 9, 41])
    def test_backend_page_is_frontend_plus_one(self, frontend_page):
        query = UserListQuery.for_page(frontend_page, '', 10)
        assert query.backend_page == frontend_page + 1

    def test_negative_page_clamped(self):
        assert UserListQuery.for_page(-2, None, 10).backend_page == 1

    def test_filter_wrapped_in_wildcards(self):
        query = UserListQuery.for_page(0, 'nonexistent', 10)
        assert query.name == '*nonexistent*'

    def test_filter_whitespace_stripped(self):
        assert UserListQuery.for_page(0, '  ad min ', 10).name == '*ad min*'

    @pytest.mark.parametrize('text', [None, '', '   '])
    def test_blank_filter_omitted(self, text):
        query = UserListQuery.for_page(0, text, 10)
        assert query.name is None
        assert 'name' not in query.to_params()

    def test_param_order(self):
        params = UserListQuery.for_page(1, 'kai', 10).to_params()
        assert list(params) == ['page', 'limit', 'name']
        assert params == {'page': 2, 'limit': 10, 'name': '*kai*'}


class TestUser:
    def test_from_dict(self):
        user = User.from_dict({
            'id': 3,
            'name': 'Kai Chen',
            'email': 'd@jwt.com',
            'roles': [{'role': 'diner'}, {'role': 'franchisee', 'objectId': 'fr-99'}],
        })
        assert user.id == 3
        assert user.has_id
        assert user.roles == (Role('diner'), Role('franchisee', 'fr-99'))
        assert not user.is_admin

    def test_without_id(self):
        user = User.from_dict({'name': 'ghost', 'email': 'g@jwt.com'})
        assert user.id is None
        assert not user.has_id
        assert user.roles == ()

    def test_admin(self):
        assert User.from_dict({'name': 'a', 'email': 'a@x', 'roles': [{'role': 'admin'}]}).is_admin

    def test_to_dict_uses_wire_names(self):
        user = User(id='1', name='n', email='e', roles=(Role('franchisee', 'fr-1'),))
        assert user.to_dict() == {
            'id': '1', 'name': 'n', 'email': 'e',
            'roles': [{'role': 'franchisee', 'objectId': 'fr-1'}],
        }

    def test_rejects_non_object(self):
        with pytest.raises(ValueError):
            User.from_dict(['not', 'a', 'user'])


class TestListResult:
    def test_from_payload(self):
        result = ListResult.from_payload({'users': [{'id': 1, 'name': 'a', 'email': 'a@x'}], 'more': True})
        assert len(result.users) == 1
        assert result.more is True

    def test_missing_fields_mean_empty_last_page(self):
        result = ListResult.from_payload({})
        assert result.users == ()
        assert result.more is False

    @pytest.mark.parametrize('payload', [None, [], {'users': 'nope'}])
    def test_invalid_payload(self, payload):
        with pytest.raises(ValueError):
            ListResult.from_payload(payload)


def test_delete_outcome():
    assert DeleteOutcome.success().ok
    failed = DeleteOutcome.failure('HTTP 500')
    assert not failed.ok
    assert failed.message == 'HTTP 500'
