"""
Tests for the package-level exports and convenience aliases.
"""

import multi_context_auth as mca


def test_aliases_point_at_implementations():
    assert mca.get_auth_token is mca.extract_token
    assert mca.get_context is mca.resolve_auth_context
    assert mca.get_context_token is mca.extract_context_token
    assert mca.get_all_context_tokens is mca.extract_token_from_all_contexts
    assert mca.get_context_cookie_name is mca.get_cookie_name
    assert mca.map_type_to_context is mca.get_context_from_type
    assert mca.is_valid_context is mca.is_valid_context_type
    assert mca.validate_origin is mca.is_origin_allowed_for_context


def test_all_names_are_exported():
    for name in mca.__all__:
        assert hasattr(mca, name), name


def test_top_level_usage():
    req = {
        "headers": {"origin": "https://customer.example.com"},
        "cookies": {"customer_access_token": "tok"},
    }
    result = mca.get_auth_token(req)
    assert result.as_dict() == {
        "token": "tok",
        "source": "cookie",
        "context": "customer",
    }
