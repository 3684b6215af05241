"""
Unit tests for the requests-based API client
"""

from unittest.mock import MagicMock, patch

import pytest

from customer_api.client import ApiClientError, CustomerApiClient


def _response(status_code=200, json_data=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = text
    return response


@patch("customer_api.client.requests.request")
def test_login_stores_token_and_sends_it(mock_request):
    mock_request.side_effect = [
        _response(json_data={"token": "abc", "token_type": "bearer"}),
        _response(json_data=[{"id": 1, "name": "Ada"}]),
    ]
    client = CustomerApiClient("http://api.test/")

    assert client.login("alice", "p") == "abc"
    customers = client.list_customers()

    assert customers == [{"id": 1, "name": "Ada"}]
    login_call, list_call = mock_request.call_args_list
    assert login_call.args == ("POST", "http://api.test/login")
    assert login_call.kwargs["json"] == {"username": "alice", "password": "p"}
    assert "Authorization" not in login_call.kwargs["headers"]
    assert list_call.args == ("GET", "http://api.test/customers")
    assert list_call.kwargs["headers"] == {"Authorization": "Bearer abc"}


@patch("customer_api.client.requests.request")
def test_register_omits_unset_optional_fields(mock_request):
    mock_request.return_value = _response(text="User created successfully")
    client = CustomerApiClient("http://api.test")

    assert client.register("alice", "Alice", "p") == "User created successfully"
    assert mock_request.call_args.kwargs["json"] == {"username": "alice", "name": "Alice", "password": "p"}


@patch("customer_api.client.requests.request")
def test_update_and_delete_paths(mock_request):
    mock_request.return_value = _response(text="ok")
    client = CustomerApiClient("http://api.test")
    client.token = "abc"

    client.update_customer(5, "Ada", "ada@example.com", "555")
    assert mock_request.call_args.args == ("PUT", "http://api.test/customers/5")

    client.delete_customer(5)
    assert mock_request.call_args.args == ("DELETE", "http://api.test/customers/5")


@patch("customer_api.client.requests.request")
def test_error_status_raises(mock_request):
    mock_request.return_value = _response(status_code=403, text="Invalid Token")
    client = CustomerApiClient("http://api.test")

    with pytest.raises(ApiClientError) as exc_info:
        client.list_customers()

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Invalid Token"
