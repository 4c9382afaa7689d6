import pytest
import requests

from app.services.backend_client import BackendClient, BackendError


def test_base_url_trailing_slash_is_stripped(backend_client):
    assert backend_client.url_for('/tenants') == 'http://backend.test/tenants'


def test_fetch_json_sends_json_headers_and_timeout(backend_client, fake_session):
    body = backend_client.fetch_json('/tenants')

    assert body[0]['name'] == 'Acme Academy'
    call = fake_session.calls[-1]
    assert call['method'] == 'GET'
    assert call['headers'] == {'Content-Type': 'application/json'}
    assert call['timeout'] == 5
    assert call['payload'] is None


def test_create_record_posts_json_body(backend_client, fake_session):
    created = backend_client.create_record('/tenants', {'name': 'Acme', 'code': 'ACM'})

    assert created == {'id': 'new'}
    assert fake_session.calls_for('POST', '/tenants')[0]['payload'] == {'name': 'Acme', 'code': 'ACM'}


def test_non_2xx_raises_with_status_code_as_message(backend_client, fake_session):
    fake_session.add('GET', '/classes', {'detail': 'boom'}, status=500)

    with pytest.raises(BackendError) as excinfo:
        backend_client.list_records('/classes')

    assert excinfo.value.status_code == 500
    assert excinfo.value.path == '/classes'
    assert str(excinfo.value) == '500'


def test_connection_error_becomes_backend_error(backend_client, fake_session):
    fake_session.add('GET', '/', exc=requests.ConnectionError('connection refused'))

    with pytest.raises(BackendError) as excinfo:
        backend_client.health()

    assert excinfo.value.status_code is None
    assert 'connection refused' in str(excinfo.value)


def test_invalid_json_body_becomes_backend_error(backend_client, fake_session):
    fake_session.add('GET', '/invoices', invalid_json=True)

    with pytest.raises(BackendError):
        backend_client.list_records('/invoices')


def test_from_config_reads_backend_settings(fake_session):
    client = BackendClient.from_config({'BACKEND_URL': 'http://api.example/', 'BACKEND_TIMEOUT': 3},
                                       session=fake_session)

    assert client.base_url == 'http://api.example'
    assert client.timeout == 3
