import json
import threading

import pytest

from app import create_app
from app.services.backend_client import BackendClient
from app.services.dashboard_service import DashboardController

BACKEND_URL = 'http://backend.test'

TENANTS = [{'id': 't1', 'name': 'Acme Academy', 'code': 'ACM'}]
STUDENTS = [{'id': 's1', 'tenant_id': 't1', 'student_number': 'S-001',
             'first_name': 'Ada', 'last_name': 'Lovelace', 'grade_level': '7'}]
CLASSES = [{'id': 'c1', 'tenant_id': 't1', 'name': 'Algebra I', 'code': 'ALG1',
            'subject': 'Mathematics', 'grade_level': '7'}]
ANNOUNCEMENTS = [{'id': 'a1', 'tenant_id': 't1', 'title': 'Term starts', 'message': 'Welcome back on Monday'}]
INVOICES = [{'id': 'i1', 'tenant_id': 't1', 'student_id': 's1', 'title': 'Tuition',
             'amount': 250.0, 'status': 'pending'}]


class FakeResponse:
    def __init__(self, status_code=200, body=None, invalid_json=False):
        self.status_code = status_code
        self.body = body
        self.invalid_json = invalid_json

    def json(self):
        if self.invalid_json:
            raise ValueError('No JSON object could be decoded')
        return self.body


class FakeSession:
    """Stands in for requests.Session: answers by (method, path) and records every call."""

    def __init__(self, base_url=BACKEND_URL):
        self.base_url = base_url
        self.routes = {}
        self.calls = []
        self.before_request = None
        self._lock = threading.Lock()

    def add(self, method, path, body=None, status=200, exc=None, invalid_json=False):
        self.routes[(method, path)] = (exc, FakeResponse(status, body, invalid_json))

    def request(self, method, url, **kwargs):
        path = url[len(self.base_url):] or '/'
        data = kwargs.get('data')
        with self._lock:
            self.calls.append({
                'method': method,
                'path': path,
                'payload': json.loads(data) if data is not None else None,
                'headers': kwargs.get('headers'),
                'timeout': kwargs.get('timeout'),
            })
        if self.before_request is not None:
            self.before_request(method, path)
        exc, response = self.routes.get((method, path), (None, FakeResponse(404, {'detail': 'Not Found'})))
        if exc is not None:
            raise exc
        return response

    def calls_for(self, method=None, path=None):
        return [call for call in self.calls
                if (method is None or call['method'] == method) and (path is None or call['path'] == path)]


@pytest.fixture
def fake_session():
    session = FakeSession()
    session.add('GET', '/', {'message': 'EDmin API running'})
    session.add('GET', '/tenants', list(TENANTS))
    session.add('GET', '/students', list(STUDENTS))
    session.add('GET', '/classes', list(CLASSES))
    session.add('GET', '/announcements', list(ANNOUNCEMENTS))
    session.add('GET', '/invoices', list(INVOICES))
    for path in ('/tenants', '/students', '/classes', '/announcements', '/invoices'):
        session.add('POST', path, {'id': 'new'}, status=201)
    return session


@pytest.fixture
def backend_client(fake_session):
    return BackendClient(base_url=BACKEND_URL + '/', timeout=5, session=fake_session)


@pytest.fixture
def controller(backend_client):
    return DashboardController(backend_client)


@pytest.fixture
def app(fake_session):
    app = create_app(overrides={
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'BACKEND_URL': BACKEND_URL + '/',
    }, backend_session=fake_session)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
