import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from app.models.entity import ENTITY_TYPES, empty_form, get_entity
from app.models.state import DashboardState, STATUS_UNREACHABLE
from app.services.backend_client import BackendError
from app.utils.form_rules import build_payload

logger = logging.getLogger(__name__)


class DashboardController:
    """Owns the dashboard state and every transition applied to it.

    The status probe, the collection loader and the five creation flows all go
    through here; routes only read ``snapshot()`` and call these methods.
    """

    def __init__(self, client):
        self.client = client
        self.state = DashboardState()
        self._lock = threading.Lock()

    def snapshot(self):
        """Return a copy of the current state that is safe to render."""
        with self._lock:
            return DashboardState(
                status=self.state.status,
                collections={key: list(records) for key, records in self.state.collections.items()},
                forms={key: dict(values) for key, values in self.state.forms.items()},
            )

    def probe_status(self):
        """Call the health endpoint and record the backend status string."""
        try:
            hello = self.client.health()
            status = f"✅ {hello.get('message', '') if isinstance(hello, dict) else hello}"
        except BackendError as e:
            logger.warning(f"Backend health probe failed: {e}")
            status = STATUS_UNREACHABLE

        with self._lock:
            self.state.status = status
        return status

    def refresh_all(self):
        """Re-fetch all five collections concurrently.

        The collections are replaced together only when every fetch succeeds;
        a single failure leaves the previous collections in place. Returns
        True when the collections were replaced.
        """
        with ThreadPoolExecutor(max_workers=len(ENTITY_TYPES)) as executor:
            futures = {
                entity.key: executor.submit(self.client.list_records, entity.path)
                for entity in ENTITY_TYPES
            }
            try:
                results = {key: future.result() for key, future in futures.items()}
            except BackendError as e:
                logger.warning(f"Collection refresh skipped: {e.path or 'backend'} failed ({e})")
                return False

        malformed = [key for key, records in results.items() if not isinstance(records, list)]
        if malformed:
            logger.warning(f"Collection refresh skipped: non-list body from {', '.join(malformed)}")
            return False

        with self._lock:
            for key, records in results.items():
                self.state.collections[key] = records
            counts = self.state.counts()
        logger.debug(f"Collections refreshed: {counts}")
        return True

    def load_all(self):
        """Probe the backend, then refresh every collection."""
        self.probe_status()
        return self.refresh_all()

    def diagnose(self):
        """Probe the health endpoint and each collection endpoint one by one.

        Used by the backend test page; never touches the dashboard state.
        """
        checks = [('/', 'Health', self.client.health)]
        checks.extend(
            (entity.path, entity.label, lambda path=entity.path: self.client.list_records(path))
            for entity in ENTITY_TYPES
        )

        results = []
        for path, label, call in checks:
            try:
                body = call()
            except BackendError as e:
                results.append({'path': path, 'label': label, 'ok': False, 'detail': str(e)})
                continue
            if isinstance(body, list):
                detail = f"{len(body)} records"
            elif isinstance(body, dict) and 'message' in body:
                detail = str(body['message'])
            else:
                detail = 'OK'
            results.append({'path': path, 'label': label, 'ok': True, 'detail': detail})
        return results

    def update_form(self, entity_key, values):
        """Replace the entity's form state with the known fields of ``values``."""
        entity = self._entity(entity_key)
        with self._lock:
            form = self._fill_form(entity, values)
            self.state.forms[entity.key] = form
            return dict(form)

    def submit(self, entity_key, values=None):
        """Run the creation flow for one entity.

        With ``values`` the posted fields are recorded and the payload is built
        from them in the same locked step, so a concurrent post for the same
        form cannot change what gets sent. Without ``values`` the stored form
        is submitted.

        Returns the created record, or None when the form did not validate and
        nothing was sent. BackendError from the POST propagates; in that case
        the form keeps its values and no refresh happens.
        """
        entity = self._entity(entity_key)
        with self._lock:
            if values is not None:
                self.state.forms[entity.key] = self._fill_form(entity, values)
            form = dict(self.state.forms[entity.key])
            payload = build_payload(entity.key, form)

        if payload is None:
            logger.debug(f"Skipping {entity.key} submission: form incomplete")
            return None

        created = self.client.create_record(entity.path, payload)
        logger.info(f"Created record in {entity.path}")

        with self._lock:
            # leave values typed by a later post in place
            if self.state.forms[entity.key] == form:
                self.state.forms[entity.key] = empty_form(entity)
        self.load_all()
        return created

    @staticmethod
    def _fill_form(entity, values):
        form = empty_form(entity)
        for field in entity.fields:
            form[field] = values.get(field) or ''
        return form

    def _entity(self, entity_key):
        entity = get_entity(entity_key)
        if entity is None:
            raise KeyError(f"Unknown collection: {entity_key}")
        return entity
