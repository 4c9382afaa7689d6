from dataclasses import dataclass, field
from typing import Dict, List

from app.models.entity import ENTITY_TYPES, empty_form

STATUS_CHECKING = 'Checking...'
STATUS_UNREACHABLE = '❌ Backend not reachable'


def _empty_collections() -> Dict[str, List[dict]]:
    return {entity.key: [] for entity in ENTITY_TYPES}


def _empty_forms() -> Dict[str, Dict[str, str]]:
    return {entity.key: empty_form(entity) for entity in ENTITY_TYPES}


@dataclass
class DashboardState:
    """Everything the dashboard shows: backend status, the five collections and the five forms."""
    status: str = STATUS_CHECKING
    collections: Dict[str, List[dict]] = field(default_factory=_empty_collections)
    forms: Dict[str, Dict[str, str]] = field(default_factory=_empty_forms)

    def counts(self) -> Dict[str, int]:
        return {key: len(records) for key, records in self.collections.items()}

    def to_dict(self) -> dict:
        return {
            'status': self.status,
            'collections': {key: list(records) for key, records in self.collections.items()},
            'counts': self.counts(),
            'forms': {key: dict(values) for key, values in self.forms.items()},
        }
