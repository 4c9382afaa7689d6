from collections import namedtuple

# One row per creatable entity: the backend collection it lives in, the form
# fields the dashboard posts (in display order) and the labels used on screen.
EntityType = namedtuple('EntityType', ['key', 'path', 'fields', 'title', 'label', 'singular', 'submit_label'])

TENANTS = EntityType(
    key='tenants',
    path='/tenants',
    fields=('name', 'code'),
    title='Create Tenant',
    label='Tenants',
    singular='Tenant',
    submit_label='Add Tenant',
)

STUDENTS = EntityType(
    key='students',
    path='/students',
    fields=('tenant_id', 'student_number', 'first_name', 'last_name', 'grade_level'),
    title='Register Student',
    label='Students',
    singular='Student',
    submit_label='Add Student',
)

CLASSES = EntityType(
    key='classes',
    path='/classes',
    fields=('tenant_id', 'name', 'code', 'subject', 'grade_level'),
    title='Create Class',
    label='Classes',
    singular='Class',
    submit_label='Add Class',
)

ANNOUNCEMENTS = EntityType(
    key='announcements',
    path='/announcements',
    fields=('tenant_id', 'title', 'message'),
    title='Announcements',
    label='Announcements',
    singular='Announcement',
    submit_label='Publish',
)

INVOICES = EntityType(
    key='invoices',
    path='/invoices',
    fields=('tenant_id', 'student_id', 'title', 'amount'),
    title='Create Invoice',
    label='Invoices',
    singular='Invoice',
    submit_label='Create Invoice',
)

ENTITY_TYPES = (TENANTS, STUDENTS, CLASSES, ANNOUNCEMENTS, INVOICES)
ENTITIES_BY_KEY = {entity.key: entity for entity in ENTITY_TYPES}


def get_entity(key):
    """Look up an entity type by collection key, or None if unknown."""
    return ENTITIES_BY_KEY.get(key)


def empty_form(entity):
    return {field: '' for field in entity.fields}


def record_id(record):
    """Return a backend record's identifier.

    Records normally carry ``id``; some backends (Mongo-style) only send ``_id``.
    """
    if not isinstance(record, dict):
        return None
    value = record.get('id')
    if value in (None, ''):
        value = record.get('_id')
    return value


def tenant_status(tenant):
    return (tenant or {}).get('status') or 'active'


def student_display_name(student):
    first = (student or {}).get('first_name') or ''
    last = (student or {}).get('last_name') or ''
    return f"{first} {last}".strip()
