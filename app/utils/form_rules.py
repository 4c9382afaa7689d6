import math
import re
from typing import Dict, List, Optional, Tuple

# Every field of every creation form is required.
REQUIRED_FIELDS = {
    'tenants': ('name', 'code'),
    'students': ('tenant_id', 'student_number', 'first_name', 'last_name', 'grade_level'),
    'classes': ('tenant_id', 'name', 'code', 'subject', 'grade_level'),
    'announcements': ('tenant_id', 'title', 'message'),
    'invoices': ('tenant_id', 'student_id', 'title', 'amount'),
}

# Leading numeric prefix, the way browsers' parseFloat reads number inputs
_FLOAT_PREFIX = re.compile(r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_float(text) -> float:
    """Parse the leading number of ``text``; NaN when there is none."""
    if text is None:
        return math.nan
    match = _FLOAT_PREFIX.match(str(text).lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace('Infinity', 'inf'))


def parse_amount(text) -> Optional[float]:
    """Parse an invoice amount; None when it is empty, zero or not a finite number."""
    amount = parse_float(text or '0')
    if not math.isfinite(amount) or amount == 0:
        return None
    return amount


def validate_form(entity_key: str, form: Dict[str, str]) -> Tuple[bool, List[str]]:
    """Validate a creation form and return (is_valid, issues)."""
    issues = []

    for field in REQUIRED_FIELDS[entity_key]:
        if not form.get(field):
            issues.append(f"{field} is required")

    if entity_key == 'invoices' and form.get('amount') and parse_amount(form.get('amount')) is None:
        issues.append("amount must be a non-zero number")

    return len(issues) == 0, issues


def build_payload(entity_key: str, form: Dict[str, str]) -> Optional[dict]:
    """Return the JSON payload for a form, or None if the form is not submittable."""
    is_valid, _ = validate_form(entity_key, form)
    if not is_valid:
        return None

    payload = {field: form[field] for field in REQUIRED_FIELDS[entity_key]}
    if entity_key == 'invoices':
        payload['amount'] = parse_amount(form['amount'])
    return payload
