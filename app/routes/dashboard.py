from flask import Blueprint, render_template, request, redirect, url_for, flash, jsonify, current_app, abort
from app.models.entity import ENTITY_TYPES, ENTITIES_BY_KEY, get_entity, record_id, tenant_status, student_display_name
from app.services.backend_client import BackendError

bp = Blueprint('dashboard', __name__)


def get_controller():
    return current_app.extensions['dashboard']


@bp.app_context_processor
def inject_helpers():
    return {
        'record_id': record_id,
        'tenant_status': tenant_status,
        'student_display_name': student_display_name,
        'backend_base': current_app.config['BACKEND_URL'],
    }


@bp.route('/')
def index():
    controller = get_controller()
    controller.load_all()
    state = controller.snapshot()
    return render_template('dashboard.html', state=state, entities=ENTITY_TYPES, entity_map=ENTITIES_BY_KEY)


@bp.route('/<collection>/create', methods=['POST'])
def create(collection):
    entity = get_entity(collection)
    if entity is None:
        abort(404)

    controller = get_controller()

    try:
        created = controller.submit(entity.key, request.form)
        if created is not None:
            flash(f"{entity.singular} created successfully!", "success")
    except BackendError as e:
        current_app.logger.error(f"Error creating record in {entity.path}: {e}")
        flash(f'Error creating record in {entity.label}: {e}', 'danger')

    return redirect(url_for('dashboard.index'))


@bp.route('/refresh', methods=['POST'])
def refresh():
    if not get_controller().load_all():
        flash('Could not refresh lists from the backend.', 'danger')
    return redirect(url_for('dashboard.index'))


@bp.route('/test')
def backend_test():
    """Backend connectivity page: probes every endpoint the dashboard uses."""
    results = get_controller().diagnose()
    return render_template('backend_test.html', results=results)


@bp.route('/api/state')
def api_state():
    return jsonify(get_controller().snapshot().to_dict())
