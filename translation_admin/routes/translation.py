"""Translation admin routes: overview, grid, inline edits, cache and new units."""

from flask import Blueprint, flash, jsonify, redirect, render_template, request, url_for

from translation_admin.exceptions import InvalidArgument
from translation_admin.services import get_services
from translation_admin.services.grid import PageRequest
from translation_admin.services.translator import ADMIN_DOMAIN
from translation_admin.utils import check_csrf, generate_csrf_token

translation_bp = Blueprint('translation', __name__)


def _is_xhr():
    return request.headers.get('X-Requested-With') == 'XMLHttpRequest'


def _page_from_form():
    page = request.form.get('page')
    if page in (None, ''):
        return 1
    try:
        return int(page)
    except ValueError:
        raise InvalidArgument(f'Invalid page: {page!r}')


@translation_bp.route('/', methods=['GET'])
def overview():
    """Display the translation status per domain and locale."""
    services = get_services()
    
    return render_template(
        'translation/overview.html',
        layout=services.grid_config.layout,
        locales=services.get_managed_locales(),
        domains=services.storage.get_trans_unit_domains(),
        latest_trans=services.storage.get_latest_updated_at(),
        stats=services.stats_aggregator.get_stats()
    )


@translation_bp.route('/grid', methods=['GET'])
def grid():
    """Display the first page of the translation grid."""
    services = get_services()
    locales = services.get_managed_locales()
    
    rows = services.grid.list_page(locales, page=1)
    
    tokens = None
    if services.grid_config.dev_tools_enabled and services.token_finder is not None:
        tokens = services.token_finder.find()
    
    return render_template(
        'translation/grid.html',
        layout=services.grid_config.layout,
        grid_config=services.grid_config,
        locales=locales,
        tokens=tokens,
        rows=rows,
        page=1,
        translations_count=services.grid.count(),
        csrf_token=generate_csrf_token()
    )


@translation_bp.route('/grid/load', methods=['POST'])
def load_grid():
    """Render one sorted page of the grid as a fragment."""
    services = get_services()
    locales = services.get_managed_locales()
    page_request = PageRequest(
        page=_page_from_form(),
        sort_column=request.form.get('columnToOrderBy'),
        sort_direction=request.form.get('sort')
    )
    
    rows = services.grid.list_page(
        locales,
        page=page_request.page,
        page_size=page_request.page_size,
        sort=page_request.sort
    )
    
    return render_template(
        'translation/_grid.html',
        grid_config=services.grid_config,
        locales=locales,
        rows=rows,
        page=page_request.page
    )


@translation_bp.route('/grid/save', methods=['POST'])
def save_grid_cell():
    """Save an inline edit, or delete the unit when column is "delete"."""
    services = get_services()
    
    services.grid.update_cell(
        request.form.get('id'),
        request.form.get('locale'),
        request.form.get('column'),
        request.form.get('newvalue')
    )
    
    return jsonify({'type': 'success'}), 200


@translation_bp.route('/grid/filter', methods=['POST'])
def filter_grid():
    """Render the rows matching a column filter, or the "no results" fragment."""
    services = get_services()
    locales = services.get_managed_locales()
    
    rows = services.grid.filter(
        locales,
        request.form.get('column'),
        request.form.get('filterValue', ''),
        request.form.get('columnType')
    )
    
    if not rows:
        return render_template(
            'translation/no_translations.html',
            message=services.translator.trans('translations.no_results', ADMIN_DOMAIN)
        )
    
    return render_template(
        'translation/_grid.html',
        grid_config=services.grid_config,
        locales=locales,
        rows=rows,
        page=None
    )


@translation_bp.route('/invalidate-cache', methods=['GET', 'POST'])
def invalidate_cache():
    """Remove cache files for managed locales."""
    services = get_services()
    
    if _is_xhr():
        check_csrf()
    
    services.grid.invalidate_cache(services.get_managed_locales())
    message = services.translator.trans('translations.cache_removed', ADMIN_DOMAIN)
    
    if _is_xhr():
        return jsonify({'message': message}), 200
    
    flash(message, 'success')
    return redirect(url_for('translation.grid'))


@translation_bp.route('/new', methods=['GET', 'POST'])
def new_trans_unit():
    """Add a new trans unit with translations for managed locales."""
    services = get_services()
    handler = services.form_handler
    form = handler.create_form_data()
    
    if handler.process(form, request):
        flash(services.translator.trans('translations.successfully_added', ADMIN_DOMAIN), 'success')
        endpoint = 'translation.new_trans_unit' if form.save_add else 'translation.grid'
        return redirect(url_for(endpoint))
    
    status = 400 if form.submitted else 200
    return render_template(
        'translation/new.html',
        layout=services.grid_config.layout,
        locales=services.get_managed_locales(),
        form=form
    ), status
