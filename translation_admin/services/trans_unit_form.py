"""Form data and processing for creating a trans unit."""

import logging
from dataclasses import dataclass, field

from translation_admin.models import TransUnit, Translation
from translation_admin.services.translator import ADMIN_DOMAIN

logger = logging.getLogger(__name__)

DEFAULT_DOMAIN = 'messages'


@dataclass
class TransUnitForm:
    """Values and errors of the "new trans unit" form."""

    domain: str = DEFAULT_DOMAIN
    key: str = ''
    translations: dict = field(default_factory=dict)
    errors: list = field(default_factory=list)
    save_add: bool = False
    submitted: bool = False

    def bind(self, form_data, locales):
        """Fill the form from submitted request data."""
        self.submitted = True
        self.domain = (form_data.get('domain') or '').strip()
        self.key = (form_data.get('key') or '').strip()
        self.translations = {
            locale: form_data.get(f'translations-{locale}', '') for locale in locales
        }
        self.save_add = 'save_add' in form_data


class TransUnitFormHandler:
    """Validate a submitted form and persist the new unit with its translations."""

    def __init__(self, storage, locale_manager, translator):
        self.storage = storage
        self.locale_manager = locale_manager
        self.translator = translator

    def create_form_data(self):
        return TransUnitForm(
            translations={locale: '' for locale in self.locale_manager.get_locales()}
        )

    def process(self, form, request):
        """
        Bind and validate a POSTed form, then create the trans unit.

        Returns True when a unit was created. On GET, or when validation
        fails, returns False and leaves the errors on the form.
        """
        if request.method != 'POST':
            return False

        form.bind(request.form, self.locale_manager.get_locales())
        self._validate(form)
        if form.errors:
            logger.warning(f"Rejected new trans unit {form.domain}/{form.key}: {form.errors}")
            return False

        trans_unit = TransUnit(key=form.key, domain=form.domain)
        for locale, content in form.translations.items():
            # Untranslated locales stay without a translation record
            if content:
                trans_unit.translations.append(Translation(locale=locale, content=content))

        self.storage.save(trans_unit)
        self.storage.flush()
        logger.info(f"Created trans unit {trans_unit.domain}/{trans_unit.key} (id={trans_unit.id})")
        return True

    def _validate(self, form):
        if not form.key:
            form.errors.append(self.translator.trans('translations.key_required', ADMIN_DOMAIN))
        if not form.domain:
            form.errors.append(self.translator.trans('translations.domain_required', ADMIN_DOMAIN))
        if form.key and form.domain and self.storage.find_trans_unit_by_key(form.key, form.domain):
            form.errors.append(self.translator.trans(
                'translations.key_exists',
                ADMIN_DOMAIN,
                parameters={'key': form.key, 'domain': form.domain}
            ))
