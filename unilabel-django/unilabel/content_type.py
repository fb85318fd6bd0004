"""
The capability every label content type provides to the host module,
and the registry that maps type names to their implementations.

Content types are declared in settings.UNILABEL_CONTENT_TYPES, keyed by
namespace ('unilabeltype_<name>'):

    UNILABEL_CONTENT_TYPES = {
        'unilabeltype_accordion': {
            'class': 'accordion.content_type.AccordionContentType',
            'active': True,
            'showintro': False,
        },
    }

Everything except 'class' is the plugin-level configuration returned
by get_config().
"""
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS
from django.utils.module_loading import import_string

NAMESPACE_PREFIX = 'unilabeltype_'


def get_config(namespace):
    """
    Return the plugin-level configuration of a content type.

    An unknown namespace yields an empty mapping, so every flag reads
    as unset.
    """
    config = dict(settings.UNILABEL_CONTENT_TYPES.get(namespace, {}))
    config.pop('class', None)
    return config


def _load_class(namespace):
    path = settings.UNILABEL_CONTENT_TYPES[namespace].get('class')
    if not path:
        raise ImproperlyConfigured(
            'Content type {0} does not declare a class'.format(namespace))
    try:
        return import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            'Content type {0} has an invalid class: {1}'.format(namespace, path)) from e


def get_content_type(type_name, **kwargs):
    """
    Instantiate the content type registered for a label type name
    (e.g. 'accordion'), or return None if there is none.
    """
    namespace = NAMESPACE_PREFIX + type_name
    if namespace not in settings.UNILABEL_CONTENT_TYPES:
        return None
    return _load_class(namespace)(**kwargs)


def get_content_types(active_only=False, **kwargs):
    """
    Instantiate every registered content type.
    """
    content_types = []
    for namespace in settings.UNILABEL_CONTENT_TYPES:
        content_type = _load_class(namespace)(**kwargs)
        if active_only and not content_type.is_active():
            continue
        content_types.append(content_type)
    return content_types


class ContentType:
    """
    Base class for label content types.

    The plugin configuration and the database alias are passed in
    explicitly; by default the configuration comes from get_config()
    and queries go to the default database.
    """
    namespace = None
    name = None
    help_text = ''

    def __init__(self, config=None, using=None):
        self.config = get_config(self.namespace) if config is None else config
        self.using = using or DEFAULT_DB_ALIAS

    def get_namespace(self):
        return self.namespace

    def get_name(self):
        return self.name

    def format_intro(self, unilabel):
        """
        The label's own descriptive text. It is sanitised when saved, so
        it can be rendered as-is.
        """
        return unilabel.intro

    def get_content(self, unilabel, cmid, renderer):
        """
        Return the markup shown on the course page.
        """
        raise NotImplementedError

    def delete_content(self, unilabel_id):
        raise NotImplementedError

    def add_form_fragment(self, form, context):
        """
        Add this type's fields to a unilabel.forms.EditContentForm.
        """
        raise NotImplementedError

    def get_form_default(self, data, unilabel):
        """
        Fill 'data' with the initial values of the fields added by
        add_form_fragment() and return it.
        """
        raise NotImplementedError

    def save_content(self, formdata, unilabel):
        raise NotImplementedError

    def is_active(self):
        raise NotImplementedError
