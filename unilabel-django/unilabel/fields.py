import bleach
import ckeditor.fields
from bleach.css_sanitizer import CSSSanitizer
from django.conf import settings


class SafeHTMLField(ckeditor.fields.RichTextField):
    """
    A rich text field that only stores "safe" HTML.

    In forms the field is edited with CKEditor (see
    ckeditor.fields.RichTextField), restricted by the 'allowedContent'
    rules of the selected entry in settings.CKEDITOR_CONFIGS.

    When the model is cleaned, the value is passed through bleach using
    the same rules, so that tags are balanced, entities are well-formed,
    and anything not whitelisted is escaped.  For example, with:

        'allowedContent': {
            'a': {'attributes': ['href']},
            'strong': True,
        }

    only 'a' and 'strong' tags survive, and 'a' tags may only carry an
    'href' attribute.

    The client-side 'disallowedContent' rules are not enforced here.
    """

    # Protocols permitted in 'href' attributes.
    _protocols = {'http', 'https', 'ftp', 'mailto'}

    # Attributes refused on the server even if the editor allows them.
    # The editor needs table widths for resizing; stored content does not.
    _attribute_blacklist = {('table', 'width')}

    # Inline CSS properties kept on elements that may carry 'style'.
    _styles = ['text-align']

    def __init__(self, config_name='default', strip=False,
                 strip_comments=True, **kwargs):
        super().__init__(config_name=config_name, **kwargs)

        conf = settings.CKEDITOR_CONFIGS[config_name]
        tags = set()
        attrs = {}
        for (tag, props) in conf['allowedContent'].items():
            if tag != '*':
                tags.add(tag)
            if isinstance(props, dict) and 'attributes' in props:
                attrs[tag] = [attr for attr in props['attributes']
                              if (tag, attr) not in self._attribute_blacklist]

        css_sanitizer = CSSSanitizer(allowed_css_properties=self._styles)
        self._cleaner = bleach.Cleaner(tags=tags, attributes=attrs,
                                       protocols=self._protocols,
                                       strip=strip,
                                       strip_comments=strip_comments,
                                       css_sanitizer=css_sanitizer)

    def clean(self, value, model_instance):
        value = self._cleaner.clean(value)
        return super().clean(value, model_instance)
