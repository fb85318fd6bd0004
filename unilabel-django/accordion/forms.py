from ckeditor.fields import RichTextFormField
from django import forms
from django.utils.translation import gettext_lazy

from unilabel.enums import TextFormat

# Number of segment slots offered on a new form, and added by each
# press of the add-more button.
DEFAULT_REPEAT_COUNT = 3


def initial_repeat_count(segment_count, default=DEFAULT_REPEAT_COUNT):
    """
    Number of segment slots shown when the settings form is first built.

    The count only depends on the number of stored segments modulo the
    default, so it can be lower than the number of stored segments
    (those beyond it are reached with the add-more button):

    >>> [initial_repeat_count(n) for n in (0, 1, 2, 3)]
    [3, 3, 6, 3]
    >>> [initial_repeat_count(n) for n in (4, 5, 7)]
    [3, 6, 3]
    """
    return max((segment_count % default) * default, default)


class SegmentForm(forms.Form):
    """
    One heading/content pair of the accordion settings form.
    """
    heading = RichTextFormField(config_name='heading', required=False,
        label=gettext_lazy('Heading'),
        help_text=gettext_lazy('The title of the segment, always visible.'))
    heading_format = forms.TypedChoiceField(choices=TextFormat.choices(),
        coerce=int, initial=TextFormat.HTML, required=False,
        widget=forms.HiddenInput)
    content = RichTextFormField(required=False,
        label=gettext_lazy('Content'),
        help_text=gettext_lazy('Shown when the segment is expanded.'))
    content_format = forms.TypedChoiceField(choices=TextFormat.choices(),
        coerce=int, initial=TextFormat.HTML, required=False,
        widget=forms.HiddenInput)
