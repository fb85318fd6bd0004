import logging

from django import forms
from django.db import transaction
from django.utils.translation import gettext_lazy

from accordion.forms import DEFAULT_REPEAT_COUNT, SegmentForm, initial_repeat_count
from accordion.models import Accordion, AccordionSegment
from unilabel.content_type import ContentType
from unilabel.enums import TextFormat

LOGGER = logging.getLogger(__name__)

# Prefix of the fields this content type adds to the settings form.
PREFIX = 'accordion_'


class AccordionContentType(ContentType):
    """
    Label content made of collapsible heading/content segments.

    The accordion row and its segments are read once per instance by
    load_unilabeltype_record(); the other operations work from that
    loaded state.
    """
    namespace = 'unilabeltype_accordion'
    name = gettext_lazy('Accordion')
    help_text = gettext_lazy(
        'Each segment is shown as its heading; the content unfolds when '
        'the heading is clicked. Segments without a heading or a content '
        'are not displayed.')
    template_name = 'accordion/accordion.html'

    def __init__(self, config=None, using=None):
        super().__init__(config=config, using=using)
        self.record = None
        self.segments = []
        self._unilabel_id = None

    def _reset(self):
        self.record = None
        self.segments = []
        self._unilabel_id = None

    def load_unilabeltype_record(self, unilabel_id):
        """
        Load the accordion of a label and its segments, unless they were
        already loaded by this instance. Returns the accordion, or None
        if the label has no content yet.
        """
        if self._unilabel_id != unilabel_id:
            self.record = Accordion.objects.using(self.using).filter(
                unilabel_id=unilabel_id).first()
            if self.record is None:
                self.segments = []
            else:
                self.segments = list(AccordionSegment.objects.using(
                    self.using).filter(accordion=self.record).order_by('id'))
            self._unilabel_id = unilabel_id
        return self.record

    def get_content(self, unilabel, cmid, renderer):
        if not self.load_unilabeltype_record(unilabel.id):
            content = {
                'intro': gettext_lazy('No content'),
                'cmid': cmid,
                'segments': [],
            }
        else:
            showintro = bool(self.record.showintro)
            content = {
                'showintro': showintro,
                'intro': self.format_intro(unilabel) if showintro else '',
                'segments': [s for s in self.segments if s.is_visible()],
                'cmid': cmid,
                'plugin': self.namespace,
            }
        return renderer.render_from_template(self.template_name, content)

    def delete_content(self, unilabel_id):
        self.load_unilabeltype_record(unilabel_id)

        with transaction.atomic(using=self.using):
            if self.record is not None:
                AccordionSegment.objects.using(self.using).filter(
                    accordion=self.record).delete()
            Accordion.objects.using(self.using).filter(
                unilabel_id=unilabel_id).delete()

        if self.record is not None:
            LOGGER.info('Deleted accordion content of unilabel {0}'.format(unilabel_id))
        self._reset()

    def add_form_fragment(self, form, context):
        """
        Add the show-intro checkbox, the section header and the
        repeatable segment group to a unilabel.forms.EditContentForm.

        'context' is the request the form is built for.
        """
        self.load_unilabeltype_record(form.unilabel.id)

        form.fields[PREFIX + 'showintro'] = forms.BooleanField(
            required=False, label=gettext_lazy('Show label text'))

        form.add_header(PREFIX + 'hdr', self.get_name(), self.help_text)

        form.repeat_elements(
            PREFIX + 'segments',
            SegmentForm,
            initial_repeat_count(len(self.segments)),
            add_fields_no=DEFAULT_REPEAT_COUNT,
            add_label=gettext_lazy('Add {0} more segments').format(DEFAULT_REPEAT_COUNT),
            item_label=gettext_lazy('Segment'),
        )

    def get_form_default(self, data, unilabel):
        if not self.load_unilabeltype_record(unilabel.id):
            data[PREFIX + 'showintro'] = bool(self.config.get('showintro'))
            return data

        data[PREFIX + 'showintro'] = self.record.showintro
        data[PREFIX + 'segments'] = [
            {
                'heading': segment.heading,
                'heading_format': TextFormat.HTML,
                'content': segment.content,
                'content_format': TextFormat.HTML,
            }
            for segment in self.segments
        ]
        return data

    def save_content(self, formdata, unilabel):
        """
        Store the submitted accordion, replacing all of its segments.

        'formdata' holds PREFIX + 'showintro' and PREFIX + 'segments', the
        latter being the submitted slots in order. Blank slots are stored
        too. Either everything is written or, if anything fails, nothing
        is.
        """
        segments = formdata.get(PREFIX + 'segments') or []

        with transaction.atomic(using=self.using):
            record = Accordion.objects.using(self.using).get_or_create(
                unilabel_id=unilabel.id)[0]
            record.showintro = bool(formdata.get(PREFIX + 'showintro'))
            record.save(using=self.using, update_fields=['showintro'])

            AccordionSegment.objects.using(self.using).filter(
                accordion=record).delete()

            for segment_data in segments:
                segment = AccordionSegment(
                    accordion=record,
                    heading=segment_data.get('heading') or '',
                    content=segment_data.get('content') or '')
                segment.full_clean()
                segment.save(using=self.using)

        LOGGER.info('Saved accordion of unilabel {0} with {1} segments'.format(
            unilabel.id, len(segments)))
        self._reset()
        return record.pk is not None

    def is_active(self):
        return bool(self.config.get('active'))
