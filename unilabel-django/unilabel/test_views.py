import functools
import logging

from django.test import TestCase, override_settings
from django.urls import reverse

from accordion.models import Accordion, AccordionSegment
from accordion.test_forms import segment_post_data
from unilabel.models import Unilabel


def prevent_request_warnings(original_function):
    """
    Decorator to keep the request logger quiet for expected 404s.
    """
    @functools.wraps(original_function)
    def new_function(*args, **kwargs):
        logger = logging.getLogger('django.request')
        previous_logging_level = logger.getEffectiveLevel()
        logger.setLevel(logging.ERROR)
        try:
            original_function(*args, **kwargs)
        finally:
            logger.setLevel(previous_logging_level)

    return new_function


INACTIVE_ACCORDION = {
    'unilabeltype_accordion': {
        'class': 'accordion.content_type.AccordionContentType',
        'active': False,
        'showintro': False,
    },
}


class TestUnilabelViews(TestCase):
    """
    Test viewing and editing label content through the host views.
    """

    def setUp(self):
        self.unilabel = Unilabel.objects.create(
            name='Week 1', intro='<p>Welcome</p>', unilabeltype='accordion')
        self.view_url = reverse('unilabel_view', args=[self.unilabel.id])
        self.edit_url = reverse('edit_content', args=[self.unilabel.id])

    def test_view_without_content(self):
        response = self.client.get(self.view_url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'No content')

    @prevent_request_warnings
    def test_view_unknown_label(self):
        response = self.client.get(reverse('unilabel_view', args=[self.unilabel.id + 1]))
        self.assertEqual(response.status_code, 404)

    @prevent_request_warnings
    def test_unregistered_content_type(self):
        unilabel = Unilabel.objects.create(name='Plain', unilabeltype='simpletext')
        response = self.client.get(reverse('unilabel_view', args=[unilabel.id]))
        self.assertEqual(response.status_code, 404)
        response = self.client.get(reverse('edit_content', args=[unilabel.id]))
        self.assertEqual(response.status_code, 404)

    @prevent_request_warnings
    @override_settings(UNILABEL_CONTENT_TYPES=INACTIVE_ACCORDION)
    def test_inactive_content_type(self):
        response = self.client.get(self.view_url)
        self.assertEqual(response.status_code, 404)
        response = self.client.get(self.edit_url)
        self.assertEqual(response.status_code, 404)

    def test_edit_form(self):
        response = self.client.get(self.edit_url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'accordion_segments-TOTAL_FORMS')
        self.assertContains(response, 'name="accordion_segments_add_more"')
        self.assertEqual(
            response.context['form'].formsets['accordion_segments'].total_form_count(), 3)

    def test_save_content(self):
        data = segment_post_data([
            ('<p>Heading one</p>', '<p>Body one</p>'),
            ('<p>Heading two</p>', ''),
            ('', ''),
        ])
        data['save'] = ''
        response = self.client.post(self.edit_url, data=data)
        self.assertRedirects(response, self.view_url)

        accordion = Accordion.objects.get(unilabel=self.unilabel)
        self.assertTrue(accordion.showintro)
        self.assertEqual(AccordionSegment.objects.filter(accordion=accordion).count(), 3)

        response = self.client.get(self.view_url)
        self.assertContains(response, '<p>Heading one</p>')
        self.assertContains(response, '<p>Welcome</p>')
        self.assertNotContains(response, '<p>Heading two</p>')

        response = self.client.get(self.edit_url)
        formset = response.context['form'].formsets['accordion_segments']
        self.assertEqual(formset.total_form_count(), 3)
        self.assertEqual(formset.forms[0].initial['heading'], '<p>Heading one</p>')

    def test_add_more_does_not_save(self):
        data = segment_post_data([('<p>H</p>', '<p>C</p>'), ('', ''), ('', '')])
        data['accordion_segments_add_more'] = '1'
        response = self.client.post(self.edit_url, data=data)

        self.assertEqual(response.status_code, 200)
        self.assertFalse(Accordion.objects.exists())
        self.assertEqual(
            response.context['form'].formsets['accordion_segments'].total_form_count(), 6)

    def test_invalid_submission(self):
        response = self.client.post(self.edit_url, data={'accordion_showintro': 'on'})
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Accordion.objects.exists())
        self.assertContains(response, 'Invalid submission')

    def test_request_warning_decorator_keeps_test_name(self):
        self.assertEqual(self.test_view_unknown_label.__name__, 'test_view_unknown_label')
        self.assertEqual(self.test_view_unknown_label.__wrapped__.__name__,
                         'test_view_unknown_label')
