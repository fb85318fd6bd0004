from django.test import TestCase

from unilabel.fields import SafeHTMLField


class TestSafeHTMLField(TestCase):
    """
    Test that rich text is sanitised according to CKEDITOR_CONFIGS.
    """

    def setUp(self):
        self.field = SafeHTMLField()
        self.heading_field = SafeHTMLField(config_name='heading')

    def test_allowed_markup_is_kept(self):
        value = '<p>Some <strong>bold</strong> text</p>'
        self.assertEqual(self.field.clean(value, None), value)

    def test_unsafe_markup_is_escaped(self):
        self.assertEqual(
            self.field.clean('<p>Hi</p><script>alert(1)</script>', None),
            '<p>Hi</p>&lt;script&gt;alert(1)&lt;/script&gt;')

    def test_javascript_links_are_removed(self):
        self.assertEqual(
            self.field.clean('<a href="javascript:alert(1)">x</a>', None),
            '<a>x</a>')

    def test_comments_are_stripped(self):
        self.assertEqual(self.field.clean('<p>a<!-- note --></p>', None),
                         '<p>a</p>')

    def test_styles_are_filtered(self):
        value = self.field.clean(
            '<p style="text-align: center; color: red;">x</p>', None)
        self.assertIn('text-align', value)
        self.assertNotIn('color', value)

    def test_blacklisted_attribute(self):
        value = self.field.clean('<table width="100"><tr><td>x</td></tr></table>', None)
        self.assertNotIn('width', value)

    def test_config_selects_allowed_tags(self):
        self.assertEqual(self.heading_field.clean('<h3>x</h3>', None),
                         '&lt;h3&gt;x&lt;/h3&gt;')
        self.assertEqual(self.field.clean('<h3>x</h3>', None), '<h3>x</h3>')
