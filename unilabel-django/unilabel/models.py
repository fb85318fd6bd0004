import logging

from django.db import models, transaction

from unilabel.fields import SafeHTMLField

LOGGER = logging.getLogger(__name__)


class Unilabel(models.Model):
    """
    A label placed on a course page. The label's body is produced by
    the content type named in 'unilabeltype'.
    """
    name = models.CharField(max_length=255)
    intro = SafeHTMLField(blank=True)
    unilabeltype = models.CharField(max_length=50, default='accordion')
    timemodified = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'unilabel'

    def __str__(self):
        return self.name

    def get_content_type(self, **kwargs):
        """
        Instantiate the content type selected for this label, or None
        if it is not registered.
        """
        from unilabel.content_type import get_content_type
        return get_content_type(self.unilabeltype, **kwargs)

    def delete(self, *args, **kwargs):
        """
        Delete the label together with the content stored by every
        content type, not only the currently selected one.
        """
        from unilabel.content_type import get_content_types

        unilabel_id = self.id
        with transaction.atomic():
            for content_type in get_content_types():
                content_type.delete_content(unilabel_id)
            result = super().delete(*args, **kwargs)
        LOGGER.info('Deleted unilabel {0}'.format(unilabel_id))
        return result
