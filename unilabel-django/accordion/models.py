from django.db import models

from unilabel.fields import SafeHTMLField


class Accordion(models.Model):
    """
    The accordion content of a label. Created on the first save.
    """
    unilabel = models.OneToOneField('unilabel.Unilabel',
        db_column='unilabelid', related_name='accordion',
        on_delete=models.CASCADE)
    showintro = models.BooleanField(default=False)

    class Meta:
        db_table = 'unilabeltype_accordion'

    def __str__(self):
        return 'Accordion of {0}'.format(self.unilabel_id)


class AccordionSegment(models.Model):
    """
    One collapsible panel of an accordion.

    Segments are replaced as a whole on every save, so their order is
    the order of insertion.
    """
    accordion = models.ForeignKey('accordion.Accordion',
        db_column='accordionid', related_name='segments',
        on_delete=models.CASCADE)
    heading = SafeHTMLField(config_name='heading', blank=True)
    content = SafeHTMLField(blank=True)

    class Meta:
        db_table = 'unilabeltype_accordion_seg'
        ordering = ('id',)

    def __str__(self):
        return 'Segment {0} of accordion {1}'.format(self.id, self.accordion_id)

    def is_visible(self):
        """
        Segments missing a heading or a content are kept but not shown.
        """
        return self.heading != '' and self.content != ''
