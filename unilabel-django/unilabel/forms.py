from collections import OrderedDict

from django import forms
from django.forms.formsets import TOTAL_FORM_COUNT, BaseFormSet, formset_factory


class RepeatFormSet(BaseFormSet):
    """
    A group of fields repeated a variable number of times.

    The hidden TOTAL_FORMS field of the management form holds the
    number of slots; pressing the add-more button grows it by
    add_fields_no.
    """
    add_fields_no = 3
    add_label = 'Add more'
    item_label = 'Item'

    @property
    def add_more_name(self):
        return '{0}_add_more'.format(self.prefix)

    def get_data(self):
        """
        Return the submitted values, one dict per slot, in slot order.
        Slots that were left untouched are included with empty values.
        """
        data = []
        for form in self.forms:
            cleaned_data = getattr(form, 'cleaned_data', {})
            data.append({name: cleaned_data.get(name, '') for name in form.fields})
        return data


class EditContentForm(forms.Form):
    """
    Settings form for the content of a label.

    The label's content type adds its fields through
    add_form_fragment(): single fields go straight into self.fields,
    section headers through add_header(), and repeatable groups through
    repeat_elements().
    """

    def __init__(self, unilabel, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.unilabel = unilabel
        self.headers = []
        self.formsets = OrderedDict()

    def add_header(self, name, label, help_text=''):
        self.headers.append({'name': name, 'label': label,
                             'help_text': help_text})

    def repeat_elements(self, name, form_class, repeat_count,
                        add_fields_no=3, add_label='Add more',
                        item_label='Item', formset=RepeatFormSet):
        """
        Attach a repeatable group of fields, as a formset prefixed with
        'name', and return it.

        An unbound form gets exactly repeat_count slots, the first ones
        seeded in order from self.initial[name]; initial values beyond
        repeat_count wait for the add-more button.

        A bound form takes the number of slots from the hidden
        '<name>-TOTAL_FORMS' field, plus add_fields_no if the
        '<name>_add_more' button was pressed. The slots opened that way
        are filled from self.initial[name] where it has an item for them.
        """
        initial = list(self.initial.get(name, []))
        FormSet = formset_factory(form_class, formset=formset,
                                  extra=max(repeat_count - len(initial), 0))
        FormSet.add_fields_no = add_fields_no
        FormSet.add_label = add_label
        FormSet.item_label = item_label

        if self.is_bound:
            data = self.data
            if '{0}_add_more'.format(name) in data:
                count_name = '{0}-{1}'.format(name, TOTAL_FORM_COUNT)
                data = data.copy()
                try:
                    count = int(data.get(count_name, repeat_count))
                except ValueError:
                    count = repeat_count
                data[count_name] = str(count + add_fields_no)
                for i in range(count, min(count + add_fields_no, len(initial))):
                    self._fill_slot(data, '{0}-{1}'.format(name, i), initial[i])
            self.formsets[name] = FormSet(data=data, prefix=name,
                                          initial=initial)
        else:
            self.formsets[name] = FormSet(prefix=name,
                                          initial=initial[:repeat_count])
        return self.formsets[name]

    @staticmethod
    def _fill_slot(data, prefix, values):
        # A slot that already carries submitted values is left alone.
        keys = ['{0}-{1}'.format(prefix, field) for field in values]
        if any(key in data for key in keys):
            return
        for (key, value) in zip(keys, values.values()):
            if isinstance(value, int):
                value = str(int(value))
            data[key] = value

    def no_submit_button_pressed(self):
        """
        Whether the form was submitted by an add-more button, in which
        case it has to be displayed again rather than saved.
        """
        if not self.is_bound:
            return False
        return any(formset.add_more_name in self.data
                   for formset in self.formsets.values())

    def is_valid(self):
        valid = super().is_valid()
        formsets_valid = [formset.is_valid()
                          for formset in self.formsets.values()]
        return valid and all(formsets_valid)

    def get_data(self):
        """
        The cleaned data of the form, with each repeatable group as an
        ordered list of slot dicts.
        """
        data = dict(self.cleaned_data)
        for (name, formset) in self.formsets.items():
            data[name] = formset.get_data()
        return data
