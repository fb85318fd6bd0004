import logging

from django.contrib import messages
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect, render

from unilabel.forms import EditContentForm
from unilabel.models import Unilabel
from unilabel.renderer import Renderer

LOGGER = logging.getLogger(__name__)


def get_active_content_type(unilabel):
    """
    The content type of a label, if it is registered and switched on.
    """
    content_type = unilabel.get_content_type()
    if content_type is None or not content_type.is_active():
        raise Http404()
    return content_type


def unilabel_view(request, unilabel_id):
    """
    Display a label with the content produced by its content type.
    """
    unilabel = get_object_or_404(Unilabel, pk=unilabel_id)
    content_type = get_active_content_type(unilabel)

    content = content_type.get_content(unilabel, unilabel.id, Renderer(request))

    return render(request, 'unilabel/view.html',
                  {'unilabel': unilabel, 'content': content})


def edit_content(request, unilabel_id):
    """
    Edit the content of a label.

    The fields are supplied by the label's content type. Pressing an
    add-more button redisplays the form with more slots without saving.
    """
    unilabel = get_object_or_404(Unilabel, pk=unilabel_id)
    content_type = get_active_content_type(unilabel)

    initial = content_type.get_form_default({}, unilabel)

    if request.method == 'POST':
        form = EditContentForm(unilabel, data=request.POST, initial=initial)
        content_type.add_form_fragment(form, request)
        if form.no_submit_button_pressed():
            pass
        elif form.is_valid():
            content_type.save_content(form.get_data(), unilabel)
            messages.success(request, 'The content has been saved.')
            return redirect('unilabel_view', unilabel_id=unilabel.id)
        else:
            messages.error(request, 'Invalid submission. See form below.')
    else:
        form = EditContentForm(unilabel, initial=initial)
        content_type.add_form_fragment(form, request)

    return render(request, 'unilabel/edit_content.html',
                  {'unilabel': unilabel, 'form': form,
                   'content_type': content_type})
