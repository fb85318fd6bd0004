from django.template.loader import render_to_string


class Renderer:
    """
    Renders content type templates in the context of one request.
    """

    def __init__(self, request=None):
        self.request = request

    def render_from_template(self, template_name, context):
        return render_to_string(template_name, context, request=self.request)
