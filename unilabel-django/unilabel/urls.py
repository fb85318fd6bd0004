from django.urls import path

from unilabel import views

urlpatterns = [
    path('<int:unilabel_id>/', views.unilabel_view, name='unilabel_view'),
    path('<int:unilabel_id>/edit/', views.edit_content, name='edit_content'),
]
