from django.urls import path
from . import views

app_name = 'leads'

urlpatterns = [
    path('lead-form/', views.lead_form_view, name='lead_form'),
    path('lead-form/thank-you/', views.lead_form_success_view, name='lead_form_success'),
    path('leads/individual/', views.individual_lead_view, name='individual_lead'),
    path('s/<str:short_code>/', views.short_link_redirect_view, name='short_link'),
]
