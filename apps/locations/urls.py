from django.urls import path
from . import views

app_name = 'locations'

urlpatterns = [
    path('api/states/', views.StateListView.as_view(), name='state_list'),
    path('api/districts/', views.DistrictListView.as_view(), name='district_list'),
    path('api/districts/all/', views.AllDistrictListView.as_view(), name='all_district_list'),
    path('api/mandals/', views.MandalListView.as_view(), name='mandal_list'),
    path('api/mandals/by-district/', views.MandalByDistrictView.as_view(), name='mandal_by_district'),
    path('api/selection/', views.SelectionTransitionView.as_view(), name='selection_transition'),
]
