from django.urls import path

from .views import SignupViewSet

urlpatterns = [
    path('eligibility/', SignupViewSet.as_view({'get': 'eligibility'}), name='signup_eligibility'),
    path('waitlist/', SignupViewSet.as_view({'post': 'waitlist'}), name='signup_waitlist'),
]
