"""
URL configuration for config project.

Shoplist operations are exposed as service functions in
apps.shoplists.services; only the admin site is routed here.
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path('admin/', admin.site.urls),
]
