"""
URL Configuration para Demo CRUD.

Estrutura:
- /admin/ - Django Admin (cadastro de Produtos)
- /health/ - Health check

A camada de apresentação HTTP dos services fica fora deste projeto.
"""

from django.contrib import admin
from django.urls import path

from .views import health


urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/', health, name='health'),
]
