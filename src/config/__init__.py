"""
Configuração do projeto Demo CRUD.

Módulos:
- settings: Configurações Django
- urls: Rotas principais (admin, health)
- wsgi: WSGI application
- container: Dependency Injection Container
"""
