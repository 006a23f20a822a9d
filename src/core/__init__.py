"""
Core Domain Layer - O Hexágono.

Este pacote contém a camada CRUD genérica e as entidades,
sem dependências de frameworks.
Características:
- Zero dependências externas (Django, SQLAlchemy, etc.)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura
"""
