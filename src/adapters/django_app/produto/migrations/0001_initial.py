"""
Migration inicial para o domínio de Produtos.

Cria a tabela:
- produto
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ProdutoModel',
            fields=[
                ('id', models.AutoField(
                    primary_key=True,
                    serialize=False,
                )),
                ('descricao', models.TextField(
                    blank=True,
                    default='',
                    help_text='Descrição do produto'
                )),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'db_table': 'produto',
                'ordering': ['id'],
            },
        ),
    ]
