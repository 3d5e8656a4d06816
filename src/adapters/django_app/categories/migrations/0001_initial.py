"""
Migration inicial para o domínio de Categorias.

Cria a tabela:
- categories: Tabela principal de categorias
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='CategoryModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da categoria'
                )),
                ('name', models.CharField(
                    max_length=255,
                    db_index=True,
                    help_text='Nome da categoria'
                )),
                ('description', models.TextField(
                    max_length=10000,
                    blank=True,
                    default='',
                    help_text='Descrição da categoria'
                )),
                ('is_active', models.BooleanField(
                    default=True,
                    db_index=True,
                    help_text='Se a categoria está ativa no catálogo'
                )),
                ('created_at', models.DateTimeField(
                    help_text='Data/hora de criação'
                )),
            ],
            options={
                'verbose_name': 'Categoria',
                'verbose_name_plural': 'Categorias',
                'db_table': 'categories',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddIndex(
            model_name='categorymodel',
            index=models.Index(
                fields=['is_active', 'created_at'],
                name='categories_active_created_idx'
            ),
        ),
    ]
