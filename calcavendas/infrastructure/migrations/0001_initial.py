from django.db import migrations, models

import calcavendas.infrastructure.document_stores


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Documento',
            fields=[
                ('id', models.CharField(default=calcavendas.infrastructure.document_stores.gerar_id_documento, editable=False, max_length=40, primary_key=True, serialize=False)),
                ('colecao', models.CharField(db_index=True, max_length=50)),
                ('dados', models.JSONField(default=dict)),
                ('criado_em', models.DateTimeField(auto_now_add=True)),
                ('atualizado_em', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Documento',
                'verbose_name_plural': 'Documentos',
                'db_table': 'infra_documento',
                'ordering': ['criado_em', 'id'],
            },
        ),
    ]
