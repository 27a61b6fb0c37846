import construction.models
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Construction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('address', models.TextField(blank=True, default='')),
                ('postal_code', models.CharField(blank=True, default='', max_length=20)),
                ('municipality', models.CharField(blank=True, default='', max_length=255)),
                ('company_id', models.IntegerField(blank=True, null=True)),
                ('distributor_id', models.IntegerField(blank=True, null=True)),
                ('hubspot_deal_id', models.CharField(blank=True, max_length=50, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Construction',
                'verbose_name_plural': 'Constructions',
                'db_table': 'construction',
            },
        ),
        migrations.CreateModel(
            name='DocumentationType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('category', models.CharField(blank=True, max_length=100, null=True)),
                ('requires_file', models.BooleanField(default=True)),
                ('hubspot_document', models.CharField(blank=True, max_length=100, null=True)),
            ],
            options={
                'verbose_name': '⚙️ Documentation Type',
                'verbose_name_plural': '⚙️ Documentation Types',
                'db_table': 'documentation_type',
            },
        ),
        migrations.CreateModel(
            name='ServiceStatus',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('is_final', models.BooleanField(default=False)),
                ('is_incidence', models.BooleanField(default=False)),
            ],
            options={
                'verbose_name': '⚙️ Service Status',
                'verbose_name_plural': '⚙️ Service Statuses',
                'db_table': 'services_status',
            },
        ),
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('username', models.CharField(max_length=255)),
                ('company_id', models.IntegerField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'User profile',
                'verbose_name_plural': 'User profiles',
                'db_table': 'users',
            },
        ),
        migrations.CreateModel(
            name='Service',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type_id', models.IntegerField(blank=True, null=True)),
                ('comment', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('construction', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='services', to='construction.construction')),
                ('previous_status', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='construction.servicestatus')),
                ('status', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to='construction.servicestatus')),
            ],
            options={
                'verbose_name': 'Service',
                'verbose_name_plural': 'Services',
                'db_table': 'services',
            },
        ),
        migrations.CreateModel(
            name='Document',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('document_type_id', models.IntegerField()),
                ('document_status_id', models.IntegerField(blank=True, null=True)),
                ('file', models.FileField(blank=True, max_length=500, null=True, upload_to=construction.models.document_upload_path)),
                ('link', models.TextField(blank=True, null=True)),
                ('content_text', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('service', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='construction.service')),
            ],
            options={
                'verbose_name': 'Document',
                'verbose_name_plural': 'Documents',
                'db_table': 'documents',
            },
        ),
        migrations.CreateModel(
            name='ServiceTypeStatus',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('service_type_id', models.IntegerField(blank=True, db_index=True, null=True)),
                ('orden', models.IntegerField(default=0)),
                ('status', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='type_configs', to='construction.servicestatus')),
            ],
            options={
                'verbose_name': '⚙️ Service Type Status',
                'verbose_name_plural': '⚙️ Service Type Statuses',
                'db_table': 'service_type_status',
                'ordering': ['orden'],
            },
        ),
    ]
