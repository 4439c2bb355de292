import uuid

import django.contrib.auth.validators
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import simple_history.models
from django.conf import settings
from django.db import migrations, models

import infrastructure.persistence.models.users


HISTORY_TYPE_CHOICES = [('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')]


def _history_fields():
    return [
        ('history_id', models.AutoField(primary_key=True, serialize=False)),
        ('history_date', models.DateTimeField(db_index=True)),
        ('history_change_reason', models.CharField(max_length=100, null=True)),
        ('history_type', models.CharField(choices=HISTORY_TYPE_CHOICES, max_length=1)),
        ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
    ]


def _history_options(name):
    return {
        'verbose_name': f'historical {name}',
        'verbose_name_plural': f'historical {name}s',
        'ordering': ('-history_date', '-history_id'),
        'get_latest_by': ('history_date', 'history_id'),
    }


def _historical_audit_fields():
    return [
        ('created_by', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Created by')),
        ('updated_by', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Updated by')),
    ]


def _audit_fields(model_name):
    return [
        ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name=f'{model_name}_created', to=settings.AUTH_USER_MODEL, verbose_name='Created by')),
        ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name=f'{model_name}_updated', to=settings.AUTH_USER_MODEL, verbose_name='Updated by')),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='first name')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='last name')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
                ('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('username', models.CharField(max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name='Username')),
                ('email', models.EmailField(max_length=254, unique=True, verbose_name='Email')),
                ('full_name', models.CharField(blank=True, max_length=200, verbose_name='Full name')),
                ('is_admin', models.BooleanField(db_index=True, default=False, verbose_name='Admin panel access')),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'verbose_name': 'User',
                'verbose_name_plural': 'Users',
                'db_table': 'users',
                'ordering': ['-date_joined'],
            },
            managers=[
                ('objects', infrastructure.persistence.models.users.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name='CalculatorCategory',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_active', models.BooleanField(db_index=True, default=True, verbose_name='Active')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('slug', models.SlugField(max_length=100, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('icon', models.CharField(default='Calculator', max_length=100, verbose_name='Icon')),
                *_audit_fields('calculatorcategory'),
            ],
            options={
                'verbose_name': 'Calculator category',
                'verbose_name_plural': 'Calculator categories',
                'db_table': 'calculator_categories',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Calculator',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_active', models.BooleanField(db_index=True, default=True, verbose_name='Active')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('slug', models.SlugField(max_length=100, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('component', models.CharField(max_length=100, verbose_name='Client component')),
                ('icon', models.CharField(default='Calculator', max_length=100, verbose_name='Icon')),
                ('category_slug', models.SlugField(max_length=100, verbose_name='Category slug')),
                *_audit_fields('calculator'),
            ],
            options={
                'verbose_name': 'Calculator',
                'verbose_name_plural': 'Calculators',
                'db_table': 'calculators',
                'ordering': ['created_at', 'slug'],
            },
        ),
        migrations.CreateModel(
            name='SiteSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('key', models.CharField(default='global', editable=False, max_length=50, unique=True, verbose_name='Key')),
                ('ai_suggestions', models.BooleanField(default=True, verbose_name='AI suggestions enabled')),
                ('default_precision', models.PositiveSmallIntegerField(default=2, validators=[django.core.validators.MaxValueValidator(10)], verbose_name='Decimal places for results')),
                ('site_name', models.CharField(default='OmniCalculator', max_length=200, verbose_name='Site name')),
                ('site_description', models.TextField(blank=True, default='Your go-to solution for all calculation needs.', verbose_name='Site description')),
                ('support_email', models.EmailField(blank=True, max_length=254, verbose_name='Support email')),
                ('contact_phone', models.CharField(blank=True, max_length=50, verbose_name='Contact phone')),
                ('address', models.TextField(blank=True, verbose_name='Address')),
                ('facebook_url', models.URLField(blank=True, verbose_name='Facebook')),
                ('twitter_url', models.URLField(blank=True, verbose_name='Twitter')),
                ('linkedin_url', models.URLField(blank=True, verbose_name='LinkedIn')),
                ('instagram_url', models.URLField(blank=True, verbose_name='Instagram')),
                ('categories', models.JSONField(blank=True, default=list, verbose_name='Categories')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Updated by')),
            ],
            options={
                'verbose_name': 'Site settings',
                'verbose_name_plural': 'Site settings',
                'db_table': 'site_settings',
            },
        ),
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('timestamp', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Time')),
                ('user_ip', models.GenericIPAddressField(blank=True, null=True, verbose_name='IP address')),
                ('user_agent', models.CharField(blank=True, max_length=500, verbose_name='User agent')),
                ('action', models.CharField(choices=[('login', 'Signed in'), ('logout', 'Signed out'), ('register', 'Registered'), ('session', 'Admin session started'), ('set_admin', 'Admin access changed'), ('delete_user', 'User deleted'), ('settings_update', 'Settings updated'), ('catalog_refresh', 'Catalog cache refreshed')], db_index=True, max_length=20, verbose_name='Action')),
                ('object_repr', models.CharField(blank=True, max_length=500, verbose_name='Object')),
                ('extra_data', models.JSONField(blank=True, default=dict, verbose_name='Extra data')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audit_logs', to=settings.AUTH_USER_MODEL, verbose_name='User')),
            ],
            options={
                'verbose_name': 'Audit log entry',
                'verbose_name_plural': 'Audit log',
                'db_table': 'audit_log',
                'ordering': ['-timestamp'],
                'indexes': [
                    models.Index(fields=['user', 'timestamp'], name='audit_log_user_id_7b6c1e_idx'),
                    models.Index(fields=['action', 'timestamp'], name='audit_log_action_5f2d0a_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='HistoricalCalculatorCategory',
            fields=[
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name='ID')),
                ('is_active', models.BooleanField(db_index=True, default=True, verbose_name='Active')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('slug', models.SlugField(max_length=100, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('icon', models.CharField(default='Calculator', max_length=100, verbose_name='Icon')),
                *_historical_audit_fields(),
                *_history_fields(),
            ],
            options=_history_options('Calculator category'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalCalculator',
            fields=[
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name='ID')),
                ('is_active', models.BooleanField(db_index=True, default=True, verbose_name='Active')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('slug', models.SlugField(max_length=100, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('component', models.CharField(max_length=100, verbose_name='Client component')),
                ('icon', models.CharField(default='Calculator', max_length=100, verbose_name='Icon')),
                ('category_slug', models.SlugField(max_length=100, verbose_name='Category slug')),
                *_historical_audit_fields(),
                *_history_fields(),
            ],
            options=_history_options('Calculator'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalSiteSettings',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('key', models.CharField(db_index=True, default='global', editable=False, max_length=50, verbose_name='Key')),
                ('ai_suggestions', models.BooleanField(default=True, verbose_name='AI suggestions enabled')),
                ('default_precision', models.PositiveSmallIntegerField(default=2, validators=[django.core.validators.MaxValueValidator(10)], verbose_name='Decimal places for results')),
                ('site_name', models.CharField(default='OmniCalculator', max_length=200, verbose_name='Site name')),
                ('site_description', models.TextField(blank=True, default='Your go-to solution for all calculation needs.', verbose_name='Site description')),
                ('support_email', models.EmailField(blank=True, max_length=254, verbose_name='Support email')),
                ('contact_phone', models.CharField(blank=True, max_length=50, verbose_name='Contact phone')),
                ('address', models.TextField(blank=True, verbose_name='Address')),
                ('facebook_url', models.URLField(blank=True, verbose_name='Facebook')),
                ('twitter_url', models.URLField(blank=True, verbose_name='Twitter')),
                ('linkedin_url', models.URLField(blank=True, verbose_name='LinkedIn')),
                ('instagram_url', models.URLField(blank=True, verbose_name='Instagram')),
                ('categories', models.JSONField(blank=True, default=list, verbose_name='Categories')),
                ('updated_by', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Updated by')),
                *_history_fields(),
            ],
            options=_history_options('Site settings'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
