"""
Initialize System Command.

Creates the admin user and the global settings row, and seeds the catalog
tables from the bundled calculator list.
"""

from django.core.management.base import BaseCommand
from django.db import transaction


class Command(BaseCommand):
    help = 'Initialize system with default data (admin user, settings, catalog)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--admin-email',
            type=str,
            default='admin@example.com',
            help='Email (and username) of the admin user'
        )
        parser.add_argument(
            '--admin-password',
            type=str,
            default='admin123',
            help='Password for admin user'
        )
        parser.add_argument(
            '--skip-admin',
            action='store_true',
            help='Skip creating admin user'
        )
        parser.add_argument(
            '--skip-catalog',
            action='store_true',
            help='Skip seeding calculators and categories'
        )

    def handle(self, *args, **options):
        with transaction.atomic():
            if not options['skip_admin']:
                self._create_admin_user(options['admin_email'], options['admin_password'])

            self._create_site_settings()

            if not options['skip_catalog']:
                self._seed_catalog()

        from application.catalog.apps import get_catalog_resolver
        get_catalog_resolver().invalidate()

        self.stdout.write(
            self.style.SUCCESS('System initialization completed!')
        )

    def _create_admin_user(self, email, password):
        """Create admin user if not exists."""
        from django.contrib.auth import get_user_model

        User = get_user_model()

        admin_user, created = User.objects.get_or_create(
            email=email,
            defaults={
                'username': email,
                'full_name': 'Administrator',
                'is_admin': True,
                'is_staff': True,
                'is_superuser': True,
            }
        )

        if created:
            admin_user.set_password(password)
            admin_user.save()

            self.stdout.write(
                self.style.SUCCESS(f'Created admin user {email}')
            )
        else:
            if not admin_user.is_admin:
                admin_user.set_admin(True)
            self.stdout.write('Admin user already exists')

    def _create_site_settings(self):
        from infrastructure.persistence.models import SiteSettings

        SiteSettings.load()
        self.stdout.write('Global settings ready')

    def _seed_catalog(self):
        """Copy the bundled calculators and their categories into the catalog tables."""
        from application.catalog.resolver import synthesize_categories
        from domain.catalog.fallback import LOCAL_CALCULATORS
        from infrastructure.persistence.models import Calculator, CalculatorCategory, SiteSettings

        created_categories = 0
        for category in synthesize_categories(LOCAL_CALCULATORS):
            _, created = CalculatorCategory.objects.get_or_create(
                slug=category.slug,
                defaults={
                    'name': category.name,
                    'description': category.description,
                    'icon': category.icon,
                }
            )
            created_categories += created

        created_calculators = 0
        for calc in LOCAL_CALCULATORS:
            _, created = Calculator.objects.get_or_create(
                slug=calc.slug,
                defaults={
                    'name': calc.name,
                    'description': calc.description,
                    'component': calc.component,
                    'icon': calc.icon,
                    'category_slug': calc.category_slug,
                }
            )
            created_calculators += created

        site_settings = SiteSettings.load()
        if not site_settings.categories:
            site_settings.categories = list(
                CalculatorCategory.objects.order_by('name').values_list('name', flat=True)
            )
            site_settings.save(update_fields=['categories', 'updated_at'])

        self.stdout.write(
            f'Catalog seeded: {created_categories} categories, {created_calculators} calculators created'
        )
