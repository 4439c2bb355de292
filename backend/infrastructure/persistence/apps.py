from django.apps import AppConfig


class PersistenceConfig(AppConfig):
    name = 'infrastructure.persistence'
    label = 'persistence'
    verbose_name = 'Persistence'
    default_auto_field = 'django.db.models.BigAutoField'
