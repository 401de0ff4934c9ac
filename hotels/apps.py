from django.apps import AppConfig


class HotelsConfig(AppConfig):
    name = 'hotels'
    verbose_name = 'Hotels'
    default_auto_field = 'django.db.models.AutoField'
