from django.apps import AppConfig, apps


class CheckoutAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "checkout"

    context = None

    def ready(self):
        from .conf import CheckoutConfig, CheckoutContext

        # refuse to start without gateway / identity credentials
        self.context = CheckoutContext.build(CheckoutConfig.from_settings())


def get_context():
    return apps.get_app_config("checkout").context
