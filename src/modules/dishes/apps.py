from django.apps import AppConfig


class DishesConfig(AppConfig):
    name = "modules.dishes"
    label = "dishes"
