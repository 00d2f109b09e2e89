"""ASGI entrypoint for the food cost API."""

from household_food_cost.api.app import create_app
from household_food_cost.containers import build_container

app = create_app(build_container())
