from patterns.decorator.coffee import (
    Condiment,
    Espresso,
    add_condiments,
    build_beverage,
    chocolate,
    milk,
    recipe_condiments,
    whip,
)
from patterns.decorator.demo import print_beverage, run_decorator_demo

__all__ = [
    "Condiment",
    "Espresso",
    "add_condiments",
    "build_beverage",
    "chocolate",
    "milk",
    "print_beverage",
    "recipe_condiments",
    "run_decorator_demo",
    "whip",
]
