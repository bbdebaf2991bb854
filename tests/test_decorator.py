import itertools

import pytest

from core.domain.models import BaseBeverageSpec, CondimentSpec, DecoratorFixture
from core.domain.reports import format_price
from core.errors import UnknownComponentError
from core.interfaces.beverage import Beverage
from patterns.decorator import (
    Condiment,
    Espresso,
    add_condiments,
    build_beverage,
    chocolate,
    milk,
    recipe_condiments,
    run_decorator_demo,
    whip,
)


class TestEspresso:
    def test_defaults(self):
        espresso = Espresso()
        assert espresso.cost() == 100.0
        assert espresso.description() == "Espresso"

    def test_from_spec(self):
        espresso = Espresso.from_spec(BaseBeverageSpec(label="Ristretto", price=80))
        assert espresso.cost() == 80
        assert espresso.description() == "Ristretto"

    def test_satisfies_beverage_protocol(self):
        assert isinstance(Espresso(), Beverage)
        assert isinstance(milk(Espresso()), Beverage)


class TestCondiment:
    def test_full_chain(self):
        drink = chocolate(whip(milk(Espresso())))
        assert drink.cost() == 200
        assert drink.description() == "Espresso, Milk, Whip, Chocolate"

    def test_wrapping_an_already_decorated_beverage(self):
        cappuccino = whip(milk(Espresso()))
        with_chocolate = chocolate(cappuccino)
        assert cappuccino.cost() == 150
        assert with_chocolate.cost() == 200
        assert with_chocolate.wrapped is cappuccino

    def test_requires_a_beverage(self):
        with pytest.raises(TypeError):
            Condiment(None, label="Milk", surcharge=20)

    def test_same_condiment_twice(self):
        drink = milk(milk(Espresso()))
        assert drink.cost() == 140
        assert drink.description() == "Espresso, Milk, Milk"

    @pytest.mark.parametrize("order", list(itertools.permutations([milk, whip, chocolate])))
    def test_cost_does_not_depend_on_order(self, order):
        drink = Espresso()
        for wrap in order:
            drink = wrap(drink)
        assert drink.cost() == 200

    def test_description_follows_wrap_order(self):
        assert chocolate(milk(Espresso())).description() == "Espresso, Milk, Chocolate"
        assert milk(chocolate(Espresso())).description() == "Espresso, Chocolate, Milk"

    def test_calls_are_pure(self):
        drink = whip(milk(Espresso()))
        assert drink.cost() == drink.cost()
        assert drink.description() == drink.description()


class TestBuildBeverage:
    def test_empty_chain_is_the_base(self, fixtures):
        fixture = fixtures.decorator
        drink = build_beverage(fixture.base, fixture.condiments, [])
        assert isinstance(drink, Espresso)
        assert drink.cost() == 100

    def test_custom_condiments(self):
        condiments = {"syrup": CondimentSpec(label="Syrup", surcharge=12.5)}
        drink = add_condiments(Espresso(), condiments, ["syrup"])
        assert drink.cost() == 112.5
        assert drink.description() == "Espresso, Syrup"

    def test_unknown_condiment(self, fixtures):
        fixture = fixtures.decorator
        with pytest.raises(UnknownComponentError) as exc_info:
            build_beverage(fixture.base, fixture.condiments, ["milk", "caramel"])
        assert exc_info.value.name == "caramel"
        assert "milk" in exc_info.value.known

    def test_recipes(self, fixtures):
        assert recipe_condiments(fixtures.decorator.recipes, "mocha") == ["whip", "chocolate"]
        with pytest.raises(UnknownComponentError):
            recipe_condiments(fixtures.decorator.recipes, "latte")


class TestDecoratorDemo:
    def test_default_output(self, fixtures, captured):
        run_decorator_demo(fixtures.decorator, captured.console)
        assert captured.text == (
            "Espresso\n100\n"
            "Espresso, Milk, Whip\n150\n"
            "Espresso, Milk, Whip, Chocolate\n200\n"
        )

    def test_orders_override(self, fixtures, captured):
        beverages = run_decorator_demo(fixtures.decorator, captured.console, orders=[["chocolate"]])
        assert len(beverages) == 1
        assert captured.text == "Espresso, Chocolate\n150\n"

    def test_fixture_rejects_unknown_condiment(self):
        with pytest.raises(ValueError):
            DecoratorFixture(orders=[["milk", "caramel"]])


class TestFormatPrice:
    @pytest.mark.parametrize(
        "value, expected",
        [(100.0, "100"), (200, "200"), (12.5, "12.5"), (0.0, "0"), (99.99, "99.99"), (1_000_000.0, "1000000")],
    )
    def test_format(self, value, expected):
        assert format_price(value) == expected
