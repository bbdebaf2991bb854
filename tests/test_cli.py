import json

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def invoke(*args):
    return runner.invoke(app, ["--no-banner", *args])


class TestDecoratorCommand:
    def test_default_orders(self):
        result = invoke("decorator")
        assert result.exit_code == 0
        assert result.stdout == (
            "Espresso\n100\n"
            "Espresso, Milk, Whip\n150\n"
            "Espresso, Milk, Whip, Chocolate\n200\n"
        )

    def test_recipe_plus_condiment(self):
        result = invoke("decorator", "--recipe", "mocha", "--add", "milk")
        assert result.exit_code == 0
        assert result.stdout == "Espresso, Whip, Chocolate, Milk\n200\n"

    def test_unknown_condiment(self):
        result = invoke("decorator", "--add", "caramel")
        assert result.exit_code == 2

    def test_unknown_recipe(self):
        result = invoke("decorator", "--recipe", "latte")
        assert result.exit_code == 2

    def test_menu(self):
        result = invoke("menu")
        assert result.exit_code == 0
        assert "mocha" in result.stdout
        assert "Espresso, Milk, Whip, Chocolate" in result.stdout


class TestStrategyCommand:
    def test_default_sequence(self):
        result = invoke("strategy")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Apply SEPIA filter to image",
            "Apply B&W filter to image",
            "Apply DISTORTION filter to image",
        ]

    def test_explicit_filters(self):
        result = invoke("strategy", "--filter", "distortion", "--filter", "none")
        assert result.exit_code == 0
        assert result.stdout == "Apply DISTORTION filter to image\n"

    def test_unknown_filter(self):
        result = invoke("strategy", "--filter", "blur")
        assert result.exit_code == 2


class TestNullObjectCommand:
    def test_pattern_is_default(self):
        result = invoke("null-object")
        assert result.exit_code == 0
        assert "Taxes for Unknown.\nIncomeTax: 0 RUB, PropertyTax: 0 RUB\n" in result.stdout

    def test_problem_variant_crashes(self):
        result = invoke("null-object", "--variant", "problem")
        assert result.exit_code == 1
        assert isinstance(result.exception, AttributeError)
        assert "Taxes for User#1." in result.stdout

    def test_anti_pattern(self):
        result = invoke("null-object", "--variant", "anti-pattern", "--user-id", "9")
        assert result.exit_code == 0
        assert result.stdout.endswith("Taxes for unknown.\nIncomeTax: 0 RUB, PropertyTax: 0 RUB\n")

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("PATTERN_DEMOS_DEBUG_DUMP", "false")
        monkeypatch.setenv("PATTERN_DEMOS_CURRENCY", "USD")
        result = invoke("null-object", "--user-id", "2")
        assert result.exit_code == 0
        assert result.stdout == "Taxes for User#2.\nIncomeTax: 7 USD, PropertyTax: 15 USD\n"

    def test_unknown_variant(self):
        result = invoke("null-object", "--variant", "maybe")
        assert result.exit_code == 2

    def test_registry(self):
        result = invoke("registry")
        assert result.exit_code == 0
        assert "User#3" in result.stdout
        assert "anti-pattern" in result.stdout


class TestGlobalOptions:
    def test_all(self):
        result = invoke("all")
        assert result.exit_code == 0
        assert "Espresso, Milk, Whip, Chocolate\n200\n" in result.stdout
        assert "Apply B&W filter to image\n" in result.stdout
        assert "Taxes for User#1.\n" in result.stdout

    def test_banner(self):
        result = runner.invoke(app, ["strategy"])
        assert result.exit_code == 0
        assert "PATTERN DEMOS" in result.stdout

    def test_fixtures_file(self, tmp_path):
        path = tmp_path / "fixtures.json"
        path.write_text(json.dumps({"decorator": {"orders": [["whip"]]}}), encoding="utf-8")
        result = invoke("--fixtures", str(path), "decorator")
        assert result.exit_code == 0
        assert result.stdout == "Espresso, Whip\n130\n"

    def test_broken_fixtures_file(self, tmp_path):
        path = tmp_path / "fixtures.json"
        path.write_text("[]", encoding="utf-8")
        result = invoke("--fixtures", str(path), "strategy")
        assert result.exit_code == 1

    def test_bad_log_level(self):
        result = invoke("--log-level", "LOUD", "strategy")
        assert result.exit_code == 2

    def test_bad_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("PATTERN_DEMOS_LOG_LEVEL", "LOUD")
        result = invoke("strategy")
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)


class TestTablesWithBracketedData:
    def test_menu_shows_labels_literally(self, tmp_path):
        path = tmp_path / "fixtures.json"
        condiments = {
            "milk": {"label": "Milk[/]", "surcharge": 20},
            "whip": {"label": "Whip", "surcharge": 30},
            "chocolate": {"label": "Chocolate", "surcharge": 50},
        }
        path.write_text(json.dumps({"decorator": {"condiments": condiments}}), encoding="utf-8")
        result = invoke("--fixtures", str(path), "menu")
        assert result.exit_code == 0
        assert "Milk[/]" in result.stdout

    def test_registry_shows_accounts_literally(self, tmp_path):
        path = tmp_path / "fixtures.json"
        records = {"1": {"account": "[/]x", "income_tax": 1, "property_tax": 2}}
        path.write_text(json.dumps({"null_object": {"records": records}}), encoding="utf-8")
        result = invoke("--fixtures", str(path), "registry")
        assert result.exit_code == 0
        assert "[/]x" in result.stdout
