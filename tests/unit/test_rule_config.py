"""
Unit tests for YAML rule configuration and the schema builder.
"""

import textwrap

import pytest

from src.core.models import Issue
from src.core.rules import RuleConfigBuilder, RuleConfigLoader, RuleEngine

EMPLOYEE_YAML = textwrap.dedent(
    """
    entity: staff
    fields:
      employee_code:
        type: string
        label: 従業員コード
        required: true
        max_length: 10
        pattern: "^[a-zA-Z0-9_-]+$"
      salary_type:
        type: choice
        label: 給与形態
        choices: [hourly, daily, monthly]
        required: true
      hourly_rate:
        type: integer
        label: 時給
        minimum: 0
      daily_rate:
        type: integer
        label: 日給
        minimum: 0
      is_active:
        type: boolean
        default: true
    conditionals:
      - discriminator: salary_type
        requirements:
          hourly: [hourly_rate]
          daily: [daily_rate]
          monthly: [daily_rate]
        messages:
          hourly_rate: 時給タイプの場合は時給を入力してください
    """
)


def write(tmp_path, text, name="rules.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestRuleConfigLoader:
    """Tests for RuleConfigLoader"""

    def test_load_schema(self, tmp_path):
        schema = RuleConfigLoader(write(tmp_path, EMPLOYEE_YAML)).load_schema()

        assert schema.entity == "staff"
        assert schema.field_names == ["employee_code", "salary_type", "hourly_rate", "daily_rate", "is_active"]
        assert schema.get_field("hourly_rate").field_type == "integer"
        assert schema.conditionals[0].required_fields("monthly") == ["daily_rate"]

    def test_loaded_schema_validates(self, tmp_path):
        engine = RuleEngine(RuleConfigLoader(write(tmp_path, EMPLOYEE_YAML)).load_schema())

        hourly = engine.validate({"employee_code": "E1", "salary_type": "hourly"})
        monthly = engine.validate({"employee_code": "E1", "salary_type": "monthly"})

        assert hourly.issues == [Issue(field="hourly_rate", message="時給タイプの場合は時給を入力してください")]
        assert monthly.issues == [Issue(field="daily_rate", message="日給は必須です")]
        assert engine.validate({"employee_code": "E1", "salary_type": "daily", "daily_rate": 8000}).ok

    def test_entity_defaults_to_file_stem(self, tmp_path):
        path = write(tmp_path, "fields:\n  name:\n    required: true\n", name="customer.yaml")
        assert RuleConfigLoader(path).load_schema().entity == "customer"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuleConfigLoader(tmp_path / "nope.yaml")

    def test_missing_fields_section(self, tmp_path):
        with pytest.raises(ValueError, match="fields"):
            RuleConfigLoader(write(tmp_path, "entity: x\n")).load_schema()

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid YAML"):
            RuleConfigLoader(write(tmp_path, "fields: [unclosed\n")).load_schema()

    def test_unknown_field_key(self, tmp_path):
        text = "fields:\n  name:\n    maxlen: 5\n"
        with pytest.raises(ValueError, match="Unknown keys"):
            RuleConfigLoader(write(tmp_path, text)).load_schema()

    def test_unknown_type(self, tmp_path):
        text = "fields:\n  name:\n    type: datetime\n"
        with pytest.raises(ValueError, match="Invalid rule for field 'name'"):
            RuleConfigLoader(write(tmp_path, text)).load_schema()

    def test_conditional_on_undeclared_field(self, tmp_path):
        text = textwrap.dedent(
            """
            fields:
              mode:
                type: choice
                choices: [a]
            conditionals:
              - discriminator: mode
                requirements:
                  a: [ghost]
            """
        )
        with pytest.raises(ValueError, match="undeclared"):
            RuleConfigLoader(write(tmp_path, text)).load_schema()

    def test_conditional_without_discriminator(self, tmp_path):
        text = "fields:\n  a: {}\nconditionals:\n  - requirements: {x: [a]}\n"
        with pytest.raises(ValueError, match="discriminator"):
            RuleConfigLoader(write(tmp_path, text)).load_schema()


class TestRuleConfigBuilder:
    """Tests for RuleConfigBuilder"""

    def test_build_schema(self):
        schema = (
            RuleConfigBuilder("expense")
            .add_string("expense_item", label="項目名", required=True, max_length=255)
            .add_integer("amount", label="金額", required=True, minimum=0)
            .add_number("distance", minimum=0)
            .add_boolean("paid", default=False)
            .add_choice("kind", ["a", "b"])
            .build()
        )

        assert schema.entity == "expense"
        assert [rule.field_type for rule in schema.field_rules] == [
            "string", "integer", "number", "boolean", "choice"
        ]

    def test_choice_requires_choices(self):
        with pytest.raises(ValueError):
            RuleConfigBuilder("x").add_choice("kind", [])

    def test_invalid_regex(self):
        with pytest.raises(ValueError, match="Invalid regex"):
            RuleConfigBuilder("x").add_string("code", pattern="[unclosed")

    def test_inverted_bounds(self):
        with pytest.raises(ValueError):
            RuleConfigBuilder("x").add_integer("n", minimum=10, maximum=1)
        with pytest.raises(ValueError):
            RuleConfigBuilder("x").add_string("s", min_length=5, max_length=2)

    def test_duplicate_fields(self):
        builder = RuleConfigBuilder("x").add_string("a").add_string("a")
        with pytest.raises(ValueError, match="Duplicate"):
            builder.build()

    @pytest.mark.parametrize(
        "add, options",
        [
            ("add_integer", {"pattern": r"\d{3}"}),
            ("add_integer", {"max_length": 3}),
            ("add_number", {"min_length": 1}),
            ("add_boolean", {"pattern": "true"}),
            ("add_string", {"minimum": 0}),
            ("add_boolean", {"maximum": 1}),
        ],
    )
    def test_constraints_must_fit_field_type(self, add, options):
        with pytest.raises(ValueError, match="cannot be used on"):
            getattr(RuleConfigBuilder("x"), add)("code", **options)

    def test_constraints_for_choice_fields(self):
        schema = RuleConfigBuilder("x").add_choice("kind", ["ab", "cd"], max_length=2).build()
        assert schema.get_field("kind").max_length == 2

    def test_unknown_message_placeholder(self):
        with pytest.raises(ValueError, match="Unknown placeholders"):
            RuleConfigBuilder("x").add_string("n", required=True, messages={"required": "名前{必須}"})
        with pytest.raises(ValueError, match="Unknown placeholders"):
            RuleConfigBuilder("x").add_integer("n", messages={"maximum": "{minimum}以下"})

    def test_malformed_message_template(self):
        with pytest.raises(ValueError, match="Malformed"):
            RuleConfigBuilder("x").add_string("n", required=True, messages={"required": "名前{"})

    def test_escaped_braces_in_messages(self):
        schema = (
            RuleConfigBuilder("x")
            .add_string("n", required=True, messages={"required": "名前{{必須}}"})
            .add_integer("m", maximum=5, messages={"maximum": "{label}は{maximum}まで"})
            .build()
        )

        result = RuleEngine(schema).validate({"m": 6})

        assert result.issues == [
            Issue(field="n", message="名前{必須}"),
            Issue(field="m", message="mは5まで"),
        ]

    def test_boolean_discriminator(self):
        schema = (
            RuleConfigBuilder("site")
            .add_boolean("has_toilet", default=False)
            .add_string("toilet_distance", label="トイレまでの距離")
            .add_conditional("has_toilet", {"true": ["toilet_distance"]})
            .build()
        )
        engine = RuleEngine(schema)

        assert engine.validate({"has_toilet": True}).issues == [
            Issue(field="toilet_distance", message="トイレまでの距離は必須です")
        ]
        assert engine.validate({"has_toilet": "yes"}).ok is False
        assert engine.validate({"has_toilet": False}).ok is True
        assert engine.validate({}).ok is True

    def test_integer_discriminator(self):
        schema = (
            RuleConfigBuilder("visit")
            .add_integer("visits")
            .add_string("schedule")
            .add_conditional("visits", {"2": ["schedule"]})
            .build()
        )
        engine = RuleEngine(schema)

        assert [i.field for i in engine.validate({"visits": "2"}).issues] == ["schedule"]
        assert [i.field for i in engine.validate({"visits": 2.0}).issues] == ["schedule"]
        assert engine.validate({"visits": 3}).ok is True

    @pytest.mark.parametrize(
        "add, requirements",
        [
            ("add_boolean", {"yes": ["other"]}),
            ("add_integer", {"two": ["other"]}),
            ("add_integer", {"02": ["other"]}),
        ],
    )
    def test_unreachable_discriminator_values(self, add, requirements):
        builder = getattr(RuleConfigBuilder("x"), add)("mode").add_string("other")
        with pytest.raises(ValueError, match="can never take"):
            builder.add_conditional("mode", requirements).build()

    def test_choice_discriminator_values_must_be_choices(self):
        builder = (
            RuleConfigBuilder("x")
            .add_choice("mode", ["a", "b"])
            .add_string("other")
            .add_conditional("mode", {"c": ["other"]})
        )
        with pytest.raises(ValueError, match="can never take"):
            builder.build()


class TestRuleConfigLoaderChecks:
    """Tests for schema errors surfacing from YAML files"""

    def test_pattern_on_integer_field(self, tmp_path):
        text = 'fields:\n  code:\n    type: integer\n    pattern: "\\\\d{3}"\n'
        with pytest.raises(ValueError, match="Invalid rule for field 'code'"):
            RuleConfigLoader(write(tmp_path, text)).load_schema()

    def test_literal_brace_in_message(self, tmp_path):
        text = "fields:\n  n:\n    required: true\n    messages:\n      required: '名前{必須}'\n"
        with pytest.raises(ValueError, match="Invalid rule for field 'n'"):
            RuleConfigLoader(write(tmp_path, text)).load_schema()

    def test_boolean_keys_in_yaml(self, tmp_path):
        text = textwrap.dedent(
            """
            fields:
              has_toilet:
                type: boolean
              toilet_distance:
                label: トイレまでの距離
            conditionals:
              - discriminator: has_toilet
                requirements:
                  true: [toilet_distance]
            """
        )

        schema = RuleConfigLoader(write(tmp_path, text)).load_schema()
        result = RuleEngine(schema).validate({"has_toilet": "true"})

        assert schema.conditionals[0].requirements == {"true": ["toilet_distance"]}
        assert result.issues == [Issue(field="toilet_distance", message="トイレまでの距離は必須です")]
