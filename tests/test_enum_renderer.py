"""
Tests for enum and union rendering.
"""

import pytest

from modelforge.codegen.core.config import GeneratorConfig
from modelforge.codegen.core.model import InputModel
from modelforge.codegen.languages.rust import RustGenerator
from modelforge.codegen.languages.rust.renderers.enum_renderer import (
    TAGGED_ENUM_DERIVE,
    UNIT_ENUM_DERIVE,
    literal_kind,
    literal_string,
)


def render(generator, document):
    input_model = InputModel.from_document(document)
    return generator.render_enum(input_model.get(document["$id"]), input_model)


def states(values, **extra):
    return {"$id": "States", "enum": values, **extra}


class TestLiterals:
    @pytest.mark.parametrize(
        "value,kind",
        [("a", "string"), (1, "number"), (1.5, "number"), (True, "boolean"),
         (None, "null"), ({"a": 1}, "object"), ([1], "object")],
    )
    def test_literal_kind(self, value, kind):
        assert literal_kind(value) == kind

    @pytest.mark.parametrize(
        "value,spelling",
        [("Texas", "Texas"), (1, "1"), (False, "false"), (None, "null")],
    )
    def test_literal_string(self, value, spelling):
        assert literal_string(value) == spelling


class TestUniformEnums:
    """Literals of one JSON kind become unit variants."""

    def test_string_enum(self, generator):
        output = render(generator, states(["Texas", "Alabama", "California"], type="string"))
        assert output.result == "\n".join(
            [
                "/// States enum of type: String",
                UNIT_ENUM_DERIVE,
                "pub enum States {",
                '    #[serde(rename = "Texas")]',
                "    Texas,",
                '    #[serde(rename = "Alabama")]',
                "    Alabama,",
                '    #[serde(rename = "California")]',
                "    California,",
                "}",
                "",
                "impl Default for States {",
                "    fn default() -> States {",
                "        Self::Texas",
                "    }",
                "}",
            ]
        )
        assert output.rendered_name == "States"
        assert output.file_name == "src/states.rs"

    def test_declared_default_is_selected(self, generator):
        output = render(
            generator, states(["Texas", "Alabama"], type="string", default="Alabama")
        )
        assert "Self::Alabama" in output.result

    def test_number_enum_uses_member_names(self, generator):
        output = render(generator, states([1, 2, 3], type="integer", default=2))
        assert "/// States enum of type: i32" in output.result
        assert '#[serde(rename = "1")]\n    States1,' in output.result
        assert "Self::States2" in output.result

    def test_punctuation_is_dropped_from_variant_names(self, bare_generator):
        output = render(bare_generator, states(["click&pay"]))
        assert '#[serde(rename = "click&pay")]\n    ClickPay,' in output.result

    def test_invalid_identifier_falls_back_to_member_name(self, bare_generator):
        output = render(bare_generator, states(["1st"]))
        assert '#[serde(rename = "1st")]\n    States1St,' in output.result

    def test_reserved_variant_is_prefixed_with_owner(self, bare_generator):
        output = render(bare_generator, states(["Self", "other"]))
        assert "StatesSelf," in output.result
        assert "Other," in output.result

    def test_duplicate_variant_names_get_suffix(self, bare_generator):
        output = render(bare_generator, states(["a-b", "a_b"]))
        assert "    AB,\n" in output.result
        assert "    AB1,\n" in output.result

    def test_without_defaults(self, bare_generator):
        output = render(bare_generator, states(["Texas"]))
        assert "impl Default" not in output.result
        assert output.result.endswith("    Texas,\n}")

    def test_empty_enum_has_no_default(self, generator):
        output = render(generator, states([]))
        assert "impl Default" not in output.result
        assert output.result.endswith("pub enum States {\n}")


class TestHeterogeneousEnums:
    """Mixed literal kinds become a tagged union keyed by position."""

    def test_mixed_literals(self, generator):
        output = render(generator, states(["Texas", 1, "1", False, {"test": "test"}]))
        assert output.result == "\n".join(
            [
                "/// States enum of type: serde_json::Value",
                TAGGED_ENUM_DERIVE,
                "pub enum States {",
                '    #[serde(rename = "0")]',
                "    Texas(String),",
                '    #[serde(rename = "1")]',
                "    F64(f64),",
                '    #[serde(rename = "2")]',
                "    States1(String),",
                '    #[serde(rename = "3")]',
                "    Bool(bool),",
                '    #[serde(rename = "4")]',
                "    HashMap(std::collections::HashMap<String, String>),",
                "}",
                "",
                "impl Default for States {",
                "    fn default() -> States {",
                '        Self::Texas("Texas".to_string())',
                "    }",
                "}",
            ]
        )

    @pytest.mark.parametrize(
        "default,expected",
        [
            (True, "Self::Bool(true)"),
            (1, "Self::F64(1.0)"),
            (None, "Self::Null"),
            ("Texas", 'Self::Texas("Texas".to_string())'),
        ],
    )
    def test_default_payload(self, generator, default, expected):
        output = render(generator, states(["Texas", 1, True, None], default=default))
        assert expected in output.result

    def test_boolean_default_does_not_match_number(self, generator):
        output = render(generator, states([1, True], default=True))
        assert "Self::Bool(true)" in output.result

    def test_repeated_kinds_get_unique_names(self, bare_generator):
        output = render(bare_generator, states([1, 2, "x"]))
        assert "F64(f64)," in output.result
        assert "F641(f64)," in output.result


class TestUnions:
    """Nodes that list several types render as an enum of those types."""

    def test_one_of(self, generator):
        document = {"$id": "Value", "oneOf": [{"type": "string"}, {"type": "number"}]}
        output = render(generator, document)
        assert output.result == "\n".join(
            [
                "/// Value enum of type: [string, number]",
                TAGGED_ENUM_DERIVE,
                "pub enum Value {",
                '    #[serde(rename = "0")]',
                "    String(String),",
                '    #[serde(rename = "1")]',
                "    F64(f64),",
                "}",
                "",
                "impl Default for Value {",
                "    fn default() -> Value {",
                "        Self::String(Default::default())",
                "    }",
                "}",
            ]
        )
        assert len(output.warnings) == 1
        assert "Value output will be unstable" in output.warnings[0]

    def test_nullable_member(self, bare_generator):
        output = render(bare_generator, {"$id": "Maybe", "type": ["string", "null"]})
        assert "String(String)," in output.result
        assert "    Null,\n" in output.result

    def test_referenced_members(self, generator):
        document = {
            "$id": "Pet",
            "oneOf": [{"$ref": "#/definitions/Cat"}, {"$ref": "#/definitions/Dog"}],
            "definitions": {
                "Cat": {"type": "object", "properties": {"lives": {"type": "integer"}}},
                "Dog": {"type": "object"},
            },
        }
        output = render(generator, document)
        assert output.result == "\n".join(
            [
                "/// Pet enum of type: [Cat, Dog]",
                TAGGED_ENUM_DERIVE,
                "pub enum Pet {",
                '    #[serde(rename = "0")]',
                "    Cat(Box<crate::Cat>),",
                '    #[serde(rename = "1")]',
                "    Dog(Box<crate::Dog>),",
                "}",
                "",
                "impl Default for Pet {",
                "    fn default() -> Pet {",
                "        Self::Cat(Default::default())",
                "    }",
                "}",
            ]
        )
        assert output.dependencies == ["Cat", "Dog"]
        assert "Pet output will be unstable" in output.warnings[0]

    def test_referenced_and_typed_members(self, bare_generator):
        document = {
            "$id": "Payload",
            "anyOf": [{"$ref": "Cat"}, {"type": "string"}, {"type": "string"}],
            "definitions": {"Cat": {"type": "object"}},
        }
        output = render(bare_generator, document)
        assert '    #[serde(rename = "0")]\n    Cat(Box<crate::Cat>),' in output.result
        assert '    #[serde(rename = "1")]\n    String(String),' in output.result
        assert 'rename = "2"' not in output.result


class TestEnumPresets:
    def test_item_override(self):
        preset = {
            "enum": {
                "item": lambda content, variant, **kwargs: f"// {variant.tag}\n{content}"
            }
        }
        generator = RustGenerator(GeneratorConfig(render_defaults=False), presets=[preset])
        output = render(generator, states(["Texas"]))
        assert '    // Texas\n    #[serde(rename = "Texas")]\n    Texas,' in output.result
