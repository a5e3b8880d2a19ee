"""
Tests for struct rendering.
"""

import pytest

from modelforge.codegen.core.config import GeneratorConfig
from modelforge.codegen.core.model import InputModel
from modelforge.codegen.languages.rust import RustGenerator

STRUCT_DERIVE = "#[derive(Clone, Debug, PartialEq, Default, Serialize, Deserialize)]"


def render(generator, document):
    input_model = InputModel.from_document(document)
    return generator.render_struct(input_model.get(document["$id"]), input_model)


def address(properties, required=()):
    return {
        "$id": "Address",
        "type": "object",
        "properties": properties,
        "required": list(required),
    }


class TestStructDeclaration:
    """Shape of the declaration and its initializer."""

    def test_single_required_field(self, generator):
        output = render(generator, address({"streetName": {"type": "string"}}, ["streetName"]))
        assert output.result == "\n".join(
            [
                "/// Address represents an Address model.",
                STRUCT_DERIVE,
                "pub struct Address {",
                '    #[serde(rename = "streetName")]',
                "    pub street_name: String,",
                "}",
                "",
                "impl Address {",
                "    pub fn new(street_name: String) -> Address {",
                "        Address {",
                "            street_name,",
                "        }",
                "    }",
                "}",
            ]
        )
        assert output.rendered_name == "Address"
        assert output.file_name == "src/address.rs"

    def test_without_initializer(self, bare_generator):
        output = render(
            bare_generator, address({"streetName": {"type": "string"}}, ["streetName"])
        )
        assert "impl Address" not in output.result
        assert output.result.endswith("pub street_name: String,\n}")

    def test_without_comments(self):
        generator = RustGenerator(GeneratorConfig(add_comments=False))
        output = render(generator, address({"name": {"type": "string"}}))
        assert output.result.startswith(STRUCT_DERIVE)

    @pytest.mark.parametrize(
        "model_id,comment",
        [
            ("Address", "/// Address represents an Address model."),
            ("Street", "/// Street represents a Street model."),
        ],
    )
    def test_description_article(self, bare_generator, model_id, comment):
        output = render(bare_generator, {"$id": model_id, "type": "object"})
        assert output.result.split("\n")[0] == comment

    def test_empty_struct(self, bare_generator):
        output = render(bare_generator, address({}))
        assert output.result.endswith("pub struct Address {\n}")

    def test_full_address(self, generator, address_document):
        output = render(generator, address_document)
        assert output.result == "\n".join(
            [
                "/// Address represents an Address model.",
                STRUCT_DERIVE,
                "pub struct Address {",
                '    #[serde(rename = "street_name")]',
                "    pub street_name: String,",
                '    #[serde(rename = "city")]',
                "    pub city: String,",
                '    #[serde(rename = "state")]',
                "    pub state: String,",
                '    #[serde(rename = "house_number")]',
                "    pub house_number: f64,",
                '    #[serde(rename = "array_type")]',
                "    pub array_type: Vec<String>,",
                '    #[serde(rename = "additionalProperties", '
                'skip_serializing_if = "Option::is_none")]',
                "    pub additional_properties: "
                "Option<std::collections::HashMap<String, String>>,",
                '    #[serde(rename = "^S(.?*)test&PatternProperties", '
                'skip_serializing_if = "Option::is_none")]',
                "    pub s_test_pattern_properties: "
                "Option<std::collections::HashMap<String, String>>,",
                "}",
                "",
                "impl Address {",
                "    pub fn new(street_name: String, city: String, state: String, "
                "house_number: f64, array_type: Vec<String>) -> Address {",
                "        Address {",
                "            street_name,",
                "            city,",
                "            state,",
                "            house_number,",
                "            array_type,",
                "            additional_properties: None,",
                "            s_test_pattern_properties: None,",
                "        }",
                "    }",
                "}",
            ]
        )
        assert output.warnings == []


class TestStructFields:
    """Field naming, optionality and rename annotations."""

    @pytest.mark.parametrize(
        "required,rust_type",
        [(["street_name"], "String"), ([], "Option<String>")],
    )
    def test_optionality_follows_required(self, bare_generator, required, rust_type):
        output = render(bare_generator, address({"street_name": {"type": "string"}}, required))
        assert f"pub street_name: {rust_type}," in output.result

    def test_optional_field_skips_none(self, bare_generator):
        output = render(bare_generator, address({"city": {"type": "string"}}))
        assert '#[serde(rename = "city", skip_serializing_if = "Option::is_none")]' in (
            output.result
        )

    @pytest.mark.parametrize(
        "property_name,rust_name",
        [("union", "reserved_union"), ("type", "reserved_type"), ("Self", "reserved_self")],
    )
    def test_reserved_field_keeps_original_rename(self, bare_generator, property_name, rust_name):
        output = render(bare_generator, address({property_name: {"type": "string"}}))
        assert f"pub {rust_name}: Option<String>," in output.result
        assert f'#[serde(rename = "{property_name}"' in output.result

    def test_colliding_field_names_get_suffix(self, bare_generator):
        output = render(
            bare_generator,
            address({"streetName": {"type": "string"}, "street_name": {"type": "string"}}),
        )
        assert "pub street_name: Option<String>," in output.result
        assert "pub street_name1: Option<String>," in output.result

    def test_rename_is_escaped(self, bare_generator):
        output = render(bare_generator, address({'say "hi"': {"type": "string"}}))
        assert r'#[serde(rename = "say \"hi\""' in output.result

    def test_additional_property_name_avoids_declared_property(self, bare_generator):
        document = address({"additionalProperties": {"type": "string"}})
        document["additionalProperties"] = {"type": "integer"}
        output = render(bare_generator, document)
        assert "pub additional_properties: Option<String>," in output.result
        assert "pub reserved_additional_properties: " in output.result
        assert "Option<std::collections::HashMap<String, i32>>" in output.result

    def test_untyped_additional_properties_warn(self, bare_generator):
        document = address({})
        document["additionalProperties"] = True
        output = render(bare_generator, document)
        assert "Option<std::collections::HashMap<String, serde_json::Value>>" in output.result
        assert output.warnings

    def test_escape_hatch_warning_is_logged(self, bare_generator, caplog):
        with caplog.at_level("WARNING", logger="modelforge"):
            render(bare_generator, address({"anything": {}}))
        assert any("anything" in record.getMessage() for record in caplog.records)


class TestInitializer:
    """The generated new() constructor."""

    def test_boxed_required_field_is_wrapped(self, generator):
        document = address({"owner": {"$ref": "Person"}}, ["owner"])
        document["definitions"] = {"Person": {"type": "object"}}
        output = render(generator, document)
        assert "pub owner: Box<crate::Person>," in output.result
        assert "pub fn new(owner: crate::Person) -> Address {" in output.result
        assert "owner: Box::new(owner)," in output.result
        assert output.dependencies == ["Person"]

    def test_optional_fields_start_empty(self, generator):
        output = render(generator, address({"city": {"type": "string"}}))
        assert "pub fn new() -> Address {" in output.result
        assert "city: None," in output.result


class TestStructDependencies:
    def test_tuple_field(self, bare_generator):
        output = render(
            bare_generator,
            address(
                {"tuple_type": {"type": "array", "items": [{"type": "string"}, {"type": "number"}]}}
            ),
        )
        assert "pub tuple_type: Option<Box<AddressTupleType>>," in output.result
        assert output.dependencies == ["AddressTupleType"]
        assert [d.field_name for d in output.rust_module_dependencies] == ["AddressTupleType"]

    def test_two_tuple_fields_are_both_kept(self, bare_generator):
        pair = {"type": "array", "items": [{"type": "string"}, {"type": "number"}]}
        output = render(bare_generator, address({"first": pair, "second": pair}))
        assert [d.field_name for d in output.rust_module_dependencies] == [
            "AddressFirst",
            "AddressSecond",
        ]


class TestStructPresets:
    """Caller presets wrap or replace the default operations."""

    def test_field_type_override(self):
        preset = {
            "struct": {
                "field_type": lambda content, field_name, **kwargs: (
                    "chrono::DateTime<chrono::Utc>" if field_name == "created" else content
                )
            }
        }
        generator = RustGenerator(GeneratorConfig(render_initializer=False), presets=[preset])
        output = render(
            generator,
            address({"created": {"type": "string"}, "name": {"type": "string"}}, ["created"]),
        )
        assert "pub created: chrono::DateTime<chrono::Utc>," in output.result
        assert "pub name: Option<String>," in output.result

    def test_self_wraps_default_output(self):
        preset = {"struct": {"self": lambda content, **kwargs: f"// generated\n{content}"}}
        generator = RustGenerator(GeneratorConfig(render_initializer=False), presets=[preset])
        output = render(generator, address({}))
        assert output.result.startswith("// generated\n/// Address represents")

    def test_additional_content(self):
        preset = {
            "struct": {
                "additional_content": lambda renderer, content, **kwargs: (
                    f"{content}\n\nimpl {renderer.name} {{}}"
                )
            }
        }
        generator = RustGenerator(GeneratorConfig(), presets=[preset])
        output = render(generator, address({}))
        assert output.result.endswith("}\n\nimpl Address {}")

    def test_presets_chain_in_order(self):
        presets = [
            {"struct": {"field_name": lambda content, **kwargs: f"{content}_a"}},
            {"struct": {"field_name": lambda content, **kwargs: f"{content}_b"}},
        ]
        generator = RustGenerator(GeneratorConfig(render_initializer=False), presets=presets)
        output = render(generator, address({"name": {"type": "string"}}))
        assert "pub name_a_b: Option<String>," in output.result
