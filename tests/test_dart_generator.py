import json

import pytest

from json_to_class import (
    EmptyIdentifierError,
    GeneratorError,
    RootNotObjectError,
    UnclassifiableNumberError,
    generate_from_json,
    json_to_class,
)
from json_to_class.codegen.core.config import GeneratorConfig
from json_to_class.codegen.core.naming import NamingRule
from json_to_class.codegen.languages.dart import DartGenerator, dart_type_name
from json_to_class.codegen.core.schema import (
    BOOL,
    FLOAT,
    INTEGER,
    TEXT,
    UNTYPED,
    ClassDefinition,
    ClassRef,
    Container,
)

ESCAPED_KEY_OUTPUT = r'''import 'package:json_annotation/json_annotation.dart';

part 'foo.g.dart';

@JsonSerializable()
class Foo {
    @JsonKey(name: "\$a-b?")
    final String aB;
    Foo({
        required this.aB,
    });

    factory Foo.fromJson(Map<String, dynamic> json) => _$FooFromJson(json);

    Map<String, dynamic> toJson() => _$FooToJson(this);
}
'''

COLLISION_OUTPUT = '''import 'package:json_annotation/json_annotation.dart';

part 'foo.g.dart';

@JsonSerializable()
class Foo {
    final A a;
    final D d;
    Foo({
        required this.a,
        required this.d,
    });

    factory Foo.fromJson(Map<String, dynamic> json) => _$FooFromJson(json);

    Map<String, dynamic> toJson() => _$FooToJson(this);
}

@JsonSerializable()
class A {
    final String b;
    A({
        required this.b,
    });

    factory A.fromJson(Map<String, dynamic> json) => _$AFromJson(json);

    Map<String, dynamic> toJson() => _$AToJson(this);
}

@JsonSerializable()
class D {
    final A1 a;
    D({
        required this.a,
    });

    factory D.fromJson(Map<String, dynamic> json) => _$DFromJson(json);

    Map<String, dynamic> toJson() => _$DToJson(this);
}

@JsonSerializable()
class A1 {
    final String e;
    A1({
        required this.e,
    });

    factory A1.fromJson(Map<String, dynamic> json) => _$A1FromJson(json);

    Map<String, dynamic> toJson() => _$A1ToJson(this);
}
'''


class TestDartTypeName:
    def test_primitives(self):
        assert dart_type_name(BOOL) == "bool"
        assert dart_type_name(INTEGER) == "int"
        assert dart_type_name(FLOAT) == "double"
        assert dart_type_name(TEXT) == "String"
        assert dart_type_name(UNTYPED) == "dynamic"

    def test_containers(self):
        assert dart_type_name(Container(INTEGER)) == "List<int>"
        assert dart_type_name(Container(Container(UNTYPED))) == "List<List<dynamic>>"

    def test_class_ref_uses_current_name(self):
        definition = ClassDefinition("Item")
        ref = ClassRef(definition)
        definition.name = "Item1"

        assert dart_type_name(Container(ref)) == "List<Item1>"


class TestDartOutput:
    def test_escaped_wire_name(self):
        assert json_to_class('{"$a-b?": "x"}', root_name="Foo") == ESCAPED_KEY_OUTPUT

    def test_collision_classes(self):
        code = json_to_class(
            '{"a": {"b": "c"}, "d": {"a": {"e": "c"}}}', root_name="Foo"
        )
        assert code == COLLISION_OUTPUT

    def test_duplicate_classes_rendered_once(self):
        code = json_to_class(
            '{"a": {"b": "c"}, "d": {"a": {"b": "c"}}}', root_name="Foo"
        )

        assert code.count("class A {") == 1
        assert "class A1" not in code
        assert "    final A a;\n    D({" in code

    def test_types(self):
        data = {
            "i": 1,
            "f": 1.5,
            "b": True,
            "s": "x",
            "n": None,
            "l": [1],
            "m": [[1.0]],
            "e": [],
        }
        code = generate_from_json(data, root_name="Foo").code

        for line in [
            "final int i;",
            "final double f;",
            "final bool b;",
            "final String s;",
            "final dynamic n;",
            "final List<int> l;",
            "final List<List<double>> m;",
            "final List<dynamic> e;",
        ]:
            assert line in code

    def test_leading_digits_and_digit_boundaries(self):
        code = json_to_class('{"123ab": 1, "a1b": 2}', root_name="Foo")

        assert '    @JsonKey(name: "123ab")\n    final int ab;' in code
        assert '    @JsonKey(name: "a1b")\n    final int a1B;' in code

    def test_reserved_words(self):
        code = json_to_class('{"class": 1, "list": {"a": 1}}', root_name="Foo")

        assert '    @JsonKey(name: "class")\n    final int class_;' in code
        assert "    final List_ list;" in code
        assert "class List_ {" in code

    def test_quotes_in_wire_name(self):
        code = json_to_class(json.dumps({'say "hi"': 1}), root_name="Foo")
        assert '@JsonKey(name: "say \\"hi\\"")' in code

    def test_snake_rule(self):
        code = json_to_class(
            '{"user_name": 1, "userId": 2}', root_name="Foo", naming_rule="snake"
        )

        assert "@JsonSerializable(fieldRename: FieldRename.snake)" in code
        assert "    final int userName;" in code
        assert '@JsonKey(name: "userId")' in code
        assert '@JsonKey(name: "user_name")' in code

    def test_key_matching_rule_has_no_override(self):
        code = json_to_class('{"user_name": 1, "id": 2}', root_name="Foo", naming_rule="snake")

        assert "    final int id;\n    Foo(" in code
        assert code.count("@JsonKey") == 1

    @pytest.mark.parametrize("rule", ["pascal", "kebab"])
    def test_field_rename_annotation(self, rule):
        code = json_to_class('{"a": 1}', root_name="Foo", naming_rule=rule)
        assert f"@JsonSerializable(fieldRename: FieldRename.{rule})" in code

    def test_part_file_uses_snake_case_root(self):
        code = json_to_class('{"a": 1}', root_name="api response")

        assert "part 'api_response.g.dart';" in code
        assert "class ApiResponse {" in code

    def test_default_root_name(self):
        code = json_to_class('{"a": 1}')
        assert "class Untitled {" in code

    def test_ends_with_single_newline(self):
        code = json_to_class('{"a": 1}', root_name="Foo")
        assert code.endswith("}\n")
        assert not code.endswith("\n\n")

    def test_empty_object(self):
        code = json_to_class("{}", root_name="Foo")
        assert "class Foo {\n    Foo({\n    });" in code


class TestGeneratorConfig:
    def test_indent_size(self):
        result = generate_from_json({"a": 1}, config={"indent_size": 2}, root_name="Foo")
        assert "\n  final int a;\n" in result.code

    def test_annotation_import(self):
        result = generate_from_json(
            {"a": 1}, config={"annotation_import": "package:foo/foo.dart"}
        )
        assert result.code.startswith("import 'package:foo/foo.dart';\n")

    def test_config_object(self):
        config = GeneratorConfig(root_name="Bar", naming_rule=NamingRule.KEBAB)
        generator = DartGenerator(config)

        assert generator.config.naming_rule is NamingRule.KEBAB
        result = generate_from_json({"a": 1}, config=config)
        assert "class Bar {" in result.code

    def test_arguments_override_config(self):
        config = GeneratorConfig(root_name="Bar")
        result = generate_from_json({"a": 1}, config=config, root_name="Baz")

        assert "class Baz {" in result.code
        assert config.root_name == "Bar"


class TestGenerationResult:
    def test_metadata(self):
        result = generate_from_json(
            {"a": {"b": "c"}, "d": {"a": {"e": "c"}}}, root_name="Foo"
        )

        assert result.success
        assert result.error_message is None
        assert result.metadata["language"] == "dart"
        assert result.metadata["file_extension"] == ".dart"
        assert result.metadata["class_count"] == 4
        assert result.metadata["root_class"] == "Foo"
        assert result.metadata["naming_rule"] == "none"
        assert result.metadata["has_untyped"] is False

    def test_wire_name_override_count(self):
        result = generate_from_json({"a_b": 1, "c": {"d_e": 2}, "f": 3}, root_name="Foo")
        assert result.metadata["wire_name_overrides"] == 2

    def test_warnings(self):
        result = generate_from_json(
            {"n": None, "a": {"b": 1}, "d": {"a": {"e": 1}}, "x": {}}, root_name="Foo"
        )

        assert any("Untyped field Foo.n" in w for w in result.warnings)
        assert any("renamed to 'A1'" in w for w in result.warnings)
        assert any("Class 'X' has no fields" in w for w in result.warnings)
        assert result.metadata["has_untyped"] is True

    def test_root_not_object(self):
        result = generate_from_json([1, 2])

        assert not result.success
        assert result.code == ""
        assert isinstance(result.exception, RootNotObjectError)

    def test_unclassifiable_number(self):
        result = generate_from_json({"x": float("nan")})

        assert not result.success
        assert isinstance(result.exception, UnclassifiableNumberError)

    def test_root_name_without_letters(self):
        result = generate_from_json({"a": 1}, root_name="123")

        assert not result.success
        assert isinstance(result.exception, EmptyIdentifierError)

    def test_deep_nesting(self):
        data = {}
        for _ in range(5000):
            data = {"a": data}

        result = generate_from_json(data)

        assert not result.success
        assert isinstance(result.exception, RecursionError)

    def test_json_to_class_raises_on_failure(self):
        with pytest.raises(GeneratorError):
            json_to_class("[1]")

    def test_json_to_class_malformed_input(self):
        with pytest.raises(json.JSONDecodeError):
            json_to_class("{")
