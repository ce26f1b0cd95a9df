"""
End-to-end tests for PipelineGenerator runs.
"""

from __future__ import annotations

import logging

import pytest

from openapi_to_amplify.pipeline import (
    CodeGeneratorConfig,
    NameCollisionError,
    OutputConfig,
    OutputExistsError,
    PipelineGenerator,
    RunPhase,
    UnknownComponentError,
    UnsupportedOutputError,
)

PET_SCHEMAS = {
    "Pet": {
        "properties": {
            "kind": {"type": "string", "enum": ["dog", "cat"]},
            "owner": {"$ref": "#/components/schemas/Owner"},
        },
        "required": ["kind"],
    },
    "Owner": {"properties": {"name": {"type": "string"}}},
}

PET_EXPECTED = "\n".join(
    [
        "import { a } from '@aws-amplify/backend';",
        "",
        "const components = {",
        "\tPet: a.customType({",
        "\t\tkind: a.ref('PetKindEnum'),",
        "\t\towner: a.ref('Owner'),",
        "\t}),",
        "};",
        "",
        "const subComponents = {",
        "\tOwner: a.customType({",
        "\t\tname: a.string(),",
        "\t}),",
        "};",
        "",
        "const enums = {",
        "\tPetKindEnum: a.enum(['dog','cat']),",
        "};",
        "",
        "export default {",
        "\t...components,",
        "\t...subComponents,",
        "\t...enums,",
        "};",
        "",
    ]
)


class RecordingSink:
    def __init__(self):
        self.text = ""
        self.flushes = 0
        self.closes = 0

    def write(self, text):
        assert self.closes == 0, "write after close"
        self.text += text

    def flush(self):
        self.flushes += 1

    def close(self):
        self.closes += 1


def generate(schemas, include=None):
    config = CodeGeneratorConfig(include=include or [], add_generation_comment=False)
    return PipelineGenerator(schemas, config).generate()


def test_pet_example():
    assert generate(PET_SCHEMAS, include=["Pet"]) == PET_EXPECTED


def test_pet_example_without_filter_includes_everything():
    out = generate(PET_SCHEMAS)

    assert "const subComponents" not in out
    assert "const components = {\n\tOwner: a.customType({" in out
    assert "\tPet: a.customType({" in out
    assert out.endswith("export default {\n\t...components,\n\t...enums,\n};\n")


def test_idempotent():
    assert generate(PET_SCHEMAS, include=["Pet"]) == generate(PET_SCHEMAS, include=["Pet"])


def test_insertion_order_does_not_change_output():
    schemas = {
        "Zebra": {"properties": {"stripes": {"type": "integer"}, "mood": {"type": "string", "enum": ["calm"]}}},
        "Ant": {"properties": {"legs": {"type": "integer"}, "role": {"type": "string", "enum": ["worker"]}}},
        "Mole": {"properties": {}},
    }
    reversed_schemas = dict(reversed(list(schemas.items())))

    out = generate(schemas)

    assert out == generate(reversed_schemas)
    assert out.index("\tAnt:") < out.index("\tMole:") < out.index("\tZebra:")
    assert out.index("AntRoleEnum: a.enum") < out.index("ZebraMoodEnum: a.enum")


def test_component_without_properties_key_is_json():
    out = generate({"Anything": {"type": "object"}, "Empty": {"properties": {}}})

    assert "\tAnything: a.json(),\n" in out
    assert "\tEmpty: a.json(),\n" in out


def test_inline_object_property():
    schemas = {
        "Pet": {
            "properties": {
                "details": {
                    "type": "object",
                    "required": ["weight"],
                    "properties": {"weight": {"type": "number"}, "born": {"type": "integer", "format": "unix-time"}},
                }
            },
            "required": ["details"],
        }
    }

    out = generate(schemas)

    assert "\t\tdetails: a.customType({\n\t\t\tweight: a.float().required(),\n\t\t\tborn: a.timestamp(),\n\t\t}).required(),\n" in out


def test_enum_dedup_across_components():
    schemas = {
        "pet": {"properties": {"kind_name": {"type": "string", "enum": ["first"]}}},
        "pet_kind": {"properties": {"name": {"type": "string", "enum": ["second"]}}},
    }

    out = generate(schemas)

    assert "\tPetKindNameEnum: a.enum(['first']),\n" in out
    assert "second" not in out


def test_run_closes_sink_once_on_success():
    sink = RecordingSink()
    generator = PipelineGenerator(PET_SCHEMAS, CodeGeneratorConfig(include=["Pet"], add_generation_comment=False))

    generator.write(sink)

    assert sink.text == PET_EXPECTED
    assert sink.closes == 1
    assert sink.flushes >= 5
    assert generator.phase == RunPhase.CLOSED
    assert set(generator.context.sub_components) == {"Owner"}


def test_run_closes_sink_once_on_failure():
    sink = RecordingSink()
    generator = PipelineGenerator({"Pet": {"properties": {"owner": {"$ref": "#/components/schemas/Owner"}}}})

    with pytest.raises(UnknownComponentError):
        generator.write(sink)

    assert sink.closes == 1
    assert generator.phase == RunPhase.CLOSED


def test_generate_to_file(tmp_path):
    path = tmp_path / "amplify" / "data" / "components.ts"
    config = CodeGeneratorConfig(include=["Pet"], add_generation_comment=False)

    PipelineGenerator(PET_SCHEMAS, config).generate_to_file(path)

    assert path.read_text(encoding="utf-8") == PET_EXPECTED


def test_generate_to_file_refuses_to_overwrite(tmp_path):
    path = tmp_path / "components.ts"
    path.write_text("keep me")

    with pytest.raises(OutputExistsError):
        PipelineGenerator(PET_SCHEMAS).generate_to_file(path)

    assert path.read_text() == "keep me"


def test_generate_to_file_overwrites_when_allowed(tmp_path):
    path = tmp_path / "components.ts"
    path.write_text("replace me")
    config = CodeGeneratorConfig(add_generation_comment=False, output=OutputConfig(overwrite=True))

    PipelineGenerator(PET_SCHEMAS, config).generate_to_file(path)

    assert "replace me" not in path.read_text()


def test_generate_to_empty_existing_file(tmp_path):
    path = tmp_path / "components.ts"
    path.write_text("")

    PipelineGenerator(PET_SCHEMAS).generate_to_file(path)

    assert "export default" in path.read_text()


def test_generate_to_file_rejects_other_extensions(tmp_path):
    with pytest.raises(UnsupportedOutputError):
        PipelineGenerator(PET_SCHEMAS).generate_to_file(tmp_path / "components.json")


def test_failed_file_run_closes_partial_output(tmp_path):
    path = tmp_path / "components.ts"
    schemas = {"Pet": {"properties": {"owner": {"$ref": "#/components/schemas/Owner"}}}}

    with pytest.raises(UnknownComponentError):
        PipelineGenerator(schemas).generate_to_file(path)

    assert path.exists()
    assert path.read_text() == ""


def test_colliding_component_names_fail():
    sink = RecordingSink()
    schemas = {
        "pet_owner": {"properties": {"a": {"type": "string"}}},
        "PET_OWNER": {"properties": {"b": {"type": "integer"}}},
    }

    with pytest.raises(NameCollisionError) as excinfo:
        PipelineGenerator(schemas).write(sink)

    assert excinfo.value.type_name == "PetOwner"
    assert sorted(excinfo.value.component_names) == ["PET_OWNER", "pet_owner"]
    assert sink.text == ""
    assert sink.closes == 1


def test_collision_with_sub_component_fails():
    schemas = {
        "Pet": {"properties": {"owner": {"$ref": "#/components/schemas/pet.owner"}}},
        "petowner": {"properties": {}},
        "pet.owner": {"properties": {}},
    }

    with pytest.raises(NameCollisionError):
        generate(schemas, include=["Pet", "petowner"])


def test_excluded_components_do_not_collide():
    schemas = {"pet_owner": {"properties": {}}, "PET_OWNER": {"properties": {}}}

    assert "\tPetOwner: a.json(),\n" in generate(schemas, include=["pet_owner"])


def test_generator_can_run_twice(caplog):
    generator = PipelineGenerator(PET_SCHEMAS, CodeGeneratorConfig(include=["Pet"], add_generation_comment=False))

    with caplog.at_level(logging.DEBUG, logger="openapi_to_amplify.pipeline.generator"):
        assert generator.generate() == PET_EXPECTED
        assert generator.generate() == PET_EXPECTED

    transitions = [record.getMessage() for record in caplog.records if record.getMessage().startswith("Run phase")]
    assert transitions == [
        "Run phase: pending -> resolving",
        "Run phase: resolving -> translating",
        "Run phase: translating -> emitting",
        "Run phase: emitting -> closed",
    ] * 2
    assert generator.phase == RunPhase.CLOSED


class FailingFlushSink(RecordingSink):
    """Fails every flush after the first `healthy_flushes` ones."""

    def __init__(self, healthy_flushes=0):
        super().__init__()
        self.healthy_flushes = healthy_flushes

    def flush(self):
        super().flush()
        if self.flushes > self.healthy_flushes:
            raise OSError("disk full")


def test_failed_flush_does_not_hide_run_error(caplog):
    sink = FailingFlushSink()
    generator = PipelineGenerator({"Pet": {"properties": {"owner": {"$ref": "#/components/schemas/Owner"}}}})

    with caplog.at_level(logging.WARNING), pytest.raises(UnknownComponentError):
        generator.write(sink)

    assert sink.closes == 1
    assert "Failed to flush" in caplog.text
    assert generator.phase == RunPhase.CLOSED


def test_failed_final_flush_of_successful_run_propagates():
    # five blocks are flushed by the backend, the sixth flush closes the run
    sink = FailingFlushSink(healthy_flushes=5)
    generator = PipelineGenerator(PET_SCHEMAS, CodeGeneratorConfig(include=["Pet"], add_generation_comment=False))

    with pytest.raises(OSError, match="disk full"):
        generator.write(sink)

    assert sink.text == PET_EXPECTED
    assert sink.flushes == 6
    assert sink.closes == 1
    assert generator.phase == RunPhase.CLOSED
