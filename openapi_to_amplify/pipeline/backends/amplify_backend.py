"""
Amplify data schema backend.

Emits the IR as a TypeScript module built with the Amplify Gen 2 schema
builder (`a.customType`, `a.ref`, `a.enum`, ...). Blocks are written and
flushed one at a time, in a fixed order:

    const components = { ... };     always
    const subComponents = { ... };  only when there are sub-components
    const enums = { ... };          only when enums were synthesized
    export default ...;
"""

from __future__ import annotations

import logging

from ...utils import ts_property_key, ts_string_literal
from ..analyzer.ir_nodes import IR, ComponentDef, FieldDef, TypeKind, TypeRef
from ..sink import OutputSink
from .base import CodeBackend

logger = logging.getLogger(__name__)

COMPONENTS_BLOCK = "components"
SUB_COMPONENTS_BLOCK = "subComponents"
ENUMS_BLOCK = "enums"


class AmplifyBackend(CodeBackend):
    """Schema emitter for the Amplify data schema builder."""

    TYPE_MAP = {
        "string": "string()",
        "integer": "integer()",
        "float": "float()",
        "boolean": "boolean()",
        "timestamp": "timestamp()",
    }

    TEMPLATE_LANG = "amplify"
    FILE_EXTENSION = "ts"

    # Every builder call hangs off the `a` import
    BUILDER = "a."

    def emit(self, ir: IR, sink: OutputSink) -> None:
        self._write(
            sink,
            self.prefix_template.render(
                GENERATION_COMMENT=self.generation_comment(),
                IMPORT_MODULE=self.config.import_module,
            ),
        )

        blocks = [COMPONENTS_BLOCK]
        self._write(sink, self._render_components(COMPONENTS_BLOCK, ir.included))
        if ir.sub_components:
            blocks.append(SUB_COMPONENTS_BLOCK)
            self._write(sink, self._render_components(SUB_COMPONENTS_BLOCK, ir.sub_components))
        if ir.enums:
            blocks.append(ENUMS_BLOCK)
            entries = [(enum_def.name, self.BUILDER + self._enum_expression(enum_def.values)) for enum_def in ir.enums]
            self._write(sink, self.render_block(ENUMS_BLOCK, entries))

        self._write(sink, self.suffix_template.render(BLOCKS=blocks, INDENT=self.config.indent))
        logger.debug("Emitted blocks: %s", ", ".join(blocks))

    def _write(self, sink: OutputSink, text: str) -> None:
        sink.write(text)
        sink.flush()

    def _render_components(self, block_name: str, components: list[ComponentDef]) -> str:
        entries = [(component.name, self.component_expression(component)) for component in components]
        return self.render_block(block_name, entries)

    def render_block(self, block_name: str, entries: list[tuple[str, str]]) -> str:
        """Render one `const <block_name> = { ... };` declaration."""
        return self.block_template.render(
            BLOCK_NAME=block_name,
            ENTRIES=[(ts_property_key(name), expression) for name, expression in entries],
            INDENT=self.config.indent,
        )

    def component_expression(self, component: ComponentDef) -> str:
        """Declaration of a component; one without properties is opaque JSON."""
        if not component.fields:
            return self.BUILDER + self._json()
        return self.BUILDER + self._custom_type(component.fields, depth=1)

    def field_expression(self, field: FieldDef, depth: int) -> str:
        """Type expression of a property, with its required modifier."""
        expression = self.BUILDER + self.translate_type(field.type_ref, depth)
        if field.is_required:
            expression += ".required()"
        return expression

    def translate_type(self, type_ref: TypeRef, depth: int = 0) -> str:
        match type_ref.kind:
            case TypeKind.REF | TypeKind.ENUM_REF:
                return f"ref({ts_string_literal(type_ref.name)})"
            case TypeKind.INLINE_ENUM:
                return self._enum_expression(type_ref.enum_values)
            case TypeKind.PRIMITIVE if type_ref.name in self.TYPE_MAP:
                return self.TYPE_MAP[type_ref.name]
            case TypeKind.ARRAY if type_ref.type_args:
                return f"{self.translate_type(type_ref.type_args[0], depth)}.array()"
            case TypeKind.COMPOSITE if type_ref.fields:
                return self._custom_type(type_ref.fields, depth + 1)
            case _:
                return self._json()

    def _custom_type(self, fields: list[FieldDef], depth: int) -> str:
        """
        Render `customType({...})` for fields.

        Args:
            fields: The fields of the custom type
            depth: Indentation level of the closing brace
        """
        indent = self.config.indent
        lines = ["customType({"]
        for field in fields:
            lines.append(f"{indent * (depth + 1)}{ts_property_key(field.name)}: {self.field_expression(field, depth)},")
        lines.append(f"{indent * depth}}})")
        return "\n".join(lines)

    def _enum_expression(self, values: list[str]) -> str:
        return f"enum([{','.join(ts_string_literal(value) for value in values)}])"

    def _json(self) -> str:
        return "json()"
