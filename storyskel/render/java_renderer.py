"""Render stories as Java class skeletons."""

from ..config import ClauseKind
from ..story.models import ClauseRecord, IdentifierTable
from .base import BaseRenderer

CLASS_HEADER_TEMPLATE = "public class {type_name} {{\n"

METHOD_TEMPLATE = (
    '    @{label}("{fragment}")\n'
    "    public void {method_name}(){{\n"
    "        //TODO\n"
    "    }}\n"
    "\n"
)

CLASS_FOOTER = "}"


class JavaSkeletonRenderer(BaseRenderer):
    """Render a story as a Java class with one annotated stub per fragment.

    Methods follow document order: every Given fragment, then every When
    fragment, then every Then fragment. Fragment text is emitted as is.
    """

    file_extension = "java"

    def render(self, record: ClauseRecord, identifiers: IdentifierTable) -> str:
        """Render the class skeleton."""
        self.check_identifiers(record, identifiers)

        parts = [CLASS_HEADER_TEMPLATE.format(type_name=identifiers.type_name)]

        for kind in ClauseKind.ordered():
            for fragment, method_name in zip(record.fragments_for(kind), identifiers.methods_for(kind)):
                parts.append(
                    METHOD_TEMPLATE.format(label=kind.label, fragment=fragment, method_name=method_name)
                )

        parts.append(CLASS_FOOTER)
        return "".join(parts)
